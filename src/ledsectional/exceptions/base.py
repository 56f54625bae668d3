"""Base exception for the LED sectional.

An error ends up in one of two places:

- the CLI, which prints `user_message` and `recovery_hint` and exits 1
- the run loop, which logs `log_line()` and puts the whole strip into a
  fault display until the next good cycle

`fault_status` names the status color (an attribute of
`ledsectional.colors.COLORS`) the run loop shows while the error is in
effect. Errors without one never reach the strip: they stop the program
before the loop starts.
"""

from typing import ClassVar, Optional


class LedSectionalError(Exception):
    """
    Base exception for all LED sectional errors.

    Attributes:
        user_message: Short message for the terminal
        technical_message: Message for the log (defaults to user_message)
        recoverable: True if the next fetch cycle may succeed
        recovery_hint: What the user can change to fix it
        fault_status: COLORS attribute shown on the strip, or None
    """

    fault_status: ClassVar[Optional[str]] = None

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def log_line(self) -> str:
        """Return a one-line log summary: error type, retry outcome and detail."""
        outcome = "will retry" if self.recoverable else "fatal"
        return f"{type(self).__name__} ({outcome}): {self.technical_message}"
