"""Display buffer exceptions."""

from .base import LedSectionalError


class DisplayError(LedSectionalError):
    """Display buffer was used incorrectly."""
    pass


class LedIndexOutOfBoundsError(DisplayError, IndexError):
    """LED index lies outside the buffer."""

    def __init__(self, index: int, num_leds: int):
        super().__init__(
            user_message=f"LED index {index} out of bounds (num_leds: {num_leds})",
            recovery_hint=f"Valid indices are 0-{num_leds - 1}" if num_leds else "The buffer is empty",
        )
        self.index = index
        self.num_leds = num_leds


class BufferSizeMismatchError(DisplayError, ValueError):
    """Replacement buffer length differs from the LED count."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            user_message=f"Display buffer has {actual} colors, expected {expected}",
            recovery_hint="Restart after changing the airport list; the LED count is fixed at boot",
        )
        self.expected = expected
        self.actual = actual
