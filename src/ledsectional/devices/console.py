"""Terminal preview of the LED strip."""

import logging
from collections.abc import Sequence
from typing import IO, Optional

import click

from ledsectional.models import Color

logger = logging.getLogger(__name__)

LED_GLYPH = "●"


class ConsoleStrip:
    """
    Renders each frame as a row of colored dots in the terminal.

    Useful for developing without hardware. Colors are emitted as 24-bit
    ANSI escapes; pass ``color=False`` to print hex values instead.
    """

    def __init__(self, output: Optional[IO[str]] = None, color: Optional[bool] = None):
        """
        Initialize the console strip.

        Args:
            output: Stream to write to (defaults to stdout)
            color: Force ANSI colors on or off (None = auto-detect)
        """
        self._output = output
        self._color = color
        self.frames_shown = 0

    def show(self, colors: Sequence[Color]) -> None:
        if self._color is False:
            line = " ".join(c.to_hex() for c in colors)
        else:
            line = "".join(
                click.style(LED_GLYPH, fg=c.to_rgb_tuple()) if not c.is_off else " "
                for c in colors
            )
        click.echo(line, file=self._output, color=self._color)
        self.frames_shown += 1

    def close(self) -> None:
        logger.debug(f"Console strip closed after {self.frames_shown} frames")
