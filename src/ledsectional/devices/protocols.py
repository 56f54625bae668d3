"""LED strip output protocol."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ledsectional.models import Color


@runtime_checkable
class LedStrip(Protocol):
    """Protocol for anything that can display a frame of LED colors.

    A hardware driver (WS2812 over SPI/PWM, a network bridge, ...)
    implements this and is handed to the run loop. Frames arrive already
    brightness-scaled, one color per LED in strip order.
    """

    def show(self, colors: Sequence[Color]) -> None:
        """
        Display one frame.

        Args:
            colors: One color per LED, index-aligned with the airport list
        """
        ...

    def close(self) -> None:
        """Turn the strip off and release the device."""
        ...
