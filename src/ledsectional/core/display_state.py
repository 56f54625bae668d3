"""Display state: the LED color buffer, brightness and lightning flashing."""

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from ledsectional.colors import COLORS
from ledsectional.exceptions import BufferSizeMismatchError, LedIndexOutOfBoundsError
from ledsectional.models import Color

if TYPE_CHECKING:
    from ledsectional.orchestration.mapping import MappingResult

logger = logging.getLogger(__name__)


class FlashState(str, Enum):
    """Lightning state of the recorded index set as a whole."""

    IDLE = "idle"  # Buffer holds mapped colors
    FLASHING = "flashing"  # Recorded indices forced to white


class DisplayState:
    """
    Owns the ordered color buffer for the strip.

    The buffer always holds full-intensity colors. Brightness is applied by
    `scaled_buffer()` at read time so category and lightning logic work on
    true color values.

    Lightning is a two-state machine over one index set:

    - IDLE: every index holds its mapped color
    - FLASHING: recorded indices are white, `saved` keeps what they held

    `set_lightning_indices()` records the set and snapshots the colors to
    restore. `apply_flash()` and `restore()` toggle between the two states
    and are safe to call at any rate. The set is only replaced by the next
    `set_lightning_indices()` call.

    Owned by a single control loop; not thread-safe.
    """

    def __init__(self, num_leds: int, brightness: int = 255) -> None:
        """
        Initialize an all-off display.

        Args:
            num_leds: Number of LEDs on the strip
            brightness: Brightness level (0-255, clamped)
        """
        self._leds: list[Color] = [COLORS.UNKNOWN] * num_leds
        self._brightness = _clamp_brightness(brightness)
        self._lightning_indices: tuple[int, ...] = ()
        self._saved: dict[int, Color] = {}
        self._flash_state = FlashState.IDLE

    @property
    def num_leds(self) -> int:
        """Number of LEDs in the buffer."""
        return len(self._leds)

    @property
    def buffer(self) -> tuple[Color, ...]:
        """Current unscaled colors, one per LED."""
        return tuple(self._leds)

    @property
    def brightness(self) -> int:
        """Brightness level in effect (0-255)."""
        return self._brightness

    @property
    def lightning_indices(self) -> tuple[int, ...]:
        """Indices currently under lightning control."""
        return self._lightning_indices

    @property
    def saved_colors(self) -> dict[int, Color]:
        """Pre-flash colors for the lightning indices."""
        return dict(self._saved)

    @property
    def flash_state(self) -> FlashState:
        """Whether the lightning set is currently flashed."""
        return self._flash_state

    @property
    def is_flashing(self) -> bool:
        return self._flash_state is FlashState.FLASHING

    def get(self, index: int) -> Color:
        """
        Get the color at an index.

        Raises:
            LedIndexOutOfBoundsError: If index is outside the buffer
        """
        self._check_index(index)
        return self._leds[index]

    def set(self, index: int, color: Color) -> None:
        """
        Set the color at an index.

        Raises:
            LedIndexOutOfBoundsError: If index is outside the buffer
        """
        self._check_index(index)
        self._leds[index] = color

    def set_all(self, color: Color) -> None:
        """Fill every LED with one color (status indicators)."""
        self._leds = [color] * len(self._leds)

    def set_brightness(self, brightness: int) -> None:
        """Change the brightness level (clamped to 0-255)."""
        self._brightness = _clamp_brightness(brightness)
        logger.debug(f"Brightness set to {self._brightness}")

    def load(self, buffer: Sequence[Color]) -> None:
        """
        Replace the whole buffer with freshly mapped colors.

        Any flash in progress is abandoned; the caller records the new
        lightning set afterwards.

        Raises:
            BufferSizeMismatchError: If the buffer length differs from num_leds
        """
        if len(buffer) != len(self._leds):
            raise BufferSizeMismatchError(expected=len(self._leds), actual=len(buffer))
        self._leds = list(buffer)
        self._flash_state = FlashState.IDLE

    def apply(self, result: "MappingResult") -> None:
        """Load a mapping cycle's buffer and lightning set in one step."""
        self.load(result.buffer)
        self.set_lightning_indices(result.lightning_indices)

    # -- Lightning management --

    def set_lightning_indices(self, indices: Iterable[int]) -> None:
        """
        Record which indices flash and snapshot their current colors.

        Out-of-range indices are dropped; duplicates collapse to the first
        occurrence.

        Args:
            indices: LED indices eligible for flashing this cycle
        """
        # Never snapshot white as a restore target
        if self.is_flashing:
            self.restore()

        recorded: list[int] = []
        for index in indices:
            if not 0 <= index < len(self._leds):
                logger.warning(f"Ignoring lightning index {index} (num_leds: {len(self._leds)})")
                continue
            if index not in recorded:
                recorded.append(index)

        self._lightning_indices = tuple(recorded)
        self._saved = {index: self._leds[index] for index in recorded}
        self._flash_state = FlashState.IDLE
        if recorded:
            logger.debug(f"Lightning indices: {recorded}")

    def apply_flash(self) -> bool:
        """
        Set every recorded index to the lightning color.

        Returns:
            True if any index was set, False when the set is empty
        """
        if not self._lightning_indices:
            return False

        for index in self._lightning_indices:
            self._leds[index] = COLORS.LIGHTNING
        self._flash_state = FlashState.FLASHING
        return True

    def restore(self) -> None:
        """Write the pre-flash colors back; the recorded set is kept."""
        for index, color in self._saved.items():
            self._leds[index] = color
        self._flash_state = FlashState.IDLE

    # -- Output --

    def scaled_buffer(self) -> list[Color]:
        """
        Return the buffer with brightness applied.

        Each channel becomes round(v * brightness / 255). The stored buffer
        is not modified.
        """
        if self._brightness == 255:
            return list(self._leds)
        return [color.scaled(self._brightness) for color in self._leds]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._leds):
            raise LedIndexOutOfBoundsError(index=index, num_leds=len(self._leds))


def _clamp_brightness(brightness: int) -> int:
    return min(max(brightness, 0), 255)
