"""In-memory LED strip that records every frame."""

from collections.abc import Sequence

from ledsectional.models import Color


class MemoryStrip:
    """Keeps every frame it is shown; used headless and in tests."""

    def __init__(self) -> None:
        self.frames: list[tuple[Color, ...]] = []
        self.closed = False

    @property
    def last_frame(self) -> tuple[Color, ...] | None:
        """Most recent frame, or None if nothing was shown yet."""
        return self.frames[-1] if self.frames else None

    def show(self, colors: Sequence[Color]) -> None:
        self.frames.append(tuple(colors))

    def close(self) -> None:
        self.closed = True
