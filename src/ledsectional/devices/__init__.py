"""LED strip outputs."""

from .console import ConsoleStrip
from .memory import MemoryStrip
from .protocols import LedStrip

__all__ = ["ConsoleStrip", "LedStrip", "MemoryStrip"]
