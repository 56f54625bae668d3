"""Core mapping logic: category colors and display state."""

from .color_mapper import CATEGORY_COLORS, LEGEND_COLORS, category_color, special_color
from .display_state import DisplayState, FlashState

__all__ = [
    "CATEGORY_COLORS",
    "DisplayState",
    "FlashState",
    "LEGEND_COLORS",
    "category_color",
    "special_color",
]
