"""Flight category and legend color mapping.

Pure functions: no state, no I/O. These are the only place a flight
category or special code becomes a color.
"""

from typing import Optional

from ledsectional.colors import COLORS
from ledsectional.models import Color, FlightCategory, SpecialCode

# Base color per flight category (before the windy-VFR override)
CATEGORY_COLORS: dict[FlightCategory, Color] = {
    FlightCategory.VFR: COLORS.VFR,
    FlightCategory.MVFR: COLORS.MVFR,
    FlightCategory.IFR: COLORS.IFR,
    FlightCategory.LIFR: COLORS.LIFR,
    FlightCategory.UNKNOWN: COLORS.UNKNOWN,
}

# Fixed legend colors. LTNG and WBNK are absent: they are animated or
# inert slots, not legends.
LEGEND_COLORS: dict[SpecialCode, Color] = {
    SpecialCode.NULL: COLORS.UNKNOWN,
    SpecialCode.VFR: COLORS.VFR,
    SpecialCode.MVFR: COLORS.MVFR,
    SpecialCode.IFR: COLORS.IFR,
    SpecialCode.LIFR: COLORS.LIFR,
    SpecialCode.WVFR: COLORS.WIND,
}


def category_color(
    category: FlightCategory | str,
    wind_speed: Optional[int],
    wind_gust: Optional[int],
    threshold: int,
    wind_enabled: bool,
) -> Color:
    """Get the LED color for a station's flight category.

    VFR turns yellow when wind coloring is enabled and the stronger of
    wind speed and gust reaches the threshold (inclusive). Other
    categories ignore wind.

    Args:
        category: Reported flight category (member or raw string)
        wind_speed: Sustained wind in knots (None counts as 0)
        wind_gust: Gust in knots (None counts as 0)
        threshold: Wind threshold in knots
        wind_enabled: Whether the windy-VFR override is active

    Returns:
        Color for the station's LED
    """
    category = FlightCategory.parse(category)
    if category is FlightCategory.VFR and wind_enabled:
        max_wind = max(wind_speed or 0, wind_gust or 0)
        if max_wind >= threshold:
            return COLORS.WIND
    return CATEGORY_COLORS[category]


def special_color(code: str) -> Optional[Color]:
    """Get the fixed legend color for a special code.

    Returns None for real station codes and for the LTNG and WBNK slots,
    which the mapping step handles itself.
    """
    special = SpecialCode.lookup(code)
    if special is None:
        return None
    return LEGEND_COLORS.get(special)
