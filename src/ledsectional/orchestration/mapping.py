"""Map a configuration and a report set onto the display buffer.

`update()` is the integration point called once per fetch cycle. It is a
pure function of its inputs: the station lookup is built fresh on every
call and nothing is remembered between cycles.
"""

import logging
from collections.abc import Iterable
from typing import NamedTuple

from ledsectional.colors import COLORS
from ledsectional.core.color_mapper import category_color, special_color
from ledsectional.models import (
    Color,
    SectionalConfig,
    SpecialCode,
    WeatherReport,
    metars_by_station,
)

logger = logging.getLogger(__name__)


class MappingResult(NamedTuple):
    """Output of one mapping cycle."""

    buffer: tuple[Color, ...]
    lightning_indices: tuple[int, ...]


def update(config: SectionalConfig, reports: Iterable[WeatherReport]) -> MappingResult:
    """
    Compute the display buffer and lightning set for one cycle.

    For each airport slot, in order:

    - legend codes get their fixed color
    - LTNG rests off and always joins the lightning set
    - WBNK is an inert off slot (wind blink is not implemented)
    - stations get their category color, or off when no report arrived
    - a station reporting thunderstorms joins the lightning set

    Args:
        config: Sectional configuration
        reports: Parsed reports for this cycle (replaces any previous set)

    Returns:
        MappingResult with one color per airport and the lightning indices
    """
    settings = config.settings
    by_station = metars_by_station(reports)

    buffer: list[Color] = []
    lightning: list[int] = []
    missing: list[str] = []

    for index, airport in enumerate(config.airports):
        legend = special_color(airport.code)
        if legend is not None:
            buffer.append(legend)
            continue

        special = airport.special
        if special is SpecialCode.LTNG:
            buffer.append(COLORS.UNKNOWN)
            lightning.append(index)
            continue
        if special is SpecialCode.WBNK:
            buffer.append(COLORS.UNKNOWN)
            continue

        report = by_station.get(airport.code)
        if report is None:
            missing.append(airport.code)
            buffer.append(COLORS.UNKNOWN)
            continue

        buffer.append(
            category_color(
                report.flight_category,
                report.wind_speed,
                report.wind_gust,
                settings.wind_threshold_kt,
                settings.do_winds,
            )
        )
        if report.has_thunderstorm():
            lightning.append(index)

    if missing:
        logger.info(f"No report for {len(missing)} station(s): {', '.join(missing)}")
    logger.debug(f"Mapped {len(buffer)} LEDs, {len(lightning)} lightning")

    return MappingResult(buffer=tuple(buffer), lightning_indices=tuple(lightning))
