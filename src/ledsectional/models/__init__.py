"""Data models for the LED sectional."""

from .color import Color
from .config import Airport, SectionalConfig, Settings, WifiConfig
from .enums import FlightCategory, SpecialCode, is_special_code
from .metar import (
    WeatherReport,
    build_metar_url,
    build_request_codes,
    metars_by_station,
    parse_metars,
)

__all__ = [
    # Models
    "Airport",
    "Color",
    # Enums
    "FlightCategory",
    "SectionalConfig",
    "Settings",
    "SpecialCode",
    "WeatherReport",
    "WifiConfig",
    # Functions
    "build_metar_url",
    "build_request_codes",
    "is_special_code",
    "metars_by_station",
    "parse_metars",
]
