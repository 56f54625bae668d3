"""METAR report model and payload parser.

The weather source returns a JSON array of report objects. Only a handful
of keys matter here; everything else in a record is ignored.

Record policy:
    - A record that is not an object, or that has no usable station id,
      is skipped and logged.
    - A record with bad field values is kept and the fields are
      defaulted (unknown category, missing wind, no phenomena).
"""

import json
import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ledsectional.exceptions import ReportParseError

from .enums import FlightCategory

logger = logging.getLogger(__name__)

METAR_BASE_URL = "https://aviationweather.gov/api/data/metar?format=json&ids="

# Weather-phenomena marker for thunderstorm activity (TS, TSRA, VCTS, ...)
THUNDERSTORM_MARKER = "TS"


class WeatherReport(BaseModel):
    """A single station's current observation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    station_code: str = Field(alias="icaoId", min_length=1, description="ICAO station id")
    flight_category: FlightCategory = Field(default=FlightCategory.UNKNOWN, alias="fltCat")
    wind_speed: Optional[int] = Field(default=None, alias="wspd", description="Knots")
    wind_gust: Optional[int] = Field(default=None, alias="wgst", description="Knots")
    wx_string: Optional[str] = Field(default=None, alias="wxString", description="Present weather")
    raw_observation: Optional[str] = Field(default=None, alias="rawOb")

    @field_validator("flight_category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> FlightCategory:
        return FlightCategory.parse(v)

    @field_validator("wind_speed", "wind_gust", mode="before")
    @classmethod
    def default_knots(cls, v: Any) -> Optional[int]:
        """Coerce wind values to whole, non-negative knots; None when unusable."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, str):
            try:
                v = float(v)
            except ValueError:
                return None
        if not isinstance(v, (int, float)) or not math.isfinite(v):
            return None
        return max(0, int(round(v)))

    @field_validator("wx_string", "raw_observation", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    def has_thunderstorm(self) -> bool:
        """Check if the present-weather string reports thunderstorms."""
        if not self.wx_string:
            return False
        return THUNDERSTORM_MARKER in self.wx_string.upper()

    def max_wind(self) -> int:
        """Return the greater of wind speed and gust, missing values as 0."""
        return max(self.wind_speed or 0, self.wind_gust or 0)


def parse_metars(payload_text: str) -> list[WeatherReport]:
    """
    Parse a JSON array of METAR records.

    Args:
        payload_text: Raw response body

    Returns:
        Reports in payload order; an empty array yields an empty list

    Raises:
        ReportParseError: If the payload is not JSON or not an array
    """
    # JSONDecodeError and the int digit limit are both ValueError; deep nesting
    # overflows the decoder stack
    try:
        data = json.loads(payload_text)
    except (ValueError, RecursionError, TypeError) as e:
        raise ReportParseError(str(e), payload_size=_size(payload_text)) from e

    if not isinstance(data, list):
        raise ReportParseError(
            f"expected a JSON array, got {type(data).__name__}",
            payload_size=_size(payload_text),
        )

    reports: list[WeatherReport] = []
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            logger.warning(f"Skipping METAR record {position}: not an object")
            continue
        try:
            reports.append(WeatherReport.model_validate(record))
        except ValidationError as e:
            logger.warning(
                f"Skipping METAR record {position}: no usable station id "
                f"({e.error_count()} error(s))"
            )

    skipped = len(data) - len(reports)
    if skipped:
        logger.info(f"Parsed {len(reports)} METAR reports, skipped {skipped}")
    else:
        logger.debug(f"Parsed {len(reports)} METAR reports")
    return reports


def metars_by_station(reports: Iterable[WeatherReport]) -> dict[str, WeatherReport]:
    """Index reports by exact station code; a later duplicate replaces an earlier one."""
    return {report.station_code: report for report in reports}


def build_request_codes(codes: Sequence[str]) -> str:
    """Join station codes into the comma-separated identifier list."""
    return ",".join(codes)


def build_metar_url(codes: Sequence[str], base_url: str = METAR_BASE_URL) -> str:
    """Build the METAR request URL for the given station codes."""
    return base_url + build_request_codes(codes)


def _size(payload_text: Any) -> Optional[int]:
    return len(payload_text) if isinstance(payload_text, (str, bytes)) else None
