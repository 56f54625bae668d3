"""Sectional configuration model.

The configuration is TOML with a ``[settings]`` table, an optional
``[wifi]`` table and one ``[[airports]]`` table per LED::

    [settings]
    brightness = 20
    wind_threshold_kt = 25

    [[airports]]
    code = "VFR"

    [[airports]]
    code = "KSFO"

Every field is optional. Out-of-range numbers are clamped rather than
rejected so a cosmetic mistake never stops the map from booting.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ledsectional.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    wrap_pydantic_error,
)

from .enums import SpecialCode

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".ledsectional" / "cfg.toml"

BRIGHTNESS_RANGE = (0, 255)
REQUEST_INTERVAL_RANGE = (60, 3600)
WIND_THRESHOLD_RANGE = (0, 100)

DEFAULT_CONFIG_TOML = """\
[settings]
brightness = 20
request_interval_secs = 900
wind_threshold_kt = 25
do_lightning = true
do_winds = true
data_pin = 2

[[airports]]
code = "LIFR"

[[airports]]
code = "IFR"

[[airports]]
code = "MVFR"

[[airports]]
code = "VFR"

[[airports]]
code = "WVFR"

[[airports]]
code = "LTNG"

[[airports]]
code = "NULL"

[[airports]]
code = "KSFO"

[[airports]]
code = "KOAK"

[[airports]]
code = "KSJC"

[[airports]]
code = "KLAX"
"""


def _clamp(name: str, value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    clamped = min(max(value, low), high)
    if clamped != value:
        logger.debug(f"Clamped {name} from {value} to {clamped}")
    return clamped


class Settings(BaseModel):
    """Display and fetch settings."""

    model_config = ConfigDict(frozen=True)

    brightness: int = Field(default=20, description="LED brightness (0-255)")
    request_interval_secs: int = Field(
        default=900,
        validation_alias=AliasChoices("request_interval_secs", "request_interval"),
        description="Seconds between METAR fetches (60-3600)",
    )
    wind_threshold_kt: int = Field(
        default=25,
        validation_alias=AliasChoices("wind_threshold_kt", "wind_threshold"),
        description="Wind or gust speed in knots at which VFR turns yellow (0-100)",
    )
    do_lightning: bool = Field(default=True, description="Flash LEDs reporting thunderstorms")
    do_winds: bool = Field(default=True, description="Show windy VFR airports in yellow")
    data_pin: Union[int, str] = Field(
        default=2, description="LED data pin identifier, passed through to the driver"
    )

    @field_validator("brightness")
    @classmethod
    def clamp_brightness(cls, v: int) -> int:
        return _clamp("brightness", v, BRIGHTNESS_RANGE)

    @field_validator("request_interval_secs")
    @classmethod
    def clamp_request_interval(cls, v: int) -> int:
        return _clamp("request_interval_secs", v, REQUEST_INTERVAL_RANGE)

    @field_validator("wind_threshold_kt")
    @classmethod
    def clamp_wind_threshold(cls, v: int) -> int:
        return _clamp("wind_threshold_kt", v, WIND_THRESHOLD_RANGE)


class WifiConfig(BaseModel):
    """Optional WiFi credentials, used only as a development fallback."""

    model_config = ConfigDict(frozen=True)

    ssid: Optional[str] = Field(default=None, description="Network name")
    password: Optional[str] = Field(default=None, description="Network password")

    @property
    def credentials(self) -> Optional[tuple[str, str]]:
        """Return (ssid, password) when an SSID is configured.

        An SSID without a password yields an empty password (open network).
        """
        if self.ssid is None:
            return None
        return (self.ssid, self.password or "")


class Airport(BaseModel):
    """One LED slot: a station identifier or a special code."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(default=SpecialCode.NULL.value, description="ICAO station or special code")

    @model_validator(mode="before")
    @classmethod
    def accept_bare_code(cls, data: Any) -> Any:
        """Allow ``airports = ["KSFO", "NULL"]`` as shorthand for tables."""
        if isinstance(data, str):
            return {"code": data}
        return data

    @property
    def special(self) -> Optional[SpecialCode]:
        """The special code for this slot, or None for a real station."""
        return SpecialCode.lookup(self.code)

    @property
    def is_station(self) -> bool:
        """True if this slot is a real station reported by the weather source."""
        return self.special is None


class SectionalConfig(BaseModel):
    """Complete sectional configuration.

    Loaded once at boot and never mutated. The position of each airport is
    its LED index, so the airport sequence is kept exactly as written.
    """

    model_config = ConfigDict(frozen=True)

    settings: Settings = Field(default_factory=Settings)
    wifi: WifiConfig = Field(default_factory=WifiConfig)
    airports: tuple[Airport, ...] = Field(default=(), description="LED slots in strip order")

    @property
    def num_leds(self) -> int:
        """Number of LEDs on the strip."""
        return len(self.airports)

    def airport_count(self) -> int:
        """Return the airport sequence length (the LED count)."""
        return len(self.airports)

    def metar_codes(self) -> list[str]:
        """Return real station codes in strip order, special codes removed.

        This is exactly the identifier set sent to the weather source.
        """
        return [airport.code for airport in self.airports if airport.is_station]

    @classmethod
    def from_toml(cls, raw_text: str, source: Optional[str] = None) -> "SectionalConfig":
        """
        Parse and validate configuration text.

        Args:
            raw_text: TOML document
            source: Where the text came from, used in error messages

        Raises:
            ConfigParseError: If the text is not valid TOML
            ConfigValidationError: If a value has an unusable type
        """
        try:
            data = tomllib.loads(raw_text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(str(e), file_path=source) from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise wrap_pydantic_error(e, source) from e

        logger.debug(f"Parsed config with {config.num_leds} LEDs from {source or '<text>'}")
        return config

    @classmethod
    def load(cls, path: Path) -> "SectionalConfig":
        """
        Load configuration from a TOML file.

        Raises:
            ConfigFileNotFoundError: If the file doesn't exist
            ConfigParseError: If the file is not valid TOML
            ConfigValidationError: If a value has an unusable type
        """
        if not path.exists():
            raise ConfigFileNotFoundError(str(path))

        config = cls.from_toml(path.read_text(encoding="utf-8"), source=str(path))
        logger.info(f"Loaded config from {path}: {config.num_leds} LEDs")
        return config

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "SectionalConfig":
        """
        Load config from file or return the built-in default.

        Only a missing file falls back to the default. A file that exists but
        cannot be parsed still raises, so a typo is never hidden.

        Args:
            path: Path to config file. If None, uses ~/.ledsectional/cfg.toml.
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            logger.info(f"No config at {path}, using built-in default")
            return cls.default()

        return cls.load(path)

    @classmethod
    def default(cls) -> "SectionalConfig":
        """Return the built-in default configuration."""
        return cls.from_toml(DEFAULT_CONFIG_TOML, source="<built-in default>")
