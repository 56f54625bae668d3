"""Enumerations for the LED sectional."""

from enum import Enum
from typing import Optional


class FlightCategory(str, Enum):
    """Flight category reported by the weather source."""

    VFR = "VFR"  # Visual flight rules
    MVFR = "MVFR"  # Marginal VFR
    IFR = "IFR"  # Instrument flight rules
    LIFR = "LIFR"  # Low IFR
    UNKNOWN = "UNKNOWN"  # Missing or unrecognized category

    @classmethod
    def parse(cls, value: object) -> "FlightCategory":
        """Map a raw category string to a member, UNKNOWN when unrecognized."""
        if isinstance(value, str):
            try:
                member = cls(value)
            except ValueError:
                return cls.UNKNOWN
            return member
        return cls.UNKNOWN


class SpecialCode(str, Enum):
    """Airport entries that are not real station identifiers.

    These occupy an LED slot like any airport but are never sent to the
    weather source.
    """

    NULL = "NULL"  # Always off
    VFR = "VFR"  # Legend: VFR color
    MVFR = "MVFR"  # Legend: MVFR color
    IFR = "IFR"  # Legend: IFR color
    LIFR = "LIFR"  # Legend: LIFR color
    WVFR = "WVFR"  # Legend: windy VFR color
    LTNG = "LTNG"  # Lightning demo, rests off and always flashes
    WBNK = "WBNK"  # Wind-blink placeholder, inert (off)

    @classmethod
    def lookup(cls, code: str) -> Optional["SpecialCode"]:
        """Return the special code for ``code`` or None for a real station.

        Matching is exact and case-sensitive.
        """
        try:
            return cls(code)
        except ValueError:
            return None


def is_special_code(code: str) -> bool:
    """Check whether ``code`` is one of the special (non-station) codes."""
    return SpecialCode.lookup(code) is not None
