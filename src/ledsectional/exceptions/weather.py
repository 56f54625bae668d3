"""Weather data exceptions.

- WeatherDataError: Base class for weather data errors
- ReportParseError: Payload is not a JSON array of reports
- MetarFetchError: Payload could not be retrieved
"""

from typing import Optional

from .base import LedSectionalError


class WeatherDataError(LedSectionalError):
    """Weather data could not be obtained or understood.

    Always recoverable: the display keeps its previous colors and the next
    fetch cycle may succeed.
    """

    fault_status = "FETCH_ERROR"

    def __init__(self, user_message: str, **kwargs):
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message, **kwargs)


class ReportParseError(WeatherDataError):
    """Weather payload is not well-formed."""

    def __init__(self, parse_error: str, payload_size: Optional[int] = None):
        """
        Initialize report parse error.

        Args:
            parse_error: Why the payload was rejected
            payload_size: Payload length in characters (optional)
        """
        technical = f"METAR payload parse error: {parse_error}"
        if payload_size is not None:
            technical += f" ({payload_size} chars)"

        super().__init__(
            "Weather data could not be read",
            technical_message=technical,
            recovery_hint="The weather service may be returning an error page; the next fetch will retry",
        )
        self.parse_error = parse_error
        self.payload_size = payload_size


class MetarFetchError(WeatherDataError):
    """Weather payload could not be retrieved."""

    def __init__(
        self,
        reason: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        """
        Initialize METAR fetch error.

        Args:
            reason: Short description of the failure
            url: Request URL (optional)
            status_code: HTTP status code when the server answered (optional)
        """
        if status_code is not None:
            user_msg = f"Weather service returned HTTP {status_code}"
        else:
            user_msg = f"Could not reach the weather service: {reason}"

        super().__init__(
            user_msg,
            technical_message=f"METAR fetch failed for {url or '<unknown url>'}: {reason}",
            recovery_hint="Check the network connection; the next fetch will retry",
        )
        self.reason = reason
        self.url = url
        self.status_code = status_code
