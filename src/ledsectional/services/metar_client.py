"""HTTPS client for the aviationweather.gov METAR endpoint."""

import logging
from collections.abc import Sequence
from typing import Optional

import requests

from ledsectional import __version__
from ledsectional.exceptions import MetarFetchError
from ledsectional.models import WeatherReport, build_metar_url, parse_metars
from ledsectional.models.metar import METAR_BASE_URL

logger = logging.getLogger(__name__)

USER_AGENT = f"ledsectional/{__version__}"
READ_TIMEOUT_SECS = 15.0


class MetarClient:
    """
    Fetches METAR payloads for a list of station codes.

    The client does no retrying; a failed fetch raises MetarFetchError and
    the run loop decides when to try again.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = READ_TIMEOUT_SECS,
        base_url: str = METAR_BASE_URL,
    ):
        """
        Initialize the client.

        Args:
            session: requests session to use (a new one is created if None)
            timeout: Request timeout in seconds
            base_url: Endpoint prefix; station codes are appended to it
        """
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = USER_AGENT
        self.timeout = timeout
        self.base_url = base_url

    def fetch_payload(self, codes: Sequence[str]) -> str:
        """
        Fetch the raw JSON payload for the given station codes.

        Args:
            codes: Station codes (special codes already removed)

        Returns:
            Response body, or an empty string when there is nothing to fetch

        Raises:
            MetarFetchError: On connection failure, timeout or non-200 status
        """
        if not codes:
            logger.debug("No station codes, skipping fetch")
            return ""

        url = build_metar_url(codes, base_url=self.base_url)
        logger.info(f"Fetching METARs: {url}")

        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.Timeout as e:
            raise MetarFetchError(f"timed out after {self.timeout}s", url=url) from e
        except requests.RequestException as e:
            raise MetarFetchError(str(e), url=url) from e

        if resp.status_code != 200:
            raise MetarFetchError(
                f"HTTP status {resp.status_code}", url=url, status_code=resp.status_code
            )

        logger.debug(f"METAR response: {len(resp.text)} chars")
        return resp.text

    def fetch(self, codes: Sequence[str]) -> list[WeatherReport]:
        """
        Fetch and parse reports for the given station codes.

        Raises:
            MetarFetchError: If the payload could not be retrieved
            ReportParseError: If the payload is not a JSON array
        """
        if not codes:
            return []

        reports = parse_metars(self.fetch_payload(codes))
        logger.info(f"Received {len(reports)} METAR reports for {len(codes)} stations")
        return reports

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
