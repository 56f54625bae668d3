"""Tests for the METAR HTTP client (HTTP is mocked)."""

from unittest.mock import Mock

import pytest
import requests

from ledsectional.exceptions import MetarFetchError, ReportParseError
from ledsectional.services import MetarClient
from ledsectional.services.metar_client import USER_AGENT


def _session(status_code=200, text="[]", side_effect=None):
    session = Mock(spec=requests.Session)
    session.headers = {}
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = Mock(status_code=status_code, text=text)
    return session


class TestMetarClient:
    """Test MetarClient."""

    @pytest.mark.unit
    def test_sets_user_agent(self):
        session = _session()
        MetarClient(session=session)
        assert session.headers["User-Agent"] == USER_AGENT

    @pytest.mark.unit
    def test_fetch_builds_url(self, metar_payload):
        session = _session(text=metar_payload)
        client = MetarClient(session=session, timeout=3.0)

        reports = client.fetch(["KSFO", "KOAK"])

        session.get.assert_called_once_with(
            "https://aviationweather.gov/api/data/metar?format=json&ids=KSFO,KOAK",
            timeout=3.0,
        )
        assert [r.station_code for r in reports] == ["KSFO", "KOAK"]

    @pytest.mark.unit
    def test_empty_codes_skip_request(self):
        session = _session()
        client = MetarClient(session=session)
        assert client.fetch([]) == []
        assert client.fetch_payload([]) == ""
        session.get.assert_not_called()

    @pytest.mark.unit
    def test_http_error_status(self):
        client = MetarClient(session=_session(status_code=503, text="down"))
        with pytest.raises(MetarFetchError) as exc_info:
            client.fetch(["KSFO"])
        assert exc_info.value.status_code == 503
        assert exc_info.value.recoverable is True

    @pytest.mark.unit
    def test_connection_error(self):
        client = MetarClient(session=_session(side_effect=requests.ConnectionError("no route")))
        with pytest.raises(MetarFetchError) as exc_info:
            client.fetch(["KSFO"])
        assert "no route" in exc_info.value.reason

    @pytest.mark.unit
    def test_timeout(self):
        client = MetarClient(session=_session(side_effect=requests.Timeout()), timeout=1.5)
        with pytest.raises(MetarFetchError) as exc_info:
            client.fetch(["KSFO"])
        assert "1.5" in exc_info.value.reason

    @pytest.mark.unit
    def test_bad_payload(self):
        client = MetarClient(session=_session(text="<html></html>"))
        with pytest.raises(ReportParseError):
            client.fetch(["KSFO"])

    @pytest.mark.unit
    def test_custom_base_url(self):
        session = _session()
        client = MetarClient(session=session, base_url="http://localhost:8000/metar?ids=")
        client.fetch_payload(["KSFO"])
        assert session.get.call_args.args[0] == "http://localhost:8000/metar?ids=KSFO"

    @pytest.mark.unit
    def test_close(self):
        session = _session()
        MetarClient(session=session).close()
        session.close.assert_called_once()
