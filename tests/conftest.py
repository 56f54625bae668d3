"""Pytest fixtures for tests."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from ledsectional.models import SectionalConfig


SAMPLE_CONFIG_TOML = """\
[settings]
brightness = 128
request_interval_secs = 600
wind_threshold_kt = 25
do_lightning = true
do_winds = true

[[airports]]
code = "LIFR"

[[airports]]
code = "VFR"

[[airports]]
code = "KSFO"

[[airports]]
code = "NULL"

[[airports]]
code = "KOAK"

[[airports]]
code = "LTNG"
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_text():
    """TOML text for a small mixed legend/station layout."""
    return SAMPLE_CONFIG_TOML


@pytest.fixture
def sample_config(config_text):
    """Parsed SectionalConfig for the sample layout."""
    return SectionalConfig.from_toml(config_text)


@pytest.fixture
def config_file(temp_dir, config_text):
    """Sample config written to disk."""
    path = temp_dir / "cfg.toml"
    path.write_text(config_text)
    return path


@pytest.fixture
def metar_records():
    """Raw METAR records as returned by the weather source."""
    return [
        {
            "icaoId": "KSFO",
            "fltCat": "VFR",
            "wspd": 30,
            "wgst": None,
            "wxString": None,
            "rawOb": "KSFO 181756Z 28030KT 10SM FEW010 18/12 A3001",
            "lat": 37.62,
        },
        {
            "icaoId": "KOAK",
            "fltCat": "IFR",
            "wspd": 8,
            "wgst": 15,
            "wxString": "-TSRA BR",
        },
    ]


@pytest.fixture
def metar_payload(metar_records):
    """METAR records serialized as the JSON payload text."""
    return json.dumps(metar_records)


@pytest.fixture
def payload_file(temp_dir, metar_payload):
    """METAR payload written to disk."""
    path = temp_dir / "metars.json"
    path.write_text(metar_payload)
    return path
