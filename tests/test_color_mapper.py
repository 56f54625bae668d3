"""Unit tests for category and legend color mapping."""

import pytest

from ledsectional.colors import COLORS
from ledsectional.core import category_color, special_color
from ledsectional.models import FlightCategory


class TestCategoryColor:
    """Test category_color()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "category, expected",
        [
            (FlightCategory.VFR, COLORS.VFR),
            (FlightCategory.MVFR, COLORS.MVFR),
            (FlightCategory.IFR, COLORS.IFR),
            (FlightCategory.LIFR, COLORS.LIFR),
            (FlightCategory.UNKNOWN, COLORS.UNKNOWN),
        ],
    )
    def test_base_colors(self, category, expected):
        assert category_color(category, 0, 0, 25, True) == expected

    @pytest.mark.unit
    def test_windy_vfr_is_yellow(self):
        assert category_color(FlightCategory.VFR, 30, 0, 25, True) == COLORS.WIND

    @pytest.mark.unit
    def test_wind_override_disabled(self):
        assert category_color(FlightCategory.VFR, 30, 0, 25, False) == COLORS.VFR

    @pytest.mark.unit
    def test_threshold_is_inclusive(self):
        assert category_color(FlightCategory.VFR, 25, None, 25, True) == COLORS.WIND
        assert category_color(FlightCategory.VFR, 24, None, 25, True) == COLORS.VFR

    @pytest.mark.unit
    def test_gust_counts(self):
        """Test that a gust alone can reach the threshold."""
        assert category_color(FlightCategory.VFR, 10, 26, 25, True) == COLORS.WIND

    @pytest.mark.unit
    def test_missing_wind_counts_as_calm(self):
        assert category_color(FlightCategory.VFR, None, None, 25, True) == COLORS.VFR
        # Threshold 0 makes even calm VFR windy
        assert category_color(FlightCategory.VFR, None, None, 0, True) == COLORS.WIND

    @pytest.mark.unit
    def test_other_categories_ignore_wind(self):
        assert category_color(FlightCategory.LIFR, 60, 80, 25, True) == COLORS.LIFR
        assert category_color(FlightCategory.MVFR, 60, 80, 25, True) == COLORS.MVFR
        assert category_color(FlightCategory.UNKNOWN, 60, 80, 25, True) == COLORS.UNKNOWN

    @pytest.mark.unit
    def test_raw_strings_accepted(self):
        assert category_color("IFR", 0, 0, 25, True) == COLORS.IFR
        assert category_color("nonsense", 0, 0, 25, True) == COLORS.UNKNOWN


class TestSpecialColor:
    """Test special_color()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("NULL", COLORS.UNKNOWN),
            ("VFR", COLORS.VFR),
            ("MVFR", COLORS.MVFR),
            ("IFR", COLORS.IFR),
            ("LIFR", COLORS.LIFR),
            ("WVFR", COLORS.WIND),
        ],
    )
    def test_legend_colors(self, code, expected):
        assert special_color(code) == expected

    @pytest.mark.unit
    def test_animated_slots_return_none(self):
        """Test LTNG and WBNK are routed to the mapping step."""
        assert special_color("LTNG") is None
        assert special_color("WBNK") is None

    @pytest.mark.unit
    def test_station_codes_return_none(self):
        assert special_color("KSFO") is None
        assert special_color("vfr") is None
