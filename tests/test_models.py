"""Unit tests for Color and enum models."""

import pytest

from ledsectional.colors import COLORS
from ledsectional.models import Color, FlightCategory, SpecialCode, is_special_code


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(r=100, g=50, b=25)
        assert color.r == 100
        assert color.g == 50
        assert color.b == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_equality_is_channel_equality(self):
        """Test that colors compare by value and are hashable."""
        assert Color(r=1, g=2, b=3) == Color.from_rgb(1, 2, 3)
        assert Color(r=1, g=2, b=3) != Color(r=1, g=2, b=4)
        assert len({Color(r=1, g=2, b=3), Color(r=1, g=2, b=3)}) == 1

    @pytest.mark.unit
    def test_frozen(self):
        """Test that colors cannot be mutated."""
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValueError):
            color.r = 10

    @pytest.mark.unit
    def test_preset_color_off(self):
        """Test off color factory method."""
        assert Color.off() == Color(r=0, g=0, b=0)
        assert Color.off().is_off
        assert not COLORS.VFR.is_off

    @pytest.mark.unit
    def test_to_rgb_tuple_and_hex(self):
        """Test tuple and hex conversion."""
        color = Color(r=255, g=16, b=0)
        assert color.to_rgb_tuple() == (255, 16, 0)
        assert color.to_hex() == "#FF1000"


class TestColorScaling:
    """Test brightness scaling of a single color."""

    @pytest.mark.unit
    def test_full_brightness_unchanged(self):
        """Test that brightness 255 keeps channel values."""
        color = Color(r=255, g=128, b=7)
        assert color.scaled(255) == color

    @pytest.mark.unit
    def test_zero_brightness_is_off(self):
        """Test that brightness 0 turns every channel off."""
        assert Color(r=255, g=255, b=255).scaled(0) == Color.off()

    @pytest.mark.unit
    def test_rounds_instead_of_truncating(self):
        """Test that scaling rounds to nearest."""
        # 255 * 128 / 255 = 128; 1 * 128 / 255 = 0.502 -> 1; 100 * 128 / 255 = 50.2 -> 50
        assert Color(r=255, g=1, b=100).scaled(128) == Color(r=128, g=1, b=50)
        # 100 * 20 / 255 = 7.84 -> 8
        assert Color(r=100, g=0, b=0).scaled(20) == Color(r=8, g=0, b=0)
        # 1 * 127 / 255 = 0.498 -> 0
        assert Color(r=1, g=0, b=0).scaled(127) == Color.off()

    @pytest.mark.unit
    def test_matches_round_for_all_values(self):
        """Test scaled == round(v * b / 255) across the whole range."""
        for brightness in range(256):
            for value in range(256):
                expected = round(value * brightness / 255)
                assert Color(r=value, g=0, b=0).scaled(brightness).r == expected

    @pytest.mark.unit
    def test_monotonic_in_brightness(self):
        """Test that a higher brightness never gives a dimmer channel."""
        color = Color(r=200, g=37, b=1)
        previous = color.scaled(0)
        for brightness in range(1, 256):
            current = color.scaled(brightness)
            assert current.r >= previous.r
            assert current.g >= previous.g
            assert current.b >= previous.b
            previous = current

    @pytest.mark.unit
    def test_channels_scaled_independently(self):
        """Test that each channel is scaled on its own."""
        assert Color(r=255, g=0, b=51).scaled(51) == Color(r=51, g=0, b=10)


class TestFlightCategory:
    """Test FlightCategory parsing."""

    @pytest.mark.unit
    def test_parse_known(self):
        assert FlightCategory.parse("VFR") is FlightCategory.VFR
        assert FlightCategory.parse("LIFR") is FlightCategory.LIFR

    @pytest.mark.unit
    def test_parse_unknown(self):
        """Test that anything unrecognized becomes UNKNOWN."""
        assert FlightCategory.parse(None) is FlightCategory.UNKNOWN
        assert FlightCategory.parse("") is FlightCategory.UNKNOWN
        assert FlightCategory.parse("SVFR") is FlightCategory.UNKNOWN
        assert FlightCategory.parse(3) is FlightCategory.UNKNOWN


class TestSpecialCode:
    """Test special code lookup."""

    @pytest.mark.unit
    def test_all_special_codes(self):
        """Test the eight special codes are recognized."""
        for code in ["NULL", "VFR", "MVFR", "IFR", "LIFR", "WVFR", "LTNG", "WBNK"]:
            assert is_special_code(code)
            assert SpecialCode.lookup(code).value == code

    @pytest.mark.unit
    def test_station_codes_are_not_special(self):
        assert SpecialCode.lookup("KSFO") is None
        assert not is_special_code("KLAX")

    @pytest.mark.unit
    def test_lookup_is_case_sensitive(self):
        """Test that lower-case legend codes are treated as stations."""
        assert SpecialCode.lookup("vfr") is None
        assert SpecialCode.lookup("null") is None
