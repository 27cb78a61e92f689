"""Tests for unit conversion and formatting."""

import pytest

from weatherview.services.units import (
    TemperatureUnit,
    format_local_time,
    format_temperature,
    format_visibility,
    format_wind,
    get_wind_direction,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
    local_hour,
)


class TestConversions:
    """Tests for raw Kelvin conversions."""

    def test_kelvin_to_celsius(self):
        assert kelvin_to_celsius(273.15) == 0.0
        assert kelvin_to_celsius(291.15) == 18.0

    def test_kelvin_to_fahrenheit(self):
        assert kelvin_to_fahrenheit(273.15) == 32.0
        assert kelvin_to_fahrenheit(373.15) == pytest.approx(212.0)


class TestFormatTemperature:
    """Tests for format_temperature."""

    def test_celsius_whole_degrees(self):
        """Test the default whole-degree Celsius format."""
        assert format_temperature(291.15, "C") == "18°C"

    def test_celsius_two_decimals(self):
        """Test the two-decimal Celsius format."""
        assert format_temperature(291.15, "C", precision=2) == "18.00°C"
        assert format_temperature(285.15, TemperatureUnit.CELSIUS, precision=2) == "12.00°C"

    def test_fahrenheit(self):
        assert format_temperature(273.15, "F") == "32°F"

    def test_fahrenheit_ignores_precision(self):
        """Test Fahrenheit is always whole degrees."""
        assert format_temperature(273.15, TemperatureUnit.FAHRENHEIT, precision=2) == "32°F"

    def test_rounds_half_up(self):
        """Test halves round away from zero, not to even."""
        assert format_temperature(273.15 + 2.5, "C") == "3°C"
        assert format_temperature(273.15 + 0.5, "C") == "1°C"

    def test_rounds_down_below_half(self):
        assert format_temperature(273.15 + 12.4, "C") == "12°C"

    def test_negative(self):
        assert format_temperature(263.15, "C") == "-10°C"

    def test_no_negative_zero(self):
        """Test small negative values render as plain zero."""
        assert format_temperature(273.0, "C") == "0°C"
        assert format_temperature(273.149, "C", precision=2) == "0.00°C"

    def test_default_unit_is_celsius(self):
        assert format_temperature(300.15) == "27°C"

    def test_invalid_unit(self):
        with pytest.raises(ValueError):
            format_temperature(300.0, "K")


class TestTemperatureUnit:
    """Tests for TemperatureUnit."""

    def test_symbol(self):
        assert TemperatureUnit.CELSIUS.symbol == "°C"
        assert TemperatureUnit.FAHRENHEIT.symbol == "°F"

    def test_toggled(self):
        assert TemperatureUnit.CELSIUS.toggled() is TemperatureUnit.FAHRENHEIT
        assert TemperatureUnit.FAHRENHEIT.toggled() is TemperatureUnit.CELSIUS


class TestWindDirection:
    """Tests for get_wind_direction."""

    @pytest.mark.parametrize(
        "degrees,expected",
        [
            (0, "N"),
            (44, "NE"),
            (45, "NE"),
            (90, "E"),
            (135, "SE"),
            (180, "S"),
            (225, "SW"),
            (270, "W"),
            (315, "NW"),
            (337, "NW"),
            (338, "N"),
            (359, "N"),
            (360, "N"),
        ],
    )
    def test_compass_points(self, degrees, expected):
        assert get_wind_direction(degrees) == expected

    def test_half_sector_rounds_up(self):
        """Test a value exactly between two points goes to the next one."""
        assert get_wind_direction(22.5) == "NE"
        assert get_wind_direction(22.4) == "N"


class TestDisplayHelpers:
    """Tests for wind, visibility and time formatting."""

    def test_format_wind(self):
        assert format_wind(5.14, 240) == "5.1 m/s SW"

    def test_format_visibility_km(self):
        assert format_visibility(10000) == "10.0 km"

    def test_format_visibility_meters(self):
        assert format_visibility(800) == "800 m"

    def test_format_visibility_missing(self):
        assert format_visibility(None) == "n/a"

    def test_format_local_time_utc(self):
        # 2023-11-14 22:13:20 UTC
        assert format_local_time(1700000000) == "22:13"

    def test_format_local_time_with_offset(self):
        assert format_local_time(1700000000, 3600) == "23:13"

    def test_format_local_time_missing(self):
        assert format_local_time(None) == "--:--"

    def test_local_hour_wraps_past_midnight(self):
        # 22:13 UTC is 00:13 the next day in UTC+2
        assert local_hour(1700000000) == 22
        assert local_hour(1700000000, 7200) == 0
