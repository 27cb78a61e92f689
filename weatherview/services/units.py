"""Unit conversion and display formatting.

Temperatures arrive from the weather service in Kelvin and stay that way in
the models; everything here converts at display time.
"""

import math
from datetime import UTC, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

KELVIN_OFFSET = 273.15
COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class TemperatureUnit(str, Enum):
    """Display unit for temperatures."""

    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"

    def toggled(self) -> "TemperatureUnit":
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return kelvin_to_celsius(kelvin) * 9 / 5 + 32


def _round_half_up(value: float, precision: int) -> str:
    """Round like a calculator would (2.5 -> 3), unlike round()."""
    exponent = Decimal(1).scaleb(-precision)
    rounded = Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)  # No "-0"
    return f"{rounded:f}"


def format_temperature(
    kelvin: float,
    unit: TemperatureUnit | str = TemperatureUnit.CELSIUS,
    precision: int = 0,
) -> str:
    """Format a Kelvin temperature for display, e.g. ``"18°C"`` or ``"64°F"``.

    Args:
        kelvin: Temperature as received from the weather service
        unit: Display unit
        precision: Decimal places for Celsius; Fahrenheit is always whole degrees
    """
    unit = TemperatureUnit(unit)
    if unit is TemperatureUnit.FAHRENHEIT:
        return f"{_round_half_up(kelvin_to_fahrenheit(kelvin), 0)}{unit.symbol}"
    return f"{_round_half_up(kelvin_to_celsius(kelvin), precision)}{unit.symbol}"


def get_wind_direction(degrees: float) -> str:
    """Map wind degrees to one of eight compass points (45° sectors)."""
    index = math.floor(degrees / 45 + 0.5) % 8
    return COMPASS_POINTS[index]


def format_wind(speed: float, degrees: float) -> str:
    return f"{speed:.1f} m/s {get_wind_direction(degrees)}"


def format_visibility(meters: int | None) -> str:
    if meters is None:
        return "n/a"
    if meters < 1000:
        return f"{meters} m"
    return f"{meters / 1000:.1f} km"


def format_local_time(epoch: int | None, offset_seconds: int = 0) -> str:
    """Format an epoch timestamp as HH:MM in the location's own UTC offset."""
    if epoch is None:
        return "--:--"
    tz = timezone(timedelta(seconds=offset_seconds))
    return datetime.fromtimestamp(epoch, UTC).astimezone(tz).strftime("%H:%M")


def local_hour(epoch: float, offset_seconds: int = 0) -> int:
    """Hour of day (0-23) at ``epoch`` in the location's own UTC offset."""
    tz = timezone(timedelta(seconds=offset_seconds))
    return datetime.fromtimestamp(epoch, UTC).astimezone(tz).hour
