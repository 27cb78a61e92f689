"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import httpx
import pytest

from weatherview.models.config import WeatherConfig
from weatherview.models.weather import (
    Coordinates,
    CurrentConditions,
    ForecastEntry,
    ResolvedLocation,
    WeatherReport,
)
from weatherview.services.openweather import OpenWeatherClient

FORECAST_START = 1700006400
FORECAST_STEP = 3 * 3600


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "weather": {
            "api_key": "test-key",
            "base_url": "https://weather.example.com/data/2.5",
            "timeout_seconds": 5,
            "forecast_count": 8,
            "forecast_limit": 6,
        },
        "geolocation": {
            "provider": "fixed",
            "latitude": 52.37,
            "longitude": 4.89,
        },
        "settings": {
            "unit": "F",
            "celsius_precision": 2,
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def current_payload():
    """Current-conditions response as the weather service sends it."""
    return {
        "coord": {"lon": 4.89, "lat": 52.37},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": {
            "temp": 285.15,
            "feels_like": 284.2,
            "temp_min": 283.7,
            "temp_max": 286.4,
            "pressure": 1012,
            "humidity": 81,
        },
        "visibility": 10000,
        "wind": {"speed": 5.1, "deg": 240},
        "dt": 1700000000,
        "sys": {"country": "NL", "sunrise": 1699945200, "sunset": 1699977600},
        "timezone": 3600,
        "name": "Amsterdam",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload():
    """Forecast response with eight 3-hourly entries."""
    return {
        "cod": "200",
        "cnt": 8,
        "list": [
            {
                "dt": FORECAST_START + i * FORECAST_STEP,
                "main": {"temp": 284.0 + i, "humidity": 80},
                "weather": [{"main": "Rain" if i % 2 else "Clouds", "description": "test"}],
            }
            for i in range(8)
        ],
    }


@pytest.fixture
def make_client():
    """Factory for a client whose requests go to ``handler`` instead of the network."""

    def _make(handler, **config):
        config.setdefault("api_key", "test-key")
        config.setdefault("base_url", "https://weather.example.com/data/2.5")
        return OpenWeatherClient(WeatherConfig(**config), transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def make_report():
    """Factory for a minimal weather report."""

    def _make(name: str = "Amsterdam", kelvin: float = 285.15, latitude: float = 52.37):
        location = ResolvedLocation(
            coordinates=Coordinates(latitude=latitude, longitude=4.89),
            name=name,
        )
        current = CurrentConditions(
            location_name=name,
            country_code="NL",
            temperature=kelvin,
            feels_like=kelvin,
            temp_min=kelvin - 1,
            temp_max=kelvin + 1,
            humidity=70,
            pressure=1015,
            wind_speed=3.0,
            wind_degrees=90,
            condition_main="Clear",
        )
        forecast = [
            ForecastEntry(timestamp=FORECAST_START + i * FORECAST_STEP, temperature=kelvin, condition_main="Clear")
            for i in range(6)
        ]
        return WeatherReport(location=location, current=current, forecast=forecast)

    return _make
