"""Services for locating, fetching and presenting weather."""

from .controller import WeatherController
from .location import LocationResolver
from .openweather import OpenWeatherClient
from .weather_service import WeatherService

__all__ = ["LocationResolver", "OpenWeatherClient", "WeatherController", "WeatherService"]
