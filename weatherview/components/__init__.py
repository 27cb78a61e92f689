"""UI components for weatherview."""

from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["StatusBar", "WeatherPanel"]
