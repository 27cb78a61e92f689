"""Terminal weather display backed by an OpenWeatherMap-compatible API."""

__version__ = "0.1.0"
