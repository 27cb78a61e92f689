"""Data models for weatherview."""

from .config import Config, GeolocationConfig, Settings, WeatherConfig
from .theme import ThemeDescriptor, ThemeMode
from .view_state import (
    ErrorAction,
    ErrorKind,
    ErrorState,
    IdleState,
    LoadingState,
    ReadyState,
    ViewState,
    ViewStatus,
)
from .weather import (
    Coordinates,
    CurrentConditions,
    ForecastEntry,
    LocationQuery,
    ResolvedLocation,
    WeatherReport,
)

__all__ = [
    "Config",
    "Coordinates",
    "CurrentConditions",
    "ErrorAction",
    "ErrorKind",
    "ErrorState",
    "ForecastEntry",
    "GeolocationConfig",
    "IdleState",
    "LoadingState",
    "LocationQuery",
    "ReadyState",
    "ResolvedLocation",
    "Settings",
    "ThemeDescriptor",
    "ThemeMode",
    "ViewState",
    "ViewStatus",
    "WeatherConfig",
    "WeatherReport",
]
