"""Configuration models using Pydantic for validation."""

import os
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator, model_validator

from .weather import Coordinates

API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"


def _validate_http_url(v: str) -> str:
    try:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
        if not parsed.netloc:
            raise ValueError("URL must have a valid host")
    except Exception as e:
        raise ValueError(f"Invalid URL '{v}': {e}")
    return v


class WeatherConfig(BaseModel):
    """Weather service configuration."""

    api_key: str = ""  # Falls back to $OPENWEATHER_API_KEY
    base_url: str = "https://api.openweathermap.org/data/2.5"
    timeout_seconds: float = Field(default=10.0, gt=0, le=60)
    forecast_count: int = Field(default=8, ge=1, le=40)  # Entries requested (cnt)
    forecast_limit: int = Field(default=6, ge=1, le=40)  # Entries kept for display

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the base URL is a valid HTTP/HTTPS URL."""
        return _validate_http_url(v).rstrip("/")

    def resolve_api_key(self) -> str:
        """Return the configured API key, or the one from the environment."""
        return self.api_key or os.environ.get(API_KEY_ENV_VAR, "")


class GeolocationConfig(BaseModel):
    """Where the device position comes from."""

    provider: Literal["ip", "fixed", "disabled"] = "ip"
    lookup_url: str = "http://ip-api.com/json/"
    latitude: float | None = None
    longitude: float | None = None

    @field_validator("lookup_url")
    @classmethod
    def validate_lookup_url(cls, v: str) -> str:
        """Validate that the lookup URL is a valid HTTP/HTTPS URL."""
        return _validate_http_url(v)

    @model_validator(mode="after")
    def validate_fixed_position(self) -> "GeolocationConfig":
        """Both coordinates must be given together, and in range."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        if self.latitude is not None and self.longitude is not None:
            Coordinates(latitude=self.latitude, longitude=self.longitude)
        return self

    @property
    def coordinates(self) -> Coordinates | None:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


class Settings(BaseModel):
    """General application settings."""

    unit: Literal["C", "F"] = "C"
    celsius_precision: Literal[0, 2] = 0
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    """Main configuration model."""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    geolocation: GeolocationConfig = Field(default_factory=GeolocationConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
