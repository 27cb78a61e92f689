"""Weather data models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinates(BaseModel):
    """A point on Earth."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Validate latitude is in valid range."""
        if not -90 <= v <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {v}")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Validate longitude is in valid range."""
        if not -180 <= v <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {v}")
        return v


# A device position or a free-text city name
LocationQuery = Coordinates | str


class ResolvedLocation(BaseModel):
    """Canonical location used for all weather requests."""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinates
    name: str | None = None  # None until the weather response names it
    country: str | None = None

    @property
    def display_name(self) -> str:
        """Return best available name for display."""
        if self.name and self.country:
            return f"{self.name}, {self.country}"
        if self.name:
            return self.name
        return f"{self.coordinates.latitude:.2f}, {self.coordinates.longitude:.2f}"


class CurrentConditions(BaseModel):
    """Current weather conditions. Temperatures are Kelvin as received."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    country_code: str = ""
    temperature: float = Field(allow_inf_nan=False)
    feels_like: float = Field(allow_inf_nan=False)
    temp_min: float = Field(allow_inf_nan=False)
    temp_max: float = Field(allow_inf_nan=False)
    humidity: int
    pressure: int
    wind_speed: float = Field(allow_inf_nan=False)
    wind_degrees: float = Field(default=0.0, allow_inf_nan=False)
    visibility: int | None = None
    condition_main: str
    condition_description: str = ""
    sunrise: int | None = None
    sunset: int | None = None
    timezone_offset: int = 0


class ForecastEntry(BaseModel):
    """A single step of the short-term forecast."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    temperature: float = Field(allow_inf_nan=False)
    condition_main: str


class WeatherReport(BaseModel):
    """Current conditions plus forecast for one resolved location."""

    model_config = ConfigDict(frozen=True)

    location: ResolvedLocation
    current: CurrentConditions
    forecast: list[ForecastEntry] = Field(default_factory=list)

    @property
    def location_name(self) -> str:
        """Name reported by the weather service, falling back to the resolved one."""
        if self.current.location_name:
            if self.current.country_code:
                return f"{self.current.location_name}, {self.current.country_code}"
            return self.current.location_name
        return self.location.display_name
