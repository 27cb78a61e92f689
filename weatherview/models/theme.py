"""Display theme models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ThemeMode(str, Enum):
    """Theme variant selected from the current temperature."""

    COLD = "cold"
    WARM = "warm"
    NEUTRAL = "neutral"


class ThemeDescriptor(BaseModel):
    """Colors the presentation layer applies for the current conditions."""

    model_config = ConfigDict(frozen=True)

    mode: ThemeMode
    background: str
    foreground: str
    accent: str
    gradient_start: str
    gradient_end: str
    evening: bool = False  # Local time at the location is 18:00 or later

    @property
    def is_dark(self) -> bool:
        return self.evening
