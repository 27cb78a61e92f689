"""Theme selection by temperature and local time of day."""

import time

from ..models.theme import ThemeDescriptor, ThemeMode
from ..models.weather import CurrentConditions
from .units import kelvin_to_celsius, local_hour

# Strictly below this is cold; exactly 18°C is warm
COLD_THRESHOLD_CELSIUS = 18.0

# From this local hour until midnight the evening palette is used
EVENING_HOUR = 18

COLD_THEME = ThemeDescriptor(
    mode=ThemeMode.COLD,
    background="#dcecf0",
    foreground="#15788c",
    accent="#00b9be",
    gradient_start="#dcecf0",
    gradient_end="#15788c",
)

WARM_THEME = ThemeDescriptor(
    mode=ThemeMode.WARM,
    background="#ffeecc",
    foreground="#ffb0a3",
    accent="#ff6973",
    gradient_start="#ffeecc",
    gradient_end="#ffb0a3",
)

COLD_EVENING_THEME = ThemeDescriptor(
    mode=ThemeMode.COLD,
    background="#46425e",
    foreground="#15788c",
    accent="#00b9be",
    gradient_start="#46425e",
    gradient_end="#15788c",
    evening=True,
)

WARM_EVENING_THEME = ThemeDescriptor(
    mode=ThemeMode.WARM,
    background="#46425e",
    foreground="#ffb0a3",
    accent="#ff6973",
    gradient_start="#46425e",
    gradient_end="#ff6973",
    evening=True,
)

NEUTRAL_THEME = ThemeDescriptor(
    mode=ThemeMode.NEUTRAL,
    background="#2b2b2b",
    foreground="#d0d0d0",
    accent="#8a8a8a",
    gradient_start="#2b2b2b",
    gradient_end="#4a4a4a",
)


def is_evening(conditions: CurrentConditions, now: float | None = None) -> bool:
    """Whether it is evening at the reported location.

    Args:
        conditions: Current conditions carrying the location's UTC offset
        now: Epoch seconds to evaluate, defaults to the current time

    Returns:
        True from 18:00 local time until midnight
    """
    if now is None:
        now = time.time()
    return local_hour(now, conditions.timezone_offset) >= EVENING_HOUR


def select_theme(conditions: CurrentConditions | None, now: float | None = None) -> ThemeDescriptor:
    """Pick the display theme for the given conditions (neutral when none).

    Temperature alone decides cold or warm; the location's local time only
    switches between the day and evening palettes of that mode.
    """
    if conditions is None:
        return NEUTRAL_THEME
    evening = is_evening(conditions, now)
    if kelvin_to_celsius(conditions.temperature) < COLD_THRESHOLD_CELSIUS:
        return COLD_EVENING_THEME if evening else COLD_THEME
    return WARM_EVENING_THEME if evening else WARM_THEME
