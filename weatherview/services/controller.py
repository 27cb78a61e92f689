"""View state controller.

Owns the single ``ViewState`` and drives location resolution and weather
fetching. Each trigger (locate, search, retry) takes a new generation
number; results from an older generation are dropped, so the state only
ever reflects the most recent query.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from ..models.theme import ThemeDescriptor
from ..models.view_state import (
    ErrorAction,
    ErrorKind,
    ErrorState,
    IdleState,
    LoadingState,
    ReadyState,
    ViewState,
)
from ..models.weather import LocationQuery, ResolvedLocation, WeatherReport
from .errors import CityNotFoundError, UpstreamError, WeatherError
from .geolocation import GeolocationProvider
from .theme import select_theme
from .units import TemperatureUnit, format_temperature

logger = logging.getLogger(__name__)

StateListener = Callable[[ViewState], None]

_SEARCH_PROMPT = "Search for a city to see the weather."


class Resolver(Protocol):
    async def resolve(self, query: LocationQuery) -> ResolvedLocation: ...


class Fetcher(Protocol):
    async def fetch_current_and_forecast(self, location: ResolvedLocation) -> WeatherReport: ...


def describe_error(error: WeatherError) -> tuple[str, ErrorAction]:
    """Return the user-facing message and follow-up action for a failure."""
    kind = error.kind
    if kind == ErrorKind.GEOLOCATION_DENIED:
        return f"Location access was denied. {_SEARCH_PROMPT}", ErrorAction.SEARCH
    if kind == ErrorKind.GEOLOCATION_UNSUPPORTED:
        return f"Your location is not available. {_SEARCH_PROMPT}", ErrorAction.SEARCH
    if kind == ErrorKind.EMPTY_QUERY:
        return "Enter a city name to search.", ErrorAction.SEARCH
    if kind == ErrorKind.CITY_NOT_FOUND:
        city = error.city if isinstance(error, CityNotFoundError) else ""
        return f"City '{city}' not found. Check the spelling and search again.", ErrorAction.SEARCH
    if kind == ErrorKind.UPSTREAM:
        status = error.status_code if isinstance(error, UpstreamError) else "?"
        return f"The weather service returned an error (HTTP {status}). Try again.", ErrorAction.RETRY
    if kind == ErrorKind.MALFORMED_RESPONSE:
        return "The weather service sent data we could not read. Try again.", ErrorAction.RETRY
    return "Could not reach the weather service. Try again.", ErrorAction.RETRY


class WeatherController:
    """Single writer of the view state."""

    def __init__(
        self,
        resolver: Resolver,
        fetcher: Fetcher,
        geolocation: GeolocationProvider,
        unit: TemperatureUnit | str = TemperatureUnit.CELSIUS,
        celsius_precision: int = 0,
    ):
        self.resolver = resolver
        self.fetcher = fetcher
        self.geolocation = geolocation
        self.celsius_precision = celsius_precision
        self._unit = TemperatureUnit(unit)
        self._state: ViewState = IdleState()
        self._generation = 0
        self._last_query: str | None = None  # None means the last trigger was locate()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def unit(self) -> TemperatureUnit:
        return self._unit

    @property
    def theme(self) -> ThemeDescriptor:
        """Theme for the current conditions, neutral unless ready."""
        if isinstance(self._state, ReadyState):
            return select_theme(self._state.report.current)
        return select_theme(None)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every new state. Returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def format_temperature(self, kelvin: float) -> str:
        """Format a temperature in the currently selected unit."""
        return format_temperature(kelvin, self._unit, self.celsius_precision)

    def toggle_unit(self) -> TemperatureUnit:
        """Switch between Celsius and Fahrenheit without touching the lookup state."""
        self._unit = self._unit.toggled()
        logger.debug(f"Temperature unit set to {self._unit.value}")
        self._notify()
        return self._unit

    async def locate(self) -> ViewState:
        """Look up weather for the device position.

        On first load the position is requested while still Idle, so a
        denied or unavailable position goes straight to Error. From any
        other state the view enters Loading first, so an older result is
        never shown while the position is looked up.
        """
        generation = self._next_generation()
        self._last_query = None

        if not isinstance(self._state, IdleState):
            self._set_state(LoadingState())

        try:
            coordinates = await self.geolocation.get_current_position()
        except WeatherError as e:
            if self._is_current(generation):
                self._fail(e)
            return self._state

        await self._acquire(coordinates, generation)
        return self._state

    async def search(self, city: str) -> ViewState:
        """Look up weather for a city name, superseding any lookup in flight."""
        generation = self._next_generation()
        self._last_query = city
        await self._acquire(city, generation)
        return self._state

    async def retry(self) -> ViewState:
        """Repeat the last trigger."""
        if self._last_query is None:
            return await self.locate()
        return await self.search(self._last_query)

    async def _acquire(self, query: LocationQuery, generation: int) -> None:
        if not self._is_current(generation):
            return

        self._set_state(LoadingState(query=query))

        try:
            location = await self.resolver.resolve(query)
            report = await self.fetcher.fetch_current_and_forecast(location)
        except WeatherError as e:
            if self._is_current(generation):
                self._fail(e)
            else:
                logger.debug(f"Ignoring failure of superseded lookup {query!r}: {e}")
            return

        if not self._is_current(generation):
            logger.debug(f"Ignoring result of superseded lookup {query!r}")
            return

        self._set_state(ReadyState(report=report))

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _fail(self, error: WeatherError) -> None:
        message, action = describe_error(error)
        logger.warning(f"Weather lookup failed ({error.kind.value}): {error}")
        self._set_state(ErrorState(kind=error.kind, message=message, action=action))

    def _set_state(self, state: ViewState) -> None:
        logger.info(f"View state: {self._state.status} -> {state.status}")
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
