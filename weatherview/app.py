"""Textual application wiring the controller to the widgets."""

import logging
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Header, Input

from .components.status_bar import StatusBar
from .components.weather_panel import WeatherPanel
from .models.config import Config
from .models.view_state import ViewState
from .services.controller import WeatherController
from .services.geolocation import create_geolocation
from .services.location import LocationResolver
from .services.openweather import OpenWeatherClient
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)


def build_controller(config: Config) -> WeatherController:
    """Assemble the controller and its collaborators from configuration."""
    client = OpenWeatherClient(config.weather)
    return WeatherController(
        resolver=LocationResolver(client),
        fetcher=WeatherService(client),
        geolocation=create_geolocation(config.geolocation),
        unit=config.settings.unit,
        celsius_precision=config.settings.celsius_precision,
    )


class WeatherApp(App):
    """Current weather and short forecast for your location or a searched city."""

    TITLE = "Weather"

    BINDINGS = [
        Binding("u", "toggle_unit", "°C/°F"),
        Binding("r", "retry", "Retry"),
        Binding("l", "locate", "Locate"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config: Config, initial_city: str | None = None):
        super().__init__()
        self.config = config
        self.initial_city = initial_city
        self.controller = build_controller(self.config)
        if not self.config.weather.resolve_api_key():
            logger.warning("No API key configured; set OPENWEATHER_API_KEY or weather.api_key")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search for a city and press Enter", id="city-search")
        with VerticalScroll():
            yield WeatherPanel()
        yield StatusBar()

    def on_mount(self) -> None:
        self.controller.subscribe(self._on_state_change)
        self._on_state_change(self.controller.state)
        if self.initial_city:
            self.run_search(self.initial_city)
        else:
            self.run_locate()

    def _on_state_change(self, state: ViewState) -> None:
        self.query_one(WeatherPanel).show_state(
            state,
            self.controller.theme,
            self.controller.unit,
            self.controller.celsius_precision,
        )
        self.query_one(StatusBar).show_state(state, self.controller.unit)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.run_search(event.value)

    # exclusive workers cancel the superseded lookup
    @work(exclusive=True, group="lookup")
    async def run_search(self, city: str) -> None:
        await self.controller.search(city)

    @work(exclusive=True, group="lookup")
    async def run_locate(self) -> None:
        await self.controller.locate()

    def action_toggle_unit(self) -> None:
        self.controller.toggle_unit()

    def action_retry(self) -> None:
        self.run_retry()

    def action_locate(self) -> None:
        self.run_locate()

    @work(exclusive=True, group="lookup")
    async def run_retry(self) -> None:
        await self.controller.retry()
