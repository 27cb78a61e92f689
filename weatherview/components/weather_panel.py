"""Weather panel component for displaying the current view state."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.widgets import Label, Static

from ..models.theme import ThemeDescriptor
from ..models.view_state import ErrorAction, ErrorState, LoadingState, ReadyState, ViewState
from ..models.weather import WeatherReport
from ..services.units import (
    TemperatureUnit,
    format_local_time,
    format_temperature,
    format_visibility,
    format_wind,
)

CONDITION_ICONS = {
    "Clear": "☀",
    "Clouds": "☁",
    "Rain": "🌧",
    "Drizzle": "🌦",
    "Thunderstorm": "⛈",
    "Snow": "❄",
    "Mist": "🌫",
    "Fog": "🌫",
    "Haze": "🌫",
}


class WeatherPanel(Static):
    """Panel displaying weather information."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    WeatherPanel #weather-error {
        display: none;
    }

    WeatherPanel #weather-error.visible {
        display: block;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._report: WeatherReport | None = None

    def compose(self) -> ComposeResult:
        yield Static("Waiting for location...", id="weather-header")
        yield Label("", id="weather-error")
        yield Static("", id="weather-details")
        yield Static("", id="weather-forecast")

    def apply_theme(self, theme: ThemeDescriptor) -> None:
        """Apply theme colors to the panel."""
        self.styles.background = theme.background
        self.styles.color = theme.foreground
        self.styles.border = ("solid", theme.accent)

    def show_state(
        self,
        state: ViewState,
        theme: ThemeDescriptor,
        unit: TemperatureUnit = TemperatureUnit.CELSIUS,
        precision: int = 0,
    ) -> None:
        """Render a view state with the given theme and unit."""
        self.apply_theme(theme)

        if isinstance(state, ReadyState):
            self._show_report(state.report, unit, precision)
        elif isinstance(state, ErrorState):
            self._show_error(state)
        elif isinstance(state, LoadingState):
            self._show_loading(state)
        else:
            self._clear("Waiting for location...")

    def _show_loading(self, state: LoadingState) -> None:
        if state.is_locating:
            self._clear("[dim]Finding your location...[/dim]")
            return
        query = state.query if isinstance(state.query, str) else "your location"
        self._clear(f"[dim]Loading weather for {escape(query)}...[/dim]")

    def _show_error(self, state: ErrorState) -> None:
        self._report = None
        self.query_one("#weather-header", Static).update("[bold]Weather[/bold]")
        hint = "Type a city and press Enter" if state.action == ErrorAction.SEARCH else "Press r to try again"
        error_label = self.query_one("#weather-error", Label)
        error_label.update(f"[bold]{escape(state.message)}[/bold]\n[dim]{hint}[/dim]")
        error_label.add_class("visible")
        self.query_one("#weather-details", Static).update("")
        self.query_one("#weather-forecast", Static).update("")

    def _show_report(self, report: WeatherReport, unit: TemperatureUnit, precision: int) -> None:
        self._report = report
        current = report.current

        def temp(kelvin: float) -> str:
            return format_temperature(kelvin, unit, precision)

        self.query_one("#weather-error", Label).remove_class("visible")

        icon = CONDITION_ICONS.get(current.condition_main, "")
        self.query_one("#weather-header", Static).update(
            f"[bold]{escape(report.location_name)}[/bold]  "
            f"[bold]{temp(current.temperature)}[/bold] {icon} {escape(current.condition_description)}"
        )

        self.query_one("#weather-details", Static).update(
            f"Feels like {temp(current.feels_like)}  "
            f"Low {temp(current.temp_min)}  High {temp(current.temp_max)}\n"
            f"Humidity {current.humidity}%  Pressure {current.pressure} hPa  "
            f"Wind {format_wind(current.wind_speed, current.wind_degrees)}  "
            f"Visibility {format_visibility(current.visibility)}\n"
            f"Sunrise {format_local_time(current.sunrise, current.timezone_offset)}  "
            f"Sunset {format_local_time(current.sunset, current.timezone_offset)}"
        )

        # "09:00 12°C ☁  12:00 14°C ☀  ..."
        forecast_widget = self.query_one("#weather-forecast", Static)
        if report.forecast:
            parts = []
            for entry in report.forecast:
                hour = format_local_time(entry.timestamp, current.timezone_offset)
                parts.append(
                    f"{hour} {temp(entry.temperature)} {CONDITION_ICONS.get(entry.condition_main, '')}".rstrip()
                )
            forecast_widget.update("  ".join(parts))
        else:
            forecast_widget.update("[dim]No forecast[/dim]")

    def _clear(self, header: str) -> None:
        self._report = None
        self.query_one("#weather-header", Static).update(header)
        self.query_one("#weather-error", Label).remove_class("visible")
        self.query_one("#weather-details", Static).update("")
        self.query_one("#weather-forecast", Static).update("")
