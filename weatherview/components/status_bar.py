"""Status bar component showing lookup status and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ..models.view_state import LoadingState, ViewState, ViewStatus
from ..services.units import TemperatureUnit


class StatusBar(Horizontal):
    """Bottom status bar with clock, last update, unit and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-refresh {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-activity {
        width: auto;
        padding-left: 2;
        color: $warning;
    }

    StatusBar #status-unit {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_update: datetime | None = None
        self._state: ViewState | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-activity")
        yield Static("", id="status-unit")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]u[/dim] °C/°F  [dim]r[/dim] Retry  [dim]l[/dim] Locate  [dim]q[/dim] Quit",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start clock update timer."""
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        """Update the current time display."""
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        if self._last_update:
            minutes = int((now - self._last_update).total_seconds() // 60)
            if minutes == 0:
                refresh_text = "Updated just now"
            elif minutes == 1:
                refresh_text = "Updated 1 min ago"
            else:
                refresh_text = f"Updated {minutes} mins ago"
            self.query_one("#status-refresh", Static).update(f"[dim]{refresh_text}[/dim]")

    def show_state(self, state: ViewState, unit: TemperatureUnit) -> None:
        """Reflect the controller state in the bar."""
        locating = isinstance(state, LoadingState) and state.is_locating
        if state.status == ViewStatus.LOADING and not locating:
            self.query_one("#status-activity", Static).update("[yellow]Fetching weather...[/yellow]")
        elif state.status == ViewStatus.IDLE or locating:
            self.query_one("#status-activity", Static).update("[yellow]Locating...[/yellow]")
        else:
            self.query_one("#status-activity", Static).update("")

        if state.status == ViewStatus.READY and state is not self._state:
            self._last_update = datetime.now()
        self._state = state

        self.query_one("#status-unit", Static).update(f"[dim]{unit.symbol}[/dim]")
        self._update_time()
