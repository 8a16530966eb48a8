"""Forecast panel component for displaying the rendered forecast."""

from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label, Static

from ..models.style import Style


class ForecastPanel(Static):
    """Panel displaying the forecast in the active style."""

    DEFAULT_CSS = """
    ForecastPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    ForecastPanel #forecast-header {
        height: auto;
    }

    ForecastPanel #forecast-error {
        color: $error;
        display: none;
    }

    ForecastPanel #forecast-error.visible {
        display: block;
    }

    ForecastPanel VerticalScroll {
        height: 1fr;
    }
    """

    def __init__(self, title: str = "Forecast") -> None:
        super().__init__()
        self._title = title
        self._content: Text | None = None

    def compose(self) -> ComposeResult:
        yield Static(f"[bold]{self._title}[/bold]", id="forecast-header")
        yield Label("", id="forecast-error")
        with VerticalScroll():
            yield Static("[dim]Press f to fetch the forecast[/dim]", id="forecast-body")

    @property
    def content(self) -> Text | None:
        """The last rendered forecast text."""
        return self._content

    def set_loading(self, loading: bool) -> None:
        """Set loading state."""
        header = self.query_one("#forecast-header", Static)
        if loading:
            header.update(f"[bold]{self._title}[/bold]  [dim]Loading...[/dim]")
        else:
            header.update(f"[bold]{self._title}[/bold]")

    def show_message(self, message: str) -> None:
        """Display a diagnostic message above the forecast."""
        error_label = self.query_one("#forecast-error", Label)
        error_label.update(Text(message, style="red"))
        error_label.add_class("visible")

    def show_forecast(self, content: Text, style: Style, fetched_at: datetime | None = None) -> None:
        """Replace the panel contents with a freshly rendered forecast."""
        self._content = content
        self.query_one("#forecast-error", Label).remove_class("visible")

        stamp = f"  [dim]updated {fetched_at.strftime('%H:%M')}[/dim]" if fetched_at else ""
        self.query_one("#forecast-header", Static).update(
            f"[bold]{self._title}[/bold]  [dim]{style.value}[/dim]{stamp}"
        )
        self.query_one("#forecast-body", Static).update(content)
