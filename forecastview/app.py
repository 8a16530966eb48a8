"""Textual application binding the forecast commands to keys."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from .components.forecast_panel import ForecastPanel
from .errors import ConfigurationError
from .models.config import Config
from .services.fetch_controller import FetchController
from .services.location import AmbientSource, environment_location, resolve_coordinates
from .services.store import AppState

logger = logging.getLogger(__name__)


class ForecastApp(App):
    """Terminal view of the NWS forecast for one location."""

    TITLE = "Forecast View"

    BINDINGS = [
        Binding("f", "show_forecast", "Forecast", show=True),
        Binding("s", "cycle_style", "Style", show=True),
        Binding("h", "toggle_hourly", "Hourly", show=True),
        Binding("q", "close_view", "Close", show=True),
        Binding("escape", "close_view", "Close", show=False),
    ]

    def __init__(
        self,
        config: Config | None = None,
        ambient: AmbientSource | None = environment_location,
    ) -> None:
        super().__init__()
        self.state = AppState(config)
        self._ambient = ambient
        self.controller = FetchController(self.state)

    def compose(self) -> ComposeResult:
        yield Header()
        yield ForecastPanel()
        yield Footer()

    def on_mount(self) -> None:
        """Attach the panel as display surface and fetch once."""
        self.controller.surface = self.query_one(ForecastPanel)
        self.action_show_forecast()

    def action_show_forecast(self) -> None:
        """Fetch the forecast for the configured or ambient location."""
        try:
            latitude, longitude = resolve_coordinates(self.state.config.location, self._ambient)
        except ConfigurationError as e:
            self.controller.report(str(e))
            return

        self.sub_title = f"{latitude},{longitude}"
        # Concurrent fetches are allowed; the last one to finish wins
        self.run_worker(self.controller.fetch(latitude, longitude), group="forecast")

    def action_cycle_style(self) -> None:
        """Rotate to the next display style and repaint."""
        try:
            style = self.controller.cycle_style()
        except ConfigurationError as e:
            self.controller.report(str(e))
            return
        self.notify(f"Style: {style.value}", timeout=2)

    def action_toggle_hourly(self) -> None:
        """Switch between hourly and period forecasts and refetch."""
        hourly = self.controller.toggle_hourly()
        self.notify("Hourly forecast" if hourly else "Period forecast", timeout=2)
        self.action_show_forecast()

    def action_close_view(self) -> None:
        """Tear down the view."""
        logger.info("Closing forecast view")
        self.exit()
