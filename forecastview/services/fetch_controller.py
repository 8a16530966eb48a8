"""Fetch forecasts from the NWS API and drive the ingestion pipeline."""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

import httpx
from rich.text import Text

from ..components.forecast_render import render as render_forecast
from ..errors import ForecastError, ShapeError, TransportError
from ..models.style import Style
from .model_builder import build_model
from .navigator import extract_periods
from .store import AppState

logger = logging.getLogger(__name__)

SERVER_UNHAPPY_STATUS = 500


class ForecastSurface(Protocol):
    """Display surface the controller paints onto."""

    def show_forecast(
        self, content: Text, style: Style, fetched_at: datetime | None = None
    ) -> None: ...

    def show_message(self, message: str) -> None: ...

    def set_loading(self, loading: bool) -> None: ...


def _format_coordinate(value: float) -> str:
    """Format a coordinate with at most 4 decimals, as the NWS API expects."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class FetchController:
    """Issues forecast requests and runs navigate, build, store and render."""

    def __init__(
        self,
        state: AppState,
        surface: ForecastSurface | None = None,
        notify: Callable[[str], None] | None = None,
    ):
        self.state = state
        self.surface = surface
        self._notify = notify
        self.hourly = state.config.service.hourly

    def toggle_hourly(self) -> bool:
        """Switch between the hourly and the period forecast."""
        self.hourly = not self.hourly
        return self.hourly

    def build_url(self, latitude: float, longitude: float) -> str:
        service = self.state.config.service
        url = (
            f"{service.base_url}/points/"
            f"{_format_coordinate(latitude)},{_format_coordinate(longitude)}/forecast"
        )
        if self.hourly:
            url += "/hourly"
        return url

    async def fetch(self, latitude: float, longitude: float) -> bool:
        """Fetch and display the forecast for a coordinate.

        Returns True when the store was replaced. On any failure a single
        diagnostic is reported and the store keeps its previous contents.
        """
        url = self.build_url(latitude, longitude)
        logger.info(f"Fetching forecast from {url}")
        if self.surface is not None:
            self.surface.set_loading(True)

        try:
            raw = await self._request(url)
            periods = extract_periods(raw)
            if periods is None:
                raise ShapeError("Forecast response has no 'properties'; API shape may have changed")
            model = build_model(periods)
        except ForecastError as e:
            self.report(str(e))
            return False
        finally:
            if self.surface is not None:
                self.surface.set_loading(False)

        self.state.store.replace(model, raw)
        logger.info(f"Forecast updated with {len(model)} periods")
        self.render()
        return True

    async def _request(self, url: str) -> Any:
        service = self.state.config.service
        headers = {"User-Agent": service.user_agent, "Accept": "application/geo+json"}

        try:
            async with httpx.AsyncClient(
                timeout=service.timeout_seconds, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
                return response.json()

        except httpx.TimeoutException as e:
            raise TransportError(f"Timed out fetching forecast: {e}") from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == SERVER_UNHAPPY_STATUS:
                raise TransportError(
                    "Forecast server unavailable (HTTP 500): the server is unhappy, try again later",
                    status_code=status,
                ) from e
            raise TransportError(f"HTTP error fetching forecast: {status}", status_code=status) from e

        except httpx.HTTPError as e:
            raise TransportError(f"Connection error fetching forecast: {e}") from e

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ShapeError(f"Forecast response is not valid JSON: {e}") from e

    def render(self) -> Text:
        """Repaint the stored model with the active style."""
        model, _ = self.state.store.current()
        content = render_forecast(model, self.state.styles.active())
        if self.surface is not None:
            self.surface.show_forecast(
                content, self.state.styles.active(), self.state.store.fetched_at
            )
        return content

    def cycle_style(self) -> Style:
        """Rotate to the next style and repaint."""
        style = self.state.styles.rotate()
        logger.debug(f"Switched to {style.value} style")
        self.render()
        return style

    def report(self, message: str) -> None:
        """Surface a diagnostic message to the user."""
        logger.warning(message)
        if self._notify is not None:
            self._notify(message)
        elif self.surface is not None:
            self.surface.show_message(message)
