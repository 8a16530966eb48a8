"""Application state: the latest forecast and the active display style."""

import logging
from datetime import datetime
from typing import Any

from ..models.config import Config
from ..models.forecast import ForecastRecord
from ..models.style import StyleCycle

logger = logging.getLogger(__name__)


class ForecastStore:
    """Holds the most recent (model, raw response) pair."""

    def __init__(self) -> None:
        self._current: tuple[list[ForecastRecord], dict[str, Any] | None] = ([], None)
        self.fetched_at: datetime | None = None

    def replace(self, model: list[ForecastRecord], raw: dict[str, Any] | None) -> None:
        """Swap in a new pair; readers never see a half-updated one."""
        self._current = (list(model), raw)
        self.fetched_at = datetime.now()
        logger.debug(f"Stored forecast with {len(model)} records")

    def current(self) -> tuple[list[ForecastRecord], dict[str, Any] | None]:
        return self._current

    @property
    def is_empty(self) -> bool:
        return self._current[1] is None


class AppState:
    """State shared by the fetch controller and the app, built once at startup."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.store = ForecastStore()
        self.styles = StyleCycle(self.config.settings.default_style)
