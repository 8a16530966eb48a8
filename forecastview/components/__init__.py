"""UI components for the forecast view."""

from .console_surface import ConsoleSurface
from .forecast_panel import ForecastPanel
from .forecast_render import render

__all__ = ["ConsoleSurface", "ForecastPanel", "render"]
