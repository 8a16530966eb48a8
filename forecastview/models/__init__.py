"""Data models for the forecast view."""

from .config import Config, LocationConfig, ServiceConfig, Settings
from .forecast import ForecastRecord, Period
from .style import Style, StyleCycle

__all__ = [
    "Config",
    "ForecastRecord",
    "LocationConfig",
    "Period",
    "ServiceConfig",
    "Settings",
    "Style",
    "StyleCycle",
]
