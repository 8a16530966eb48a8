"""Services for fetching, building and storing forecasts."""

from .fetch_controller import FetchController, ForecastSurface
from .location import environment_location, resolve_coordinates
from .model_builder import build_model
from .navigator import extract_periods
from .store import AppState, ForecastStore
from .time_classifier import classify_day

__all__ = [
    "AppState",
    "FetchController",
    "ForecastStore",
    "ForecastSurface",
    "build_model",
    "classify_day",
    "environment_location",
    "extract_periods",
    "resolve_coordinates",
]
