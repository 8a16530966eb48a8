"""Forecast View - NWS forecast fetcher and terminal renderer."""

__version__ = "0.1.0"
