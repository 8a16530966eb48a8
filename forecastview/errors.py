"""Error types raised by the forecast pipeline."""


class ForecastError(Exception):
    """Base class for all forecast errors."""


class ConfigurationError(ForecastError):
    """No usable coordinates, or an unknown display style."""


class TransportError(ForecastError):
    """Network failure or non-2xx response from the forecast service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ShapeError(ForecastError):
    """Response did not have the expected structure."""


class ParseError(ForecastError):
    """A timestamp could not be interpreted."""
