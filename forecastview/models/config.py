"""Configuration models using Pydantic for validation."""

import json
import logging
from pathlib import Path
from typing import Any, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from .style import Style

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "forecastview/0.1.0"


def _coerce_coordinate(v: Any) -> float | None:
    """Turn non-numeric input into None so location fallback can apply."""
    if v is None or isinstance(v, bool):
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric coordinate {v!r}")
        return None


class LocationConfig(BaseModel):
    """Fixed coordinate to forecast for."""

    latitude: float | None = None
    longitude: float | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> float | None:
        return _coerce_coordinate(v)

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float | None) -> float | None:
        """Validate latitude is in valid range."""
        if v is not None and not -90 <= v <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {v}")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float | None) -> float | None:
        """Validate longitude is in valid range."""
        if v is not None and not -180 <= v <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {v}")
        return v

    @property
    def is_complete(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class ServiceConfig(BaseModel):
    """Forecast service connection settings."""

    base_url: str = NWS_BASE_URL
    hourly: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
        if not parsed.netloc:
            raise ValueError(f"Invalid URL '{v}': URL must have a valid host")
        return v.rstrip("/")


class Settings(BaseModel):
    """General application settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    default_style: Style = Style.STANDARD


class Config(BaseModel):
    """Main configuration model."""

    location: LocationConfig = Field(default_factory=LocationConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
