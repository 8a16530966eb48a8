"""Forecast data models."""

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Period(BaseModel):
    """One forecast period as returned by the NWS API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    number: int | None = None
    name: str | None = None
    start_time: str | None = Field(default=None, alias="startTime")
    end_time: str | None = Field(default=None, alias="endTime")
    is_daytime: bool | None = Field(default=None, alias="isDaytime")
    temperature: int | float | None = None
    temperature_unit: str | None = Field(default=None, alias="temperatureUnit")
    temperature_trend: str | None = Field(default=None, alias="temperatureTrend")
    wind_speed: str | None = Field(default=None, alias="windSpeed")
    wind_direction: str | None = Field(default=None, alias="windDirection")
    short_forecast: str | None = Field(default=None, alias="shortForecast")
    detailed_forecast: str | None = Field(default=None, alias="detailedForecast")

    # A bad field is dropped to None so the rest of the period still builds
    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def drop_non_string_time(cls, v: Any) -> str | None:
        if isinstance(v, str):
            return v
        if v is not None:
            logger.warning(f"Ignoring non-string timestamp {v!r}")
        return None

    @field_validator(
        "name",
        "temperature_unit",
        "temperature_trend",
        "wind_speed",
        "wind_direction",
        "short_forecast",
        "detailed_forecast",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        """Stringify scalars; accept {"unitCode": ..., "value": ...} from newer API versions."""
        if isinstance(v, dict):
            v = v.get("value")
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)):
            return str(v)
        return None

    @field_validator("temperature", mode="before")
    @classmethod
    def flatten_quantitative(cls, v: Any) -> int | float | None:
        """Accept {"unitCode": ..., "value": ...} temperatures from newer API versions."""
        if isinstance(v, dict):
            v = v.get("value")
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, (int, float)):
            return v
        try:
            return float(v)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric temperature {v!r}")
            return None

    @field_validator("number", mode="before")
    @classmethod
    def drop_bad_number(cls, v: Any) -> int | None:
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return None

    @field_validator("is_daytime", mode="before")
    @classmethod
    def drop_bad_flag(cls, v: Any) -> bool | None:
        return v if isinstance(v, bool) else None


class ForecastRecord(BaseModel):
    """A forecast period bucketed by calendar day."""

    start_time: str | None = None
    end_time: str | None = None
    day_number: int | None = None  # Only meaningful relative to the previous record
    name: str = ""
    short_forecast: str = ""
    detailed_forecast: str = ""
    temperature: int | float | None = None
    temperature_trend: str | None = None
    temperature_unit: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None

    @property
    def label(self) -> str:
        """Return the name, or the start clock time for unnamed hourly periods."""
        if self.name:
            return self.name
        if not self.start_time:
            return ""
        try:
            start = datetime.fromisoformat(self.start_time)
        except ValueError:
            return self.start_time
        if start.tzinfo is not None:
            start = start.astimezone()
        return start.strftime("%a %H:%M")

    @property
    def temperature_display(self) -> str:
        """Return temperature with unit, e.g. '40°F'."""
        if self.temperature is None:
            return "--"
        if isinstance(self.temperature, float):
            value = f"{self.temperature:.0f}"
        else:
            value = str(self.temperature)
        unit = self.temperature_unit or ""
        return f"{value}°{unit}"

    @property
    def wind_display(self) -> str:
        """Return wind as 'SW 10 mph', or empty if unknown."""
        parts = [p for p in (self.wind_direction, self.wind_speed) if p]
        return " ".join(parts)
