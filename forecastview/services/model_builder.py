"""Convert service periods into day-numbered forecast records."""

import logging
from collections.abc import Iterable
from datetime import tzinfo

from ..errors import ParseError
from ..models.forecast import ForecastRecord, Period
from .time_classifier import classify_day

logger = logging.getLogger(__name__)


def build_model(periods: Iterable[Period], tz: tzinfo | None = None) -> list[ForecastRecord]:
    """Build one record per period, preserving service order."""
    records = []
    for period in periods:
        try:
            day_number = classify_day(period.start_time, tz)
        except ParseError as e:
            logger.warning(f"Leaving day unset for period {period.name!r}: {e}")
            day_number = None

        records.append(
            ForecastRecord(
                start_time=period.start_time,
                end_time=period.end_time,
                day_number=day_number,
                name=period.name or "",
                short_forecast=period.short_forecast or "",
                detailed_forecast=period.detailed_forecast or "",
                temperature=period.temperature,
                temperature_trend=period.temperature_trend,
                temperature_unit=period.temperature_unit,
                wind_speed=period.wind_speed,
                wind_direction=period.wind_direction,
            )
        )
    return records
