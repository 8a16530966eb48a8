"""Resolve the coordinate to forecast for."""

import logging
import os
from collections.abc import Callable, Mapping

from ..errors import ConfigurationError
from ..models.config import LocationConfig

logger = logging.getLogger(__name__)

LATITUDE_ENV = "FORECASTVIEW_LATITUDE"
LONGITUDE_ENV = "FORECASTVIEW_LONGITUDE"

AmbientSource = Callable[[], tuple[float, float] | None]


def environment_location(environ: Mapping[str, str] | None = None) -> tuple[float, float] | None:
    """Read a coordinate from environment variables, if both are set and numeric."""
    environ = os.environ if environ is None else environ
    try:
        location = LocationConfig(
            latitude=environ.get(LATITUDE_ENV),
            longitude=environ.get(LONGITUDE_ENV),
        )
    except ValueError as e:
        logger.warning(f"Ignoring out-of-range environment location: {e}")
        return None
    if not location.is_complete:
        return None
    return location.latitude, location.longitude


def resolve_coordinates(
    location: LocationConfig,
    ambient: AmbientSource | None = environment_location,
) -> tuple[float, float]:
    """Return (latitude, longitude) from config, falling back to the ambient source.

    Raises:
        ConfigurationError: If no usable coordinate is available.
    """
    if location.is_complete:
        return location.latitude, location.longitude

    if ambient is not None:
        coordinates = ambient()
        if coordinates is not None:
            logger.info(f"Using ambient location {coordinates[0]},{coordinates[1]}")
            return coordinates

    raise ConfigurationError(
        "No usable coordinates: set location.latitude and location.longitude in the config "
        f"or the {LATITUDE_ENV} and {LONGITUDE_ENV} environment variables"
    )
