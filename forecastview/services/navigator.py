"""Extract forecast periods from the raw NWS response envelope."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import ShapeError
from ..models.forecast import Period

logger = logging.getLogger(__name__)


def extract_periods(root: Any) -> list[Period] | None:
    """Return the validated period list, or None if ``properties`` is absent.

    None means the API shape may have changed; the caller reports it and
    abandons the fetch.

    Raises:
        ShapeError: If ``properties`` exists but its ``periods`` are unusable.
    """
    if not isinstance(root, Mapping) or "properties" not in root:
        logger.warning("Response has no 'properties' field; API shape may have changed")
        return None

    properties = root["properties"]
    if not isinstance(properties, Mapping):
        raise ShapeError("Response 'properties' is not an object; API shape may have changed")

    periods = properties.get("periods")
    if periods is None:
        raise ShapeError("Response has no 'properties.periods'; API shape may have changed")
    if not isinstance(periods, list):
        raise ShapeError(f"Expected 'periods' to be a list, got {type(periods).__name__}")

    try:
        return [Period.model_validate(p) for p in periods]
    except ValidationError as e:
        raise ShapeError(f"Malformed forecast period: {e.error_count()} validation error(s)") from e
