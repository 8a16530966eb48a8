"""Bucket ISO-8601 timestamps into calendar days."""

from datetime import datetime, tzinfo

from ..errors import ParseError


def classify_day(timestamp: str, tz: tzinfo | None = None) -> int:
    """Return the day of month for a timestamp in the local calendar.

    Aware timestamps are converted to ``tz`` (the system local zone when None)
    before the day is read. Naive timestamps are taken as already local.

    Raises:
        ParseError: If the timestamp cannot be interpreted.
    """
    if not isinstance(timestamp, str) or not timestamp.strip():
        raise ParseError(f"Cannot classify day of {timestamp!r}")

    try:
        moment = datetime.fromisoformat(timestamp.strip())
    except ValueError as e:
        raise ParseError(f"Cannot classify day of {timestamp!r}: {e}") from e

    if moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment.day
