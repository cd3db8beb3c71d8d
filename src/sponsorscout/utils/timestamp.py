"""UTC timestamp helpers for stored documents."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """
    Format a datetime the way stored documents expect.

    Naive datetimes are taken to be UTC.

    Examples:
        >>> to_iso(datetime(2025, 1, 9, 12, 0, tzinfo=timezone.utc))
        '2025-01-09T12:00:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a ``Z`` suffix."""
    return to_iso(utc_now())


def parse_timestamp(value: str | int | float | None) -> datetime | None:
    """
    Parse the timestamp shapes ATS APIs return.

    Handles ISO-8601 strings (with or without ``Z``) and epoch milliseconds.

    Returns:
        Aware UTC datetime, or None if the value is missing or unparseable
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (ValueError, OSError, OverflowError):
            return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
