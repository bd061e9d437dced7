"""Date and timestamp helpers for the storage codec."""

from datetime import date, datetime

# Stored in place of a date for entries that were never practised
NOT_TESTED = "Not tested"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def days_since(day: date, today: date) -> int:
    """Return the number of whole days from day to today (negative if in the future)."""
    return (today - day).days


def format_last_activity(day: date | None) -> str:
    """Encode an optional last-activity date for storage.

    Args:
        day: Date of the last attempt, or None if never tested

    Returns:
        ISO date string, or the NOT_TESTED marker
    """
    return NOT_TESTED if day is None else day.isoformat()


def parse_last_activity(value: str | None) -> date | None:
    """Decode a stored last-activity value.

    Args:
        value: ISO date string or the NOT_TESTED marker

    Returns:
        The parsed date, or None for the marker

    Raises:
        ValueError: If the value is neither a valid date nor the marker
    """
    if value == NOT_TESTED:
        return None
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {value!r}")
    return date.fromisoformat(value)


def format_timestamp(moment: datetime) -> str:
    """Encode an event timestamp with second precision."""
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Decode a stored event timestamp.

    Raises:
        ValueError: If the value is not a valid timestamp
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a timestamp string, got {value!r}")
    return datetime.fromisoformat(value)
