from datetime import datetime, timedelta
from typing import Optional

from pydantic import TypeAdapter, ValidationError

DELIVERY_WINDOW = timedelta(minutes=30)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_timestamp_adapter = TypeAdapter(datetime)


def window_end(window_start: datetime) -> datetime:
    """
    Last moment of the delivery window (inclusive).
    Example: 2024-10-30 09:00:00 -> 2024-10-30 09:30:00
    Clamped to datetime.max for starts in the last half hour of the calendar.
    """
    if window_start > datetime.max - DELIVERY_WINDOW:
        return datetime.max
    return window_start + DELIVERY_WINDOW


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse "YYYY-MM-DD HH:MM:SS" or ISO-8601 text into a naive local datetime.
    Returns None when the text is empty or not a timestamp.
    """
    if not value:
        return None
    try:
        parsed = _timestamp_adapter.validate_python(value.strip())
    except ValidationError:
        return None
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone().replace(tzinfo=None)
        except OverflowError:
            return None
    return parsed


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)
