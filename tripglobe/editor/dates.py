"""
Calendar-day helpers for the itinerary editor.

Day keys are timezone-naive `YYYY-MM-DD` strings. Every value is reduced to
its calendar part exactly as written: a datetime's time-of-day and UTC offset
are dropped, never converted, so "2024-12-22T23:30:00-08:00" is 2024-12-22.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]


def parse_day_key(value: DateLike) -> Optional[date]:
    """Return the calendar date of `value`, or None when absent or unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) < 10:
            return None
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            logger.debug("Unparseable day key: %r", value)
            return None
    return None


def to_day_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def generate_date_range(start: DateLike, end: DateLike) -> List[str]:
    """
    Every calendar day from start to end inclusive, as ascending day keys.

    Returns an empty list when either bound is missing or invalid, or when
    start is after end.
    """
    first = parse_day_key(start)
    last = parse_day_key(end)
    if first is None or last is None or first > last:
        return []

    days = []
    current = first
    while current <= last:
        days.append(to_day_key(current))
        current += timedelta(days=1)
    return days


def format_date_label(day_key: str) -> str:
    """Long label used for day headers, e.g. 'Sunday, December 22'."""
    parsed = parse_day_key(day_key)
    if parsed is None:
        return day_key
    return f"{parsed:%A}, {parsed:%B} {parsed.day}"


def trip_duration_text(start: DateLike, end: DateLike) -> str:
    first = parse_day_key(start)
    last = parse_day_key(end)
    if first is None or last is None:
        return "—"
    days = max(1, (last - first).days + 1)
    return f"{days} day{'s' if days > 1 else ''}"
