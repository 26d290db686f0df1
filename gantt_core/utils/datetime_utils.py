"""Date and time utilities."""

from datetime import date, datetime, timedelta
from typing import Iterator, List, Union

from dateutil import parser as date_parser

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date_parser.isoparse(value).date()
    raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from start to end (negative when end is earlier)."""
    return (to_date(end) - to_date(start)).days


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every date of the closed range [start, end]."""
    current = to_date(start)
    end = to_date(end)

    while current <= end:
        yield current
        current += timedelta(days=1)


def get_days(start: DateLike, end: DateLike) -> List[date]:
    """Get list of days between start and end dates, inclusive."""
    return list(iter_days(start, end))


def format_date(value: DateLike) -> str:
    """Format as a calendar-date string (YYYY-MM-DD)."""
    return to_date(value).isoformat()
