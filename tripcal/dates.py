"""Date utilities for tripcal.

Pure functions for date key formatting, parsing and day arithmetic.
Nothing here reads the clock except today().
"""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from tripcal.domain.models import DateKey

DATE_KEY_FORMAT = "%Y-%m-%d"


def format_date_key(year: int, month_index: int, day: int) -> DateKey:
    """Format a calendar day as a DateKey.

    Args:
        year: Four digit year.
        month_index: Zero-based month (0 = January, 11 = December).
        day: Day of month, 1-based.

    Returns:
        DateKey in YYYY-MM-DD format, zero padded.
    """
    return DateKey(f"{year:04d}-{month_index + 1:02d}-{day:02d}")


def date_key_from_date(value: date) -> DateKey:
    """Format a date as a DateKey."""
    return format_date_key(value.year, value.month - 1, value.day)


def parse_date_key(key: str) -> date | None:
    """Parse a DateKey back into a date.

    Only canonical keys are accepted: "2025-6-1" or "2025-02-30" return None.

    Args:
        key: Candidate DateKey.

    Returns:
        The parsed date, or None if the key is malformed.
    """
    try:
        parsed = datetime.strptime(key, DATE_KEY_FORMAT).date()
    except (TypeError, ValueError):
        return None

    if date_key_from_date(parsed) != key:
        return None
    return parsed


def days_in_month(year: int, month_index: int) -> int:
    """Number of days in a month (leap year aware)."""
    return calendar.monthrange(year, month_index + 1)[1]


def first_weekday(year: int, month_index: int) -> int:
    """Weekday of the first day of a month, Monday = 0 ... Sunday = 6."""
    return date(year, month_index + 1, 1).weekday()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive."""
    if start > end:
        return

    current = start
    while True:
        yield current
        # Stop before stepping past date.max
        if current == end:
            break
        current += timedelta(days=1)


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative if end is earlier)."""
    return (end - start).days


def is_before(key: DateKey, reference: date) -> bool:
    """Check whether a DateKey falls before a reference day.

    Malformed keys are never "before" anything; callers decide how to treat them.
    """
    parsed = parse_date_key(key)
    if parsed is None:
        return False
    return parsed < reference


def month_title(year: int, month_index: int) -> str:
    """Human-readable month title (e.g., "June 2025")."""
    return date(year, month_index + 1, 1).strftime("%B %Y")


def parse_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM string.

    Args:
        value: Month in YYYY-MM format.

    Returns:
        Tuple of (year, month_index) with a zero-based month.

    Raises:
        ValueError: If the value is not a valid month.
    """
    dt = datetime.strptime(value, "%Y-%m")
    return dt.year, dt.month - 1


def today() -> date:
    """Current device-local day."""
    return date.today()
