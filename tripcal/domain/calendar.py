"""Pure functions for the month grid and month navigation.

This module contains the functional core for calendar layout:
- No I/O operations (no network, no console, no files)
- No side effects
- Weeks always start on Monday
"""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

from tripcal.dates import days_in_month, first_weekday, month_title

DAYS_PER_WEEK = 7

WEEKDAY_HEADERS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class CalendarMonth:
    """Immutable displayed month. month_index is zero-based (0 = January)."""

    year: int
    month_index: int

    def __post_init__(self) -> None:
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"year must be {MINYEAR}-{MAXYEAR}, got {self.year}")
        if not 0 <= self.month_index <= 11:
            raise ValueError(f"month_index must be 0-11, got {self.month_index}")

    @property
    def title(self) -> str:
        return month_title(self.year, self.month_index)


def month_of(day: date) -> CalendarMonth:
    """CalendarMonth containing a given day."""
    return CalendarMonth(day.year, day.month - 1)


def prev_month(month: CalendarMonth) -> CalendarMonth:
    """Step back one month, wrapping January to December of the previous year.

    January of the first representable year stays put.
    """
    if month.month_index == 0:
        if month.year == MINYEAR:
            return month
        return CalendarMonth(month.year - 1, 11)
    return CalendarMonth(month.year, month.month_index - 1)


def next_month(month: CalendarMonth) -> CalendarMonth:
    """Step forward one month, wrapping December to January of the next year.

    December of the last representable year stays put.
    """
    if month.month_index == 11:
        if month.year == MAXYEAR:
            return month
        return CalendarMonth(month.year + 1, 0)
    return CalendarMonth(month.year, month.month_index + 1)


def build_month_slots(year: int, month_index: int) -> list[int | None]:
    """Build the day slots for a month grid.

    Args:
        year: Four digit year.
        month_index: Zero-based month.

    Returns:
        Flat list of slots: None for padding, otherwise the day number.
        Length is always a multiple of 7 and the first column is Monday.
    """
    leading = first_weekday(year, month_index)
    slots: list[int | None] = [None] * leading
    slots.extend(range(1, days_in_month(year, month_index) + 1))

    while len(slots) % DAYS_PER_WEEK != 0:
        slots.append(None)

    return slots


def build_month_grid(year: int, month_index: int) -> list[list[int | None]]:
    """Group the month slots into weeks of exactly 7 slots."""
    slots = build_month_slots(year, month_index)
    return [slots[i : i + DAYS_PER_WEEK] for i in range(0, len(slots), DAYS_PER_WEEK)]
