"""Pure functions for classifying day cells of a month view.

This module contains the functional core for presentation state:
- No I/O operations (no network, no console, no files)
- No side effects
- Everything is recomputed from the month, selection and snapshot
"""

from dataclasses import dataclass
from enum import Enum

from tripcal.dates import format_date_key, is_before, parse_date_key
from tripcal.domain.calendar import WEEKDAY_HEADERS, CalendarMonth, build_month_grid
from tripcal.domain.models import DateKey
from tripcal.domain.selection import SelectionContext, SelectionState, is_clickable


class CellKind(Enum):
    """How a day is presented, in priority order."""

    SELECTED = "selected"
    IN_RANGE = "in_range"
    UNAVAILABLE = "unavailable"
    PAST = "past"
    NORMAL = "normal"


CLICKABLE_KINDS = frozenset({CellKind.SELECTED, CellKind.IN_RANGE, CellKind.NORMAL})


@dataclass(frozen=True)
class DayCell:
    """Immutable grid cell. day and key are None for padding slots."""

    day: int | None
    key: DateKey | None
    kind: CellKind | None
    clickable: bool

    @property
    def is_padding(self) -> bool:
        return self.day is None


PADDING_CELL = DayCell(day=None, key=None, kind=None, clickable=False)


@dataclass(frozen=True)
class MonthView:
    """Immutable render model for one month."""

    month: CalendarMonth
    title: str
    headers: tuple[str, ...]
    weeks: list[list[DayCell]]


def classify_day(key: DateKey, selection: SelectionState, context: SelectionContext) -> CellKind:
    """Classify a single day, first match wins.

    Args:
        key: Day to classify.
        selection: Current selection.
        context: Unavailable dates, today and selection mode.

    Returns:
        CellKind for the day. Malformed keys are UNAVAILABLE.
    """
    if parse_date_key(key) is None:
        return CellKind.UNAVAILABLE

    if context.selection_mode:
        if key == selection.start or key == selection.end:
            return CellKind.SELECTED

        if selection.start is not None and selection.end is not None and selection.start < key < selection.end:
            return CellKind.IN_RANGE

    if key in context.unavailable:
        return CellKind.UNAVAILABLE

    if is_before(key, context.today):
        return CellKind.PAST

    return CellKind.NORMAL


def build_day_cell(key: DateKey, day: int, selection: SelectionState, context: SelectionContext) -> DayCell:
    """Build the cell for one calendar day."""
    kind = classify_day(key, selection, context)
    clickable = kind in CLICKABLE_KINDS and is_clickable(key, context)
    return DayCell(day=day, key=key, kind=kind, clickable=clickable)


def build_month_view(month: CalendarMonth, selection: SelectionState, context: SelectionContext) -> MonthView:
    """Build the full render model for a month.

    Args:
        month: Month to display.
        selection: Current selection.
        context: Unavailable dates, today and selection mode.

    Returns:
        MonthView with Monday-first weeks of DayCells, padding included.
    """
    weeks: list[list[DayCell]] = []
    for week in build_month_grid(month.year, month.month_index):
        row: list[DayCell] = []
        for day in week:
            if day is None:
                row.append(PADDING_CELL)
            else:
                key = format_date_key(month.year, month.month_index, day)
                row.append(build_day_cell(key, day, selection, context))
        weeks.append(row)

    return MonthView(month=month, title=month.title, headers=WEEKDAY_HEADERS, weeks=weeks)


def find_cell(view: MonthView, day: int) -> DayCell | None:
    """Find the cell for a day number in a view."""
    for week in view.weeks:
        for cell in week:
            if cell.day == day:
                return cell
    return None
