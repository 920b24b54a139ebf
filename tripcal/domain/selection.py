"""Pure functions for the date range selection state machine.

This module contains the functional core for range picking:
- No I/O operations (no network, no console, no files)
- No side effects
- The caller supplies "today" and the unavailable dates snapshot

A selection moves through three shapes:
- Empty: no start, no end
- Start chosen: start set, end None
- Range chosen: start and end set, start <= end

The reducer returns the new state together with the range to commit, if any.
Invoking callbacks is left to the caller.
"""

from dataclasses import dataclass
from datetime import date

from tripcal.dates import date_key_from_date, iter_days, parse_date_key
from tripcal.domain.calendar import CalendarMonth, next_month, prev_month
from tripcal.domain.models import DateKey


@dataclass(frozen=True)
class SelectionState:
    """Immutable selection. end is only set when start is set."""

    start: DateKey | None = None
    end: DateKey | None = None

    @property
    def is_empty(self) -> bool:
        return self.start is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


EMPTY_SELECTION = SelectionState()


@dataclass(frozen=True)
class DateRange:
    """Immutable committed range, start <= end."""

    start: DateKey
    end: DateKey


@dataclass(frozen=True)
class CalendarState:
    """Immutable calendar state: displayed month plus current selection."""

    month: CalendarMonth
    selection: SelectionState = EMPTY_SELECTION


@dataclass(frozen=True)
class SelectionContext:
    """Read-only inputs the reducer consults but never changes."""

    unavailable: frozenset[DateKey]
    today: date
    selection_mode: bool = True


@dataclass(frozen=True)
class DayClicked:
    """User clicked a grid slot. key is None for padding slots."""

    key: DateKey | None


@dataclass(frozen=True)
class PrevMonth:
    """User navigated to the previous month."""


@dataclass(frozen=True)
class NextMonth:
    """User navigated to the next month."""


@dataclass(frozen=True)
class GoToMonth:
    """Jump straight to a month."""

    month: CalendarMonth


@dataclass(frozen=True)
class ClearSelection:
    """Discard the current selection."""


CalendarEvent = DayClicked | PrevMonth | NextMonth | GoToMonth | ClearSelection


@dataclass(frozen=True)
class Transition:
    """Result of applying an event.

    committed is the range this event completed, if any. rejected is True when
    the event completed a range through unavailable dates and the selection
    was reset instead.
    """

    state: CalendarState
    committed: DateRange | None = None
    rejected: bool = False


def normalize_range(first: DateKey, second: DateKey) -> tuple[DateKey, DateKey]:
    """Order two keys so the earlier one comes first."""
    if second < first:
        return second, first
    return first, second


def is_range_valid(start: DateKey, end: DateKey, unavailable: frozenset[DateKey] | set[DateKey]) -> bool:
    """Check that no unavailable day falls inside a range.

    Walks every day from start to end inclusive, so month and year
    boundaries are crossed with real date arithmetic.

    Args:
        start: First day of the range.
        end: Last day of the range (swapped with start if earlier).
        unavailable: Snapshot of unavailable DateKeys.

    Returns:
        True if the whole inclusive range is free, False on the first
        unavailable day or if either key cannot be parsed.
    """
    start, end = normalize_range(start, end)
    start_day = parse_date_key(start)
    end_day = parse_date_key(end)
    if start_day is None or end_day is None:
        return False

    for day in iter_days(start_day, end_day):
        if date_key_from_date(day) in unavailable:
            return False

    return True


def is_clickable(key: DateKey | None, context: SelectionContext) -> bool:
    """Check whether a click on a slot should reach the state machine.

    Padding, unavailable days, past days and malformed keys are ignored,
    as is everything while selection mode is off.
    """
    if not context.selection_mode or key is None:
        return False

    parsed = parse_date_key(key)
    if parsed is None:
        return False

    if key in context.unavailable:
        return False

    return parsed >= context.today


def apply_click(
    selection: SelectionState,
    key: DateKey,
    unavailable: frozenset[DateKey],
) -> tuple[SelectionState, DateRange | None, bool]:
    """Advance the selection for an eligible click.

    Args:
        selection: Current selection.
        key: Clicked day, already known to be clickable.
        unavailable: Snapshot of unavailable DateKeys.

    Returns:
        Tuple of (new_selection, committed_range, rejected).
        committed_range is None unless this click completed a valid range;
        rejected is True when the completed range was refused.
    """
    if selection.start is None or selection.end is not None:
        # Empty, or a finished range being replaced by a fresh start
        return SelectionState(start=key), None, False

    new_start, new_end = normalize_range(selection.start, key)
    if not is_range_valid(new_start, new_end, unavailable):
        return EMPTY_SELECTION, None, True

    return SelectionState(start=new_start, end=new_end), DateRange(new_start, new_end), False


def reduce(state: CalendarState, event: CalendarEvent, context: SelectionContext) -> Transition:
    """Apply one event to the calendar state.

    Args:
        state: Current calendar state.
        event: Event to apply.
        context: Unavailable dates, today and selection mode.

    Returns:
        Transition with the new state and the committed range, if any.
    """
    if isinstance(event, PrevMonth):
        return Transition(CalendarState(prev_month(state.month), state.selection))

    if isinstance(event, NextMonth):
        return Transition(CalendarState(next_month(state.month), state.selection))

    if isinstance(event, GoToMonth):
        return Transition(CalendarState(event.month, state.selection))

    if isinstance(event, ClearSelection):
        return Transition(CalendarState(state.month, EMPTY_SELECTION))

    if isinstance(event, DayClicked):
        if event.key is None or not is_clickable(event.key, context):
            return Transition(state)
        selection, committed, rejected = apply_click(state.selection, event.key, context.unavailable)
        return Transition(CalendarState(state.month, selection), committed, rejected)

    raise TypeError(f"Unknown calendar event: {event!r}")
