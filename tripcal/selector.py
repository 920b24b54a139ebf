"""Stateful date range selector built on the pure calendar core.

Holds the current CalendarState, the unavailable dates snapshot and the
host's flags, feeds events through the reducer and invokes the commit
callback.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import date

from tripcal.dates import format_date_key, today as current_day
from tripcal.domain.calendar import CalendarMonth, month_of
from tripcal.domain.cells import MonthView, build_month_view
from tripcal.domain.models import DateKey
from tripcal.domain.selection import (
    CalendarEvent,
    CalendarState,
    ClearSelection,
    DateRange,
    DayClicked,
    GoToMonth,
    NextMonth,
    PrevMonth,
    SelectionContext,
    SelectionState,
    reduce,
)

logger = logging.getLogger(__name__)

RangeCallback = Callable[[DateKey, DateKey], None]


class DateRangeSelector:
    """Two-click check-in/check-out picker over a monthly calendar.

    Args:
        unavailable: Unavailable DateKeys. Copied, never mutated.
        on_date_range_selected: Called with (start, end) once per committed range.
        selection_mode: When False the calendar is read-only.
        is_loading: Display-only flag for the host.
        month: Initial month (defaults to the month of today).
        today: Reference day for past-date checks (defaults to the local date).
    """

    def __init__(
        self,
        unavailable: Iterable[str] = (),
        on_date_range_selected: RangeCallback | None = None,
        selection_mode: bool = True,
        is_loading: bool = False,
        month: CalendarMonth | None = None,
        today: date | None = None,
    ) -> None:
        self._today = today
        self._unavailable: frozenset[DateKey] = frozenset(DateKey(key) for key in unavailable)
        self.on_date_range_selected = on_date_range_selected
        self.selection_mode = selection_mode
        self.is_loading = is_loading
        self._state = CalendarState(month or month_of(self.today))
        self.last_rejected = False

    @property
    def today(self) -> date:
        return self._today or current_day()

    @property
    def state(self) -> CalendarState:
        return self._state

    @property
    def month(self) -> CalendarMonth:
        return self._state.month

    @property
    def selection(self) -> SelectionState:
        return self._state.selection

    @property
    def unavailable(self) -> frozenset[DateKey]:
        return self._unavailable

    def context(self) -> SelectionContext:
        return SelectionContext(
            unavailable=self._unavailable,
            today=self.today,
            selection_mode=self.selection_mode,
        )

    def dispatch(self, event: CalendarEvent) -> DateRange | None:
        """Apply an event and fire the callback if it committed a range.

        Returns:
            The committed range, or None.
        """
        transition = reduce(self._state, event, self.context())
        self._state = transition.state
        self.last_rejected = transition.rejected

        if transition.committed is not None:
            logger.debug("Committed range %s - %s", transition.committed.start, transition.committed.end)
            if self.on_date_range_selected is not None:
                self.on_date_range_selected(transition.committed.start, transition.committed.end)
        elif transition.rejected:
            logger.debug("Rejected range through unavailable dates, selection reset")

        return transition.committed

    def click(self, key: str | None) -> DateRange | None:
        """Click a day by key. None stands for a padding slot."""
        return self.dispatch(DayClicked(DateKey(key) if key is not None else None))

    def click_day(self, day: int | None) -> DateRange | None:
        """Click a day number in the displayed month."""
        if day is None:
            return self.dispatch(DayClicked(None))
        return self.click(format_date_key(self.month.year, self.month.month_index, day))

    def prev_month(self) -> None:
        self.dispatch(PrevMonth())

    def next_month(self) -> None:
        self.dispatch(NextMonth())

    def go_to(self, year: int, month_index: int) -> None:
        self.dispatch(GoToMonth(CalendarMonth(year, month_index)))

    def clear(self) -> None:
        self.dispatch(ClearSelection())

    def refresh(self, unavailable: Iterable[str]) -> None:
        """Replace the unavailable dates snapshot."""
        self._unavailable = frozenset(DateKey(key) for key in unavailable)
        logger.debug("Availability refreshed: %d unavailable dates", len(self._unavailable))

    def view(self) -> MonthView:
        """Render model for the displayed month."""
        return build_month_view(self._state.month, self._state.selection, self.context())
