"""Tests for tripcal.domain.cells pure functions."""

from datetime import date

from tripcal.domain.calendar import CalendarMonth
from tripcal.domain.cells import CellKind, build_month_view, classify_day, find_cell
from tripcal.domain.models import DateKey
from tripcal.domain.selection import EMPTY_SELECTION, SelectionContext, SelectionState

TODAY = date(2025, 6, 5)
JUNE = CalendarMonth(2025, 5)
RANGE = SelectionState(DateKey("2025-06-10"), DateKey("2025-06-20"))


def make_context(*unavailable: str, selection_mode: bool = True) -> SelectionContext:
    return SelectionContext(
        unavailable=frozenset(DateKey(key) for key in unavailable),
        today=TODAY,
        selection_mode=selection_mode,
    )


class TestClassifyDay:
    """Tests for classify_day."""

    def test_selected_boundaries(self) -> None:
        """Should mark start and end as selected."""
        context = make_context()
        assert classify_day(DateKey("2025-06-10"), RANGE, context) == CellKind.SELECTED
        assert classify_day(DateKey("2025-06-20"), RANGE, context) == CellKind.SELECTED

    def test_in_range_interior(self) -> None:
        """Should mark days strictly inside a committed range."""
        assert classify_day(DateKey("2025-06-15"), RANGE, make_context()) == CellKind.IN_RANGE

    def test_no_in_range_with_only_start(self) -> None:
        """Should not mark anything in range before the range is complete."""
        start_only = SelectionState(start=DateKey("2025-06-10"))
        assert classify_day(DateKey("2025-06-15"), start_only, make_context()) == CellKind.NORMAL

    def test_selected_beats_unavailable(self) -> None:
        """Should prefer selected over unavailable."""
        context = make_context("2025-06-10")
        assert classify_day(DateKey("2025-06-10"), RANGE, context) == CellKind.SELECTED

    def test_unavailable(self) -> None:
        """Should mark unavailable days."""
        context = make_context("2025-06-25")
        assert classify_day(DateKey("2025-06-25"), EMPTY_SELECTION, context) == CellKind.UNAVAILABLE

    def test_unavailable_beats_past(self) -> None:
        """Should prefer unavailable over past."""
        context = make_context("2025-06-01")
        assert classify_day(DateKey("2025-06-01"), EMPTY_SELECTION, context) == CellKind.UNAVAILABLE

    def test_past(self) -> None:
        """Should mark days before today."""
        assert classify_day(DateKey("2025-06-04"), EMPTY_SELECTION, make_context()) == CellKind.PAST

    def test_today_is_normal(self) -> None:
        """Should not mark today as past."""
        assert classify_day(DateKey("2025-06-05"), EMPTY_SELECTION, make_context()) == CellKind.NORMAL

    def test_read_only_hides_selection(self) -> None:
        """Should only report unavailable, past or normal in read-only mode."""
        context = make_context("2025-06-25", selection_mode=False)

        assert classify_day(DateKey("2025-06-10"), RANGE, context) == CellKind.NORMAL
        assert classify_day(DateKey("2025-06-15"), RANGE, context) == CellKind.NORMAL
        assert classify_day(DateKey("2025-06-25"), RANGE, context) == CellKind.UNAVAILABLE
        assert classify_day(DateKey("2025-06-01"), RANGE, context) == CellKind.PAST

    def test_malformed_key_is_unavailable(self) -> None:
        """Should fail closed on keys that cannot be parsed."""
        assert classify_day(DateKey("2025-06-31"), EMPTY_SELECTION, make_context()) == CellKind.UNAVAILABLE


class TestBuildMonthView:
    """Tests for build_month_view."""

    def test_layout(self) -> None:
        """Should lay out Monday-first weeks with padding."""
        view = build_month_view(JUNE, EMPTY_SELECTION, make_context())

        assert view.title == "June 2025"
        assert view.headers[0] == "Mon"
        assert len(view.weeks) == 6
        assert all(len(week) == 7 for week in view.weeks)
        assert all(cell.is_padding for cell in view.weeks[0][:6])
        assert view.weeks[0][6].key == "2025-06-01"

    def test_padding_is_not_clickable(self) -> None:
        """Should never make padding clickable."""
        view = build_month_view(JUNE, EMPTY_SELECTION, make_context())
        padding = [cell for week in view.weeks for cell in week if cell.is_padding]

        assert padding
        assert not any(cell.clickable for cell in padding)

    def test_clickability(self) -> None:
        """Should only allow clicks on normal and selected days."""
        view = build_month_view(JUNE, RANGE, make_context("2025-06-25"))

        assert find_cell(view, 4).clickable is False  # past
        assert find_cell(view, 5).clickable is True  # today
        assert find_cell(view, 10).clickable is True  # selected
        assert find_cell(view, 15).clickable is True  # in range
        assert find_cell(view, 25).clickable is False  # unavailable

    def test_read_only_view(self) -> None:
        """Should make nothing clickable when selection mode is off."""
        view = build_month_view(JUNE, RANGE, make_context(selection_mode=False))
        cells = [cell for week in view.weeks for cell in week]

        assert not any(cell.clickable for cell in cells)
        assert not any(cell.kind in (CellKind.SELECTED, CellKind.IN_RANGE) for cell in cells)

    def test_recomputed_for_new_snapshot(self) -> None:
        """Should reflect a new unavailable snapshot from scratch."""
        before = build_month_view(JUNE, EMPTY_SELECTION, make_context())
        after = build_month_view(JUNE, EMPTY_SELECTION, make_context("2025-06-12"))

        assert find_cell(before, 12).kind == CellKind.NORMAL
        assert find_cell(after, 12).kind == CellKind.UNAVAILABLE

    def test_range_spanning_months(self) -> None:
        """Should mark the part of a range that falls in the displayed month."""
        selection = SelectionState(DateKey("2025-06-28"), DateKey("2025-07-03"))
        view = build_month_view(CalendarMonth(2025, 6), selection, make_context())

        assert find_cell(view, 1).kind == CellKind.IN_RANGE
        assert find_cell(view, 3).kind == CellKind.SELECTED
        assert find_cell(view, 4).kind == CellKind.NORMAL


class TestFindCell:
    """Tests for find_cell."""

    def test_missing_day(self) -> None:
        """Should return None for days the month does not have."""
        view = build_month_view(JUNE, EMPTY_SELECTION, make_context())
        assert find_cell(view, 31) is None
