"""Calendar commands for viewing availability and picking a date range."""

import sys

import requests
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tripcal.api import get_unavailable_dates
from tripcal.commands.reserve import load_settings_or_exit, submit_reservation
from tripcal.config import Settings
from tripcal.dates import parse_month
from tripcal.domain.calendar import CalendarMonth
from tripcal.domain.cells import CellKind, MonthView, find_cell
from tripcal.domain.models import DateKey, PropertyId
from tripcal.domain.selection import DateRange
from tripcal.selector import DateRangeSelector
from tripcal.session import SessionStore

console = Console()

CELL_STYLES = {
    CellKind.SELECTED: "bold white on blue",
    CellKind.IN_RANGE: "blue on light_sky_blue1",
    CellKind.UNAVAILABLE: "bold red",
    CellKind.PAST: "dim",
    CellKind.NORMAL: "",
}


def render_legend(selection_mode: bool) -> Text:
    """Build the colour legend shown under the grid."""
    legend = Text()
    legend.append(" 1 ", style=CELL_STYLES[CellKind.NORMAL])
    legend.append("Available  ")
    legend.append(" 1 ", style=CELL_STYLES[CellKind.UNAVAILABLE])
    legend.append("Booked  ")
    legend.append(" 1 ", style=CELL_STYLES[CellKind.PAST])
    legend.append("Past")
    if selection_mode:
        legend.append("  ")
        legend.append(" 1 ", style=CELL_STYLES[CellKind.SELECTED])
        legend.append("Selected")
    return legend


def render_month_view(view: MonthView, is_loading: bool = False) -> Table:
    """Render a month view as a rich table.

    Args:
        view: MonthView to render.
        is_loading: Show a loading note in the caption.

    Returns:
        Table with one column per weekday.
    """
    caption = "[dim]Loading availability...[/dim]" if is_loading else None
    table = Table(title=f"◀  {view.title}  ▶", caption=caption, show_lines=False)
    for header in view.headers:
        table.add_column(header, justify="center", style="white", min_width=4)

    for week in view.weeks:
        row: list[Text] = []
        for cell in week:
            if cell.is_padding or cell.kind is None:
                row.append(Text(""))
            else:
                row.append(Text(f"{cell.day:>2}", style=CELL_STYLES[cell.kind]))
        table.add_row(*row)

    return table


def resolve_month(month: str | None) -> CalendarMonth | None:
    """Parse a --month option, exiting on bad input."""
    if not month:
        return None
    try:
        year, month_index = parse_month(month)
    except ValueError:
        console.print(f"[red]Invalid month '{month}', expected YYYY-MM[/red]", style="bold")
        sys.exit(1)
    return CalendarMonth(year, month_index)


def fetch_unavailable_or_exit(settings: Settings, property_id: PropertyId, token: str | None) -> frozenset[DateKey]:
    """Fetch availability with a spinner, exiting on API errors."""
    try:
        with console.status("[cyan]Loading availability...[/cyan]"):
            return get_unavailable_dates(settings.api_base_url, property_id, token, settings.timeout)
    except requests.RequestException as e:
        console.print(f"[red]Could not load availability: {e}[/red]", style="bold")
        sys.exit(1)


def calendar_command(property_id: str, month: str | None = None) -> None:
    """Show a read-only availability calendar for a property."""
    settings = load_settings_or_exit()
    session = SessionStore()
    initial_month = resolve_month(month)

    unavailable = fetch_unavailable_or_exit(settings, PropertyId(property_id), session.fetch_auth_token())
    selector = DateRangeSelector(unavailable, selection_mode=False, month=initial_month)

    console.print(render_month_view(selector.view(), selector.is_loading))
    console.print(render_legend(selection_mode=False))
    console.print(f"[dim]{len(unavailable)} unavailable date(s)[/dim]")


def handle_pick_input(selector: DateRangeSelector, choice: str) -> tuple[bool, DateRange | None]:
    """Apply one line of picker input.

    Args:
        selector: Selector being driven.
        choice: Raw user input.

    Returns:
        Tuple of (keep_going, committed_range).
    """
    choice = choice.strip().lower()

    if choice == "q":
        return False, None
    if choice == "n":
        selector.next_month()
        return True, None
    if choice == "p":
        selector.prev_month()
        return True, None
    if choice == "c":
        selector.clear()
        return True, None

    if not choice.isdecimal():
        console.print("[yellow]Enter a day number, n, p, c or q[/yellow]")
        return True, None

    cell = find_cell(selector.view(), int(choice))
    if cell is None:
        console.print(f"[yellow]No day {choice} in {selector.month.title}[/yellow]")
        return True, None
    if not cell.clickable:
        console.print(f"[yellow]{cell.key} cannot be selected[/yellow]")
        return True, None

    committed = selector.click(cell.key)
    if selector.last_rejected:
        console.print("[dim]That range includes booked dates, pick again[/dim]")
    return True, committed


def pick_command(property_id: str, month: str | None = None) -> None:
    """Interactively pick a check-in/check-out range for a property."""
    settings = load_settings_or_exit()
    session = SessionStore()
    initial_month = resolve_month(month)
    token = session.fetch_auth_token()

    unavailable = fetch_unavailable_or_exit(settings, PropertyId(property_id), token)

    committed_ranges: list[DateRange] = []

    def on_date_range_selected(start: DateKey, end: DateKey) -> None:
        committed_ranges.append(DateRange(start, end))
        console.print(f"[green]✓[/green] Selected {start} → {end}")

    selector = DateRangeSelector(unavailable, on_date_range_selected=on_date_range_selected, month=initial_month)

    while True:
        console.print(render_month_view(selector.view(), selector.is_loading))
        console.print(render_legend(selection_mode=True))

        choice: str = typer.prompt("\nDay number (n next, p previous, c clear, q quit)", type=str)
        keep_going, committed = handle_pick_input(selector, choice)
        if not keep_going:
            break
        if committed is None:
            continue

        if typer.confirm("Create a reservation for these dates?", default=False):
            submit_reservation(settings, session, PropertyId(property_id), committed, settings.persons)
            return

    if committed_ranges:
        last = committed_ranges[-1]
        console.print(f"[dim]Last selection: {last.start} → {last.end}[/dim]")
