"""Reserve command for booking a property over a date range."""

import sys

import requests
from rich.console import Console
from rich.table import Table

from tripcal.api import create_reservation, get_property, get_unavailable_dates
from tripcal.config import Settings, load_settings
from tripcal.dates import parse_date_key
from tripcal.domain.models import PropertyId, UserId
from tripcal.domain.reservation import build_reservation_request, quote_stay
from tripcal.domain.selection import DateRange
from tripcal.selector import DateRangeSelector
from tripcal.session import SessionStore

console = Console()


def load_settings_or_exit() -> Settings:
    """Load settings, exiting with a message on a broken config file."""
    try:
        return load_settings()
    except ValueError as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)


def display_quote(property_name: str, date_range: DateRange, price_per_night: float) -> None:
    """Show the price breakdown before booking."""
    quote = quote_stay(date_range, price_per_night)

    table = Table(title=f"Reservation: {property_name}")
    table.add_column("Check-in", style="cyan")
    table.add_column("Check-out", style="cyan")
    table.add_column("Nights", justify="right")
    table.add_column("Per night", justify="right")
    table.add_column("Total", justify="right", style="green")
    table.add_row(
        quote.check_in,
        quote.check_out,
        str(quote.nights),
        f"Q{quote.price_per_night:,.2f}",
        f"Q{quote.payment:,.2f}",
    )
    console.print(table)


def submit_reservation(
    settings: Settings,
    session: SessionStore,
    property_id: PropertyId,
    date_range: DateRange,
    persons: int,
) -> None:
    """Create a reservation for a committed range.

    Exits with status 1 when there is no session, the request is invalid
    or the backend refuses it.
    """
    user_id = session.get_user_id()
    if not user_id:
        console.print("[red]No session found. Run 'tripcal session set' first.[/red]", style="bold")
        sys.exit(1)

    token = session.fetch_auth_token()

    try:
        prop = get_property(settings.api_base_url, property_id, token, settings.timeout)
        price_per_night = float(prop.get("pricePerNight", 0))
        payload = build_reservation_request(UserId(user_id), property_id, date_range, persons, price_per_night)
        display_quote(prop.get("name", property_id), date_range, price_per_night)

        with console.status("[cyan]Creating reservation...[/cyan]"):
            response = create_reservation(settings.api_base_url, payload, token, settings.timeout)

    except ValueError as e:
        console.print(f"[red]Invalid reservation: {e}[/red]", style="bold")
        sys.exit(1)
    except requests.RequestException as e:
        console.print(f"[red]Reservation failed: {e}[/red]", style="bold")
        sys.exit(1)

    reservation = response.get("reservation") or {}
    console.print("[green]✓[/green] Reservation created", style="bold")
    if reservation.get("_id"):
        console.print(f"[dim]Reservation ID: {reservation['_id']}[/dim]")
    if response.get("message"):
        console.print(f"[dim]{response['message']}[/dim]")


def reserve_command(property_id: str, check_in: str, check_out: str, persons: int | None = None) -> None:
    """Validate a range against availability and reserve it."""
    for label, value in (("check-in", check_in), ("check-out", check_out)):
        if parse_date_key(value) is None:
            console.print(f"[red]Invalid {label} date '{value}', expected YYYY-MM-DD[/red]", style="bold")
            sys.exit(1)

    settings = load_settings_or_exit()
    session = SessionStore()
    token = session.fetch_auth_token()

    try:
        with console.status("[cyan]Checking availability...[/cyan]"):
            unavailable = get_unavailable_dates(settings.api_base_url, PropertyId(property_id), token, settings.timeout)
    except requests.RequestException as e:
        console.print(f"[red]Could not load availability: {e}[/red]", style="bold")
        sys.exit(1)

    # Same two-click gesture as the interactive picker
    selector = DateRangeSelector(unavailable)
    selector.click(check_in)
    if selector.selection.start is None:
        console.print(f"[red]{check_in} cannot be selected (past or booked)[/red]", style="bold")
        sys.exit(1)

    committed = selector.click(check_out)
    if committed is None:
        if selector.last_rejected:
            console.print("[red]The range includes booked dates[/red]", style="bold")
        else:
            console.print(f"[red]{check_out} cannot be selected (past or booked)[/red]", style="bold")
        sys.exit(1)

    submit_reservation(
        settings,
        session,
        PropertyId(property_id),
        committed,
        persons if persons is not None else settings.persons,
    )
