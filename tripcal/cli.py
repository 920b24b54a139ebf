"""CLI entry point for tripcal."""

import typer

from tripcal.commands.admin import (
    init_command,
    session_clear_command,
    session_set_command,
    session_show_command,
)
from tripcal.commands.calendar import calendar_command, pick_command
from tripcal.commands.reserve import reserve_command
from tripcal.log import configure_logging

app = typer.Typer(
    name="tripcal",
    help="TripWise availability calendar and booking client",
    add_completion=False,
)

session_app = typer.Typer(help="Manage the stored session", add_completion=False)
app.add_typer(session_app, name="session")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """TripWise availability calendar and booking client."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize tripcal configuration."""
    init_command(force)


@app.command(name="calendar")
def calendar(
    property_id: str,
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM)"),
) -> None:
    """Show the availability calendar of a property."""
    calendar_command(property_id, month)


@app.command()
def pick(
    property_id: str,
    month: str = typer.Option(None, "--month", help="Month to start on (YYYY-MM)"),
) -> None:
    """Pick your check-in and check-out dates interactively."""
    pick_command(property_id, month)


@app.command()
def reserve(
    property_id: str,
    check_in: str = typer.Option(..., "--check-in", help="Check-in date (YYYY-MM-DD)"),
    check_out: str = typer.Option(..., "--check-out", help="Check-out date (YYYY-MM-DD)"),
    persons: int = typer.Option(None, "--persons", "-p", help="Number of travellers (overrides config)"),
) -> None:
    """Reserve a property for a date range."""
    reserve_command(property_id, check_in, check_out, persons)


@session_app.command(name="set")
def session_set(
    token: str = typer.Option(..., "--token", help="Auth token from the backend"),
    user_id: str = typer.Option(..., "--user-id", help="Your user ID"),
    email: str = typer.Option(None, "--email", help="Your email"),
    role: str = typer.Option(None, "--role", help="Your role"),
) -> None:
    """Store your session credentials."""
    session_set_command(token, user_id, email, role)


@session_app.command(name="show")
def session_show() -> None:
    """Show your stored session."""
    session_show_command()


@session_app.command(name="clear")
def session_clear() -> None:
    """Forget your stored session."""
    session_clear_command()


if __name__ == "__main__":
    app()
