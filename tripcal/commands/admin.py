"""Admin commands for config initialization and session management."""

import sys

from rich.console import Console
from rich.table import Table

from tripcal.config import create_default_config, get_config_path
from tripcal.session import SESSION_KEYS, USER_TOKEN, SessionStore

console = Console()


def init_command(force: bool = False) -> None:
    """Initialize tripcal configuration."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'tripcal init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Config: {config_path}[/dim]")


def mask_token(token: str) -> str:
    """Hide all but the last four characters of a token."""
    if len(token) <= 4:
        return "****"
    return f"{'*' * 8}{token[-4:]}"


def session_set_command(token: str, user_id: str, email: str | None = None, role: str | None = None) -> None:
    """Store session credentials obtained from the backend."""
    store = SessionStore()
    try:
        store.save_user_details(token, user_id, email, role)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Session saved for user {user_id}")
    console.print(f"[dim]Session: {store.path}[/dim]")


def session_show_command() -> None:
    """Show the stored session."""
    store = SessionStore()
    session = store.load()

    if not session:
        console.print("[yellow]No session stored[/yellow]")
        return

    table = Table(title="Session")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key in SESSION_KEYS:
        value = session.get(key)
        if value is None:
            continue
        table.add_row(key, mask_token(value) if key == USER_TOKEN else value)

    console.print(table)


def session_clear_command() -> None:
    """Forget the stored session."""
    store = SessionStore()
    try:
        store.clear()
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
    console.print("[green]✓[/green] Session cleared")
