#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import inspect
import sys
from pathlib import Path

# Add parent directory to path to import tripcal
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import Any

import typer

from tripcal.cli import app


def format_option(param_name: str, param: Any) -> str:
    """Format an option with its flags and help text."""
    flags = list(getattr(param, "param_decls", None) or [])
    if not flags:
        flags = [f"--{param_name.replace('_', '-')}"]

    parts = ["- " + ", ".join(f"`{flag}`" for flag in flags)]

    if getattr(param, "help", None):
        parts.append(f": {param.help}")

    default = getattr(param, "default", None)
    if default is not None and default is not False and default is not ...:
        parts.append(f" (default: {default})")

    return "".join(parts)


def command_name_of(command_obj: Any) -> str:
    return command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        f"uv run tripcal {command_name}",
        "```",
        "",
    ]

    sig = inspect.signature(callback)
    args = [name.upper() for name, param in sig.parameters.items() if param.default == inspect.Parameter.empty]
    options = [
        (name, param.default)
        for name, param in sig.parameters.items()
        if param.default != inspect.Parameter.empty and hasattr(param.default, "help")
    ]

    if args:
        lines.append("**Arguments:**")
        lines.append("")
        for arg in args:
            lines.append(f"- `{arg}` (required)")
        lines.append("")

    if options:
        lines.append("**Options:**")
        lines.append("")
        for name, option in options:
            lines.append(format_option(name, option))
        lines.append("")

    return "\n".join(lines)


def iter_commands(typer_app: typer.Typer, prefix: str = "") -> list[tuple[str, Any]]:
    """Collect (full name, command) pairs, descending into sub-apps."""
    commands = [(f"{prefix}{command_name_of(cmd)}", cmd) for cmd in typer_app.registered_commands]
    for group in typer_app.registered_groups:
        if group.typer_instance is not None:
            commands.extend(iter_commands(group.typer_instance, f"{prefix}{group.name} "))
    return sorted(commands, key=lambda item: item[0])


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "Complete reference for all tripcal CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "uv run tripcal [OPTIONS] [COMMAND]",
        "```",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
        "| `--verbose`, `-v` | Show debug logging |",
        "| `--help` | Show help message and exit |",
        "",
        "## Commands",
        "",
    ]

    for command_name, command_obj in iter_commands(app):
        lines.append(generate_command_doc(command_name, command_obj))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
