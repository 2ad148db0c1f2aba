"""Output formatters for Pomodoro CLI."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()


def format_output(data: Any, output_format: str = "table", title: str | None = None) -> None:
    """Format and display output based on format type."""
    if output_format == "json":
        console.print_json(json.dumps(data, default=str))
    elif output_format == "yaml":
        console.print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip())
    else:
        format_table(data, title=title)


def format_table(data: Any, title: str | None = None) -> None:
    """Format data as a two-column table, flattening nested dicts."""
    if not isinstance(data, dict):
        console.print(data)
        return

    table = Table(title=title, show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in flatten(data).items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


def flatten(data: dict, prefix: str = "") -> dict[str, Any]:
    """Flatten nested dicts into dotted keys."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten(value, prefix=f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
