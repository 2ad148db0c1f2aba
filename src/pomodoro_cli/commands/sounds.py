"""Completion sound commands."""

import typer
from rich.table import Table

from pomodoro_cli.models.focus.sounds import SOUND_LABELS, SOUND_OPTIONS, is_sound_option
from pomodoro_cli.services.engine_service import get_engine
from pomodoro_cli.utils.exit_codes import ERROR_NOT_FOUND
from pomodoro_cli.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Completion sounds")


@app.command("list")
@command_wrapper
def list_sounds():
    """List available completion sounds."""
    engine = get_engine()

    table = Table(title="Completion Sounds", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Selected", justify="center")

    for sound in SOUND_OPTIONS:
        selected = "[green]✓[/green]" if sound == engine.selected_sound else ""
        table.add_row(sound, SOUND_LABELS[sound], selected)

    console.print(table)


@app.command("preview")
@command_wrapper
def preview_sound(
    sound: str = typer.Argument(..., help="Sound id to play"),
):
    """Play a sound once without selecting it."""
    if not is_sound_option(sound):
        raise AppError(
            f"Unknown sound '{sound}'. Choose from: {', '.join(SOUND_OPTIONS)}",
            exit_code=ERROR_NOT_FOUND,
        )
    engine = get_engine()
    engine.preview_sound(sound)
    console.print(f"[dim]Playing {SOUND_LABELS[sound]}...[/dim]")
