"""Timer settings commands (durations, cadence, completion sound)."""

import typer
from rich.prompt import Confirm

from pomodoro_cli.models.focus.sounds import SOUND_OPTIONS, is_sound_option
from pomodoro_cli.services.engine_service import get_engine
from pomodoro_cli.ui.formatters import format_output, format_success
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from pomodoro_cli.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Timer durations, long-break cadence and sound")

# CLI field name -> (engine attribute, minimum)
NUMERIC_FIELDS: dict[str, tuple[str, int]] = {
    "work": ("work_minutes", 1),
    "short-break": ("short_break_minutes", 1),
    "long-break": ("long_break_minutes", 1),
    "interval": ("long_break_interval", 2),
}


@app.command("show")
@command_wrapper
def show_settings(
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
):
    """Show the current timer settings."""
    engine = get_engine()
    format_output(engine.settings.to_dict(), output, title="Timer Settings")


@app.command("set")
@command_wrapper
def set_setting(
    field: str = typer.Argument(
        ..., help="work, short-break, long-break, interval or sound"
    ),
    value: str = typer.Argument(..., help="Minutes, session count or sound id"),
):
    """Change one timer setting."""
    engine = get_engine()

    if field == "sound":
        if not is_sound_option(value):
            raise AppError(
                f"Unknown sound '{value}'. Choose from: {', '.join(SOUND_OPTIONS)}",
                exit_code=ERROR_NOT_FOUND,
            )
        engine.selected_sound = value
        format_success(f"Completion sound set to '{value}'")
        return

    if field not in NUMERIC_FIELDS:
        raise AppError(
            f"Unknown setting '{field}'. "
            f"Choose from: {', '.join([*NUMERIC_FIELDS, 'sound'])}",
            exit_code=ERROR_INVALID_ARGS,
        )

    attr, minimum = NUMERIC_FIELDS[field]
    try:
        number = int(value)
    except ValueError as e:
        raise AppError(
            f"'{value}' is not a whole number", exit_code=ERROR_INVALID_ARGS
        ) from e
    if number < minimum:
        raise AppError(
            f"{field} must be at least {minimum}", exit_code=ERROR_INVALID_ARGS
        )

    setattr(engine, attr, number)
    format_success(f"{field} set to {getattr(engine, attr)}")


@app.command("reset")
@command_wrapper
def reset_settings(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Restore default durations (25/5/15, long break every 4)."""
    if not yes and not Confirm.ask("Reset timer settings to defaults?", default=False):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    engine = get_engine()
    engine.reset_to_defaults()
    format_success("Timer settings reset to defaults")
