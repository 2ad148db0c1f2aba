"""Main entry point for Pomodoro CLI."""

import typer
from rich.console import Console

from pomodoro_cli import __version__
from pomodoro_cli.commands import config, notifications, settings, sounds, stats, timer
from pomodoro_cli.services.config_service import get_config_service
from pomodoro_cli.services.engine_service import close_engines
from pomodoro_cli.ui.formatters import format_error
from pomodoro_cli.utils.exit_codes import ERROR_CONFIG
from pomodoro_cli.utils.logger import get_logger, set_log_level

app = typer.Typer(
    name="pomodoro",
    help="A terminal Pomodoro timer with session history and focus statistics",
    no_args_is_help=True,
)

console = Console()


app.add_typer(timer.app, name="timer", help="Run the Pomodoro timer")
app.add_typer(stats.app, name="stats", help="Focus statistics and history")
app.add_typer(settings.app, name="settings", help="Timer durations and sound")
app.add_typer(sounds.app, name="sounds", help="Completion sounds")
app.add_typer(
    notifications.app, name="notifications", help="Desktop notifications"
)
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Load configuration and set up logging before any command runs."""
    ctx.call_on_close(close_engines)
    try:
        level = get_config_service().config.logging.level
    except RuntimeError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_CONFIG) from e
    get_logger()
    set_log_level(level)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
