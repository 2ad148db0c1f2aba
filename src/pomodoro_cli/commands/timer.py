"""Pomodoro timer commands."""

import typer

from pomodoro_cli.models.focus.modes import MODE_LABELS, TIMER_MODES, is_timer_mode
from pomodoro_cli.models.focus.timer import format_clock
from pomodoro_cli.models.focus.ui import TimerDisplay, show_session_summary
from pomodoro_cli.services.config_service import get_config_service
from pomodoro_cli.services.engine_service import get_engine
from pomodoro_cli.ui.formatters import format_output
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Pomodoro timer for focus sessions")


@app.command("run")
@command_wrapper
def run_timer(
    mode: str = typer.Option(
        "work", "--mode", "-m", help="Mode to begin with: work, short_break, long_break"
    ),
    start: bool = typer.Option(
        True, "--start/--no-start", help="Start counting down immediately"
    ),
    ephemeral: bool = typer.Option(
        False, "--ephemeral", help="Do not read or write settings and history"
    ),
):
    """Open the live timer. Space starts/pauses, q quits."""
    if not is_timer_mode(mode):
        raise AppError(
            f"Invalid mode '{mode}'. Must be one of: {', '.join(TIMER_MODES)}",
            exit_code=ERROR_INVALID_ARGS,
        )

    engine = get_engine(ephemeral=ephemeral)
    if mode != engine.current_mode:
        engine.switch_mode(mode)
    if start:
        engine.start()

    ui = get_config_service().config.ui
    display = TimerDisplay(engine, console)
    result = display.run(
        refresh_per_second=ui.refresh_per_second, screen=ui.fullscreen
    )

    if result == "interrupted":
        console.print("\n[yellow]Timer interrupted.[/yellow]")
    show_session_summary(engine, console)


@app.command("status")
@command_wrapper
def timer_status(
    output: str = typer.Option("table", "--output", "-o", help="table, json or yaml"),
):
    """Show configured interval lengths and today's progress."""
    engine = get_engine()
    data = {
        "durations": {
            mode: format_clock(engine.duration_for(mode)) for mode in TIMER_MODES
        },
        "long_break_interval": engine.long_break_interval,
        "selected_sound": engine.selected_sound,
        "today": engine.today_count,
        "total_focus_time": engine.total_focus_time_string,
    }
    if output == "table":
        console.print("\n[bold]Pomodoro Timer[/bold]\n")
        for mode in TIMER_MODES:
            console.print(f"{MODE_LABELS[mode]:<12} {data['durations'][mode]}")
        console.print(
            f"Long break after every {engine.long_break_interval} work sessions"
        )
        console.print(f"Completion sound: {engine.selected_sound}")
        console.print(
            f"Today: [bold]{engine.today_count}[/bold] pomodoros  •  "
            f"Total focus: {engine.total_focus_time_string}\n"
        )
        return
    format_output(data, output)
