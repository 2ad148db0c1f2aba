"""Statistics commands for completed focus sessions."""

import typer
from rich.prompt import Confirm
from rich.table import Table

from pomodoro_cli.models.focus.modes import MODE_LABELS
from pomodoro_cli.models.focus.ui import weekly_stats_table
from pomodoro_cli.services.engine_service import get_engine
from pomodoro_cli.ui.formatters import format_output, format_success
from pomodoro_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Focus statistics and session history")


@app.command("show")
@command_wrapper
def show_stats(
    output: str = typer.Option(None, "--output", "-o", help="Output format (json, yaml)"),
):
    """Show today, this week and all-time focus counts."""
    engine = get_engine()
    statistics = engine.statistics

    if output in ("json", "yaml"):
        format_output(statistics.summary(engine.work_minutes), output)
        return

    console.print("\n[bold cyan]🍅 Focus Statistics[/bold cyan]\n")
    console.print(f"Today:      [bold]{statistics.today_count}[/bold] pomodoros")
    console.print(f"This week:  [bold]{statistics.week_count}[/bold] pomodoros")
    console.print(f"All time:   [bold]{statistics.total_count}[/bold] pomodoros")
    console.print(f"Focus time: [bold]{engine.total_focus_time_string}[/bold]\n")
    console.print(weekly_stats_table(statistics.weekly_stats))


@app.command("history")
@command_wrapper
def session_history(
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Sessions to show"),
):
    """List the most recent completed sessions."""
    engine = get_engine()
    sessions = engine.session_log.recent(limit)

    if not sessions:
        console.print("[yellow]No sessions recorded yet[/yellow]")
        return

    table = Table(title=f"Recent Sessions ({len(sessions)})", show_header=True)
    table.add_column("Completed", style="cyan")
    table.add_column("Mode")
    table.add_column("ID", style="dim")

    for session in sessions:
        table.add_row(
            session.timestamp.strftime("%Y-%m-%d %H:%M"),
            MODE_LABELS[session.mode],
            str(session.id)[:8],
        )

    console.print(table)


@app.command("clear")
@command_wrapper
def clear_stats(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete all session history and reset the long-break cycle."""
    engine = get_engine()
    if not yes and not Confirm.ask(
        f"Delete all {len(engine.sessions)} recorded sessions?", default=False
    ):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    engine.clear_all_sessions()
    format_success("All sessions cleared")
