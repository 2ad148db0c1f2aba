"""Full-screen timer UI for focus mode."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .modes import MODE_LABELS, TimerMode
from .ticker import TickScheduler

if TYPE_CHECKING:
    from .engine import EngineSnapshot, FocusEngine
    from .statistics import DailyStat

MODE_COLORS: dict[TimerMode, str] = {
    "work": "red",
    "short_break": "green",
    "long_break": "blue",
}

MODE_KEYS: dict[str, TimerMode] = {
    "1": "work",
    "2": "short_break",
    "3": "long_break",
}

BAR_WIDTH = 40


def render_progress_bar(progress: float, width: int = BAR_WIDTH) -> str:
    """Render a progress fraction as a block bar."""
    progress = min(max(progress, 0.0), 1.0)
    filled = int(width * progress)
    return "▓" * filled + "░" * (width - filled)


def render_cycle_dots(
    completed_work_count: int, long_break_interval: int, on_long_break: bool = False
) -> str:
    """Dots showing position in the current long-break cycle.

    The cycle that earned a long break stays full until that break ends.
    """
    done = completed_work_count % long_break_interval
    if on_long_break and completed_work_count and done == 0:
        done = long_break_interval
    return " ".join("●" if i < done else "○" for i in range(long_break_interval))


class TimerDisplay:
    """Manages the live timer display and routes keys to the engine."""

    def __init__(self, engine: FocusEngine, console: Console | None = None):
        self.engine = engine
        self.console = console or Console()
        self.banner: str | None = None

    def create_layout(self, snapshot: EngineSnapshot) -> Layout:
        """Create the timer layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        color = MODE_COLORS[snapshot.current_mode]
        if snapshot.is_running:
            title = f"🍅  {MODE_LABELS[snapshot.current_mode]}"
        else:
            title = f"⏸  {MODE_LABELS[snapshot.current_mode]} (paused)"
        header_text = Text(title, style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))

        layout["body"].update(
            Align.center(self._create_body_content(snapshot), vertical="middle")
        )
        layout["footer"].update(
            Align.center(self._create_footer_text(snapshot), vertical="middle")
        )
        return layout

    def _create_body_content(self, snapshot: EngineSnapshot) -> Group:
        """Create the main body content."""
        components = []

        if snapshot.remaining < 60:
            timer_color = "red"
        elif not snapshot.is_running:
            timer_color = "yellow"
        else:
            timer_color = MODE_COLORS[snapshot.current_mode]

        components.append(
            Text(snapshot.time_string, style=f"bold {timer_color}", justify="center")
        )
        components.append(Text(""))

        pct = int(snapshot.progress * 100)
        components.append(
            Text(
                f"{render_progress_bar(snapshot.progress)}  {pct}%",
                style="dim",
                justify="center",
            )
        )
        components.append(Text(""))
        components.append(
            Text(
                render_cycle_dots(
                    snapshot.completed_work_count,
                    snapshot.long_break_interval,
                    on_long_break=snapshot.current_mode == "long_break",
                ),
                justify="center",
            )
        )
        components.append(
            Text(
                f"Up next: {MODE_LABELS[self.engine.timer.next_mode()]}",
                style="dim",
                justify="center",
            )
        )
        components.append(
            Text(
                f"Today: {self.engine.today_count}  •  "
                f"Total focus: {self.engine.total_focus_time_string}",
                style="dim",
                justify="center",
            )
        )

        if self.banner:
            components.append(Text(""))
            components.append(Text(self.banner, style="bold green", justify="center"))

        return Group(*components)

    def _create_footer_text(self, snapshot: EngineSnapshot) -> Text:
        """Create footer with keyboard hints."""
        action = "pause" if snapshot.is_running else "start"
        hints = (
            f"space {action}  •  r reset  •  "
            "1 work  2 short  3 long  •  q quit"
        )
        return Text(hints, style="dim", justify="center")

    def handle_key(self, key: str | None) -> bool:
        """Apply a keypress to the engine.

        Returns:
            False when the user asked to quit.
        """
        if key is None:
            return True
        if key == "q":
            return False
        if key in (" ", "p", "s"):
            self.banner = None
            self.engine.start_pause()
        elif key == "r":
            self.engine.reset()
        elif key in MODE_KEYS:
            self.banner = None
            self.engine.switch_mode(MODE_KEYS[key])
        return True

    def _on_completed(self, mode: TimerMode) -> None:
        if mode == "work":
            self.banner = "🎉 Focus session complete! Press space to start your break."
        else:
            self.banner = "Break over. Press space to focus again."

    def run(self, refresh_per_second: int = 4, screen: bool = False) -> str:
        """
        Run the timer until the user quits.

        Returns 'quit' or 'interrupted'.
        """
        from .keyboard import get_keyboard_handler

        keyboard = get_keyboard_handler()
        scheduler = TickScheduler(self.engine)
        unsubscribe = self.engine.on_completed(self._on_completed)
        frame = 1.0 / refresh_per_second

        try:
            with Live(
                self.create_layout(self.engine.snapshot()),
                console=self.console,
                refresh_per_second=refresh_per_second,
                screen=screen,
            ) as live:
                while True:
                    if not self.handle_key(keyboard.get_key()):
                        return "quit"
                    scheduler.poll()
                    live.update(self.create_layout(self.engine.snapshot()))
                    time.sleep(max(0.05, min(frame, scheduler.seconds_until_tick())))
        except KeyboardInterrupt:
            return "interrupted"
        finally:
            unsubscribe()
            self.engine.pause()
            keyboard.stop()


def weekly_stats_table(stats: list[DailyStat], title: str = "Last 7 Days") -> Table:
    """Render daily work-session counts as a histogram table."""
    peak = max((stat.count for stat in stats), default=0)

    table = Table(title=title, show_header=True)
    table.add_column("Day", style="cyan")
    table.add_column("Date", style="dim")
    table.add_column("Sessions", justify="right")
    table.add_column("")

    for stat in stats:
        bar = "█" * int(20 * stat.count / peak) if peak else ""
        table.add_row(stat.day_label, stat.date.isoformat(), str(stat.count), bar)
    return table


def show_session_summary(engine: FocusEngine, console: Console | None = None):
    """Show a summary panel after the timer exits."""
    console = console or Console()

    panel = Panel(
        f"""[bold]Focus summary[/bold]

Completed this run: {engine.completed_work_count} pomodoros
Today: {engine.today_count}  •  This week: {engine.week_count}
Total focus time: {engine.total_focus_time_string}""",
        border_style="green",
        padding=(1, 2),
    )

    console.print(panel)
