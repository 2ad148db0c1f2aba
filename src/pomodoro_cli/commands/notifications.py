"""Desktop notification commands."""

from concurrent.futures import Future, TimeoutError

import typer

from pomodoro_cli.models.focus.modes import COMPLETION_MESSAGES
from pomodoro_cli.services.config_service import get_config_service
from pomodoro_cli.services.engine_service import get_engine
from pomodoro_cli.ui.formatters import format_success, format_warning
from pomodoro_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Desktop notifications on completion")

PERMISSION_TIMEOUT = 5.0


def _wait(future: Future | None) -> None:
    """Block until an asynchronous permission answer arrives (or times out)."""
    if future is None:
        return
    try:
        future.result(timeout=PERMISSION_TIMEOUT)
    except TimeoutError:
        format_warning("No answer from the notification service yet")


@app.command("status")
@command_wrapper
def notification_status():
    """Show whether completion notifications will be delivered."""
    enabled = get_config_service().config.notifications.enabled
    engine = get_engine()
    _wait(engine.refresh_notification_permission())

    console.print(f"Enabled in config: {'yes' if enabled else 'no'}")
    if engine.notification_permission_granted:
        console.print("Permission: [green]granted[/green]")
    else:
        console.print("Permission: [yellow]not granted[/yellow]")


@app.command("enable")
@command_wrapper
def enable_notifications():
    """Turn notifications on and request permission."""
    get_config_service().set("notifications.enabled", True)
    engine = get_engine()
    _wait(engine.request_notification_permission())

    if engine.notification_permission_granted:
        format_success("Notifications enabled")
    else:
        format_warning(
            "Notifications enabled, but no notification tool was found "
            "(install notify-send on Linux)"
        )


@app.command("disable")
@command_wrapper
def disable_notifications():
    """Turn notifications off."""
    get_engine().cancel_notifications()
    get_config_service().set("notifications.enabled", False)
    format_success("Notifications disabled")


@app.command("test")
@command_wrapper
def test_notification():
    """Send the focus-complete notification now."""
    engine = get_engine()
    _wait(engine.refresh_notification_permission())
    if not engine.notification_permission_granted:
        format_warning("Notifications are not permitted; nothing sent")
        raise typer.Exit(1)

    title, body = COMPLETION_MESSAGES["work"]
    engine.send_notification(title, body)
    format_success("Test notification sent")
