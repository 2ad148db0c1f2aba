"""Desktop notification adapters."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from concurrent.futures import Future, ThreadPoolExecutor

from pomodoro_cli.repositories.repository import NotificationSink, PermissionCallback

logger = logging.getLogger(__name__)

_SEND_TIMEOUT = 5


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def get_notification_cmd(title: str, body: str, platform: str | None = None) -> list[str]:
    """Command that shows a notification on ``platform`` (defaults to this one)."""
    platform = platform or sys.platform
    if platform == "darwin":
        script = (
            f"display notification {_applescript_quote(body)} "
            f"with title {_applescript_quote(title)}"
        )
        return ["osascript", "-e", script]
    return ["notify-send", "-a", "pomodoro", title, body]


class DesktopNotificationSink(NotificationSink):
    """Notifications through ``notify-send`` (Linux) or ``osascript`` (macOS).

    There is no OS permission dialog for either tool, so "permission" means:
    notifications are enabled in the app config and the tool is installed.
    Permission answers are computed on a worker thread and delivered to the
    callback from there; each call returns the ``Future`` for that answer.
    """

    def __init__(
        self,
        enabled: bool = True,
        platform: str | None = None,
        executor: ThreadPoolExecutor | None = None,
    ):
        self.enabled = enabled
        self.platform = platform or sys.platform
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="notify-permission"
        )

    @property
    def backend(self) -> str | None:
        """Path of the notification tool, or None if unavailable."""
        binary = "osascript" if self.platform == "darwin" else "notify-send"
        return shutil.which(binary)

    def _is_permitted(self) -> bool:
        return self.enabled and self.backend is not None

    def _answer(self, callback: PermissionCallback) -> bool:
        granted = self._is_permitted()
        callback(granted)
        return granted

    def check_permission(self, callback: PermissionCallback) -> Future:
        return self._executor.submit(self._answer, callback)

    def request_permission(self, callback: PermissionCallback) -> Future:
        if self.enabled and self.backend is None:
            logger.warning(
                "notifications requested but no notification tool found for %s",
                self.platform,
            )
        return self._executor.submit(self._answer, callback)

    def send(self, title: str, body: str) -> None:
        if not self._is_permitted():
            logger.debug("notification suppressed: %s", title)
            return
        try:
            subprocess.run(
                get_notification_cmd(title, body, self.platform),
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=_SEND_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("failed to send notification: %s", e)

    def cancel_all(self) -> None:
        # Neither tool can withdraw a notification once shown
        logger.debug("cancel_all is a no-op for %s", self.platform)

    def shutdown(self) -> None:
        """Stop the permission worker thread."""
        self._executor.shutdown(wait=True)


class NullNotificationSink(NotificationSink):
    """Never granted; used when notifications are switched off entirely."""

    def request_permission(self, callback: PermissionCallback) -> None:
        callback(False)

    def check_permission(self, callback: PermissionCallback) -> None:
        callback(False)

    def send(self, title: str, body: str) -> None:
        pass

    def cancel_all(self) -> None:
        pass
