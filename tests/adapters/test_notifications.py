"""Tests for the desktop notification adapters."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from pomodoro_cli.adapters.notifications import (
    DesktopNotificationSink,
    NullNotificationSink,
    get_notification_cmd,
)

WHICH = "pomodoro_cli.adapters.notifications.shutil.which"
RUN = "pomodoro_cli.adapters.notifications.subprocess.run"


@pytest.fixture()
def sink():
    sink = DesktopNotificationSink(platform="linux")
    yield sink
    sink.shutdown()


class TestGetNotificationCmd:
    def test_linux(self):
        assert get_notification_cmd("Title", "Body", "linux") == [
            "notify-send",
            "-a",
            "pomodoro",
            "Title",
            "Body",
        ]

    def test_macos_quotes(self):
        cmd = get_notification_cmd('Say "hi"', "Body", "darwin")

        assert cmd[:2] == ["osascript", "-e"]
        assert cmd[2] == 'display notification "Body" with title "Say \\"hi\\""'


class TestPermission:
    def test_granted_when_tool_installed(self, sink):
        callback = MagicMock()
        with patch(WHICH, return_value="/usr/bin/notify-send"):
            future = sink.check_permission(callback)
            assert future.result(timeout=5) is True
        callback.assert_called_once_with(True)

    def test_denied_without_tool(self, sink):
        callback = MagicMock()
        with patch(WHICH, return_value=None):
            future = sink.request_permission(callback)
            assert future.result(timeout=5) is False
        callback.assert_called_once_with(False)

    def test_denied_when_disabled(self):
        sink = DesktopNotificationSink(enabled=False, platform="linux")
        callback = MagicMock()
        try:
            with patch(WHICH, return_value="/usr/bin/notify-send"):
                sink.request_permission(callback).result(timeout=5)
        finally:
            sink.shutdown()
        callback.assert_called_once_with(False)

    def test_backend_per_platform(self):
        with patch(WHICH, side_effect=lambda name: f"/bin/{name}"):
            assert DesktopNotificationSink(platform="darwin").backend == "/bin/osascript"
            assert DesktopNotificationSink(platform="linux").backend == "/bin/notify-send"


class TestSend:
    def test_runs_notify_send(self, sink):
        with patch(WHICH, return_value="/usr/bin/notify-send"), patch(RUN) as mock_run:
            sink.send("Break Over", "Ready to focus again?")

        args = mock_run.call_args[0][0]
        assert args == ["notify-send", "-a", "pomodoro", "Break Over", "Ready to focus again?"]
        assert mock_run.call_args[1]["timeout"] == 5

    def test_suppressed_without_tool(self, sink):
        with patch(WHICH, return_value=None), patch(RUN) as mock_run:
            sink.send("t", "b")
        mock_run.assert_not_called()

    def test_subprocess_errors_are_logged(self, sink):
        with patch(WHICH, return_value="/usr/bin/notify-send"), patch(
            RUN, side_effect=subprocess.TimeoutExpired("notify-send", 5)
        ):
            sink.send("t", "b")

    def test_cancel_all_is_noop(self, sink):
        sink.cancel_all()


class TestNullNotificationSink:
    def test_never_granted(self):
        sink = NullNotificationSink()
        callback = MagicMock()

        assert sink.request_permission(callback) is None
        sink.check_permission(callback)

        assert callback.call_args_list == [((False,),), ((False,),)]

    def test_send_does_nothing(self):
        NullNotificationSink().send("t", "b")
        NullNotificationSink().cancel_all()
