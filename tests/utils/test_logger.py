"""Tests for the application logger utility."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Reset the logger singleton and logging state between tests."""
    import pomodoro_cli.utils.logger as logger_mod

    original = logger_mod._logger
    logger_mod._logger = None

    existing = logging.getLogger("pomodoro_cli")
    existing.handlers.clear()

    yield

    logger_mod._logger = None
    logging.getLogger("pomodoro_cli").handlers.clear()
    logger_mod._logger = original


def test_get_logger_creates_log_file(tmp_path):
    """Logger writes to pomodoro.log inside the user log dir."""
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from pomodoro_cli.utils.logger import get_logger

        logger = get_logger()
        logger.info("hello from test")

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "pomodoro.log").read_text()
    assert "hello from test" in content


def test_get_logger_returns_singleton(tmp_path):
    """Repeated calls return the same logger instance."""
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from pomodoro_cli.utils.logger import get_logger

        assert get_logger() is get_logger()
        assert len(get_logger().handlers) == 1


def test_get_logger_does_not_propagate(tmp_path):
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from pomodoro_cli.utils.logger import get_logger

        assert get_logger().propagate is False


def test_module_loggers_land_in_app_log(tmp_path):
    """Records from package modules reach the application log file."""
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from pomodoro_cli.utils.logger import get_logger

        logger = get_logger()
        logging.getLogger("pomodoro_cli.models.focus.engine").info("recorded work session")

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "pomodoro.log").read_text()
    assert "[pomodoro_cli.models.focus.engine] recorded work session" in content


def test_get_logger_creates_parent_dirs(tmp_path):
    """Logger creates nested directories if they do not exist."""
    nested = tmp_path / "a" / "b" / "c"
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(nested)):
        from pomodoro_cli.utils.logger import get_logger

        get_logger()

    assert nested.is_dir()


def test_set_log_level(tmp_path):
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from pomodoro_cli.utils.logger import get_logger, set_log_level

        set_log_level("warning")
        assert get_logger().level == logging.WARNING


def test_set_log_level_unknown_keeps_level(tmp_path):
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from pomodoro_cli.utils.logger import get_logger, set_log_level

        set_log_level("chatty")
        assert get_logger().level == logging.DEBUG
