"""Unit tests for main.py, the CLI entry point.

Tests focus on:
- --help flags work for top-level and sub-commands
- The callback loads config and configures logging
- Known sub-commands are registered
"""

from __future__ import annotations

from unittest.mock import MagicMock, PropertyMock, patch

import pytest
from typer.testing import CliRunner

from pomodoro_cli import __version__
from pomodoro_cli.main import app
from pomodoro_cli.utils.exit_codes import ERROR_CONFIG

runner = CliRunner()


def _invoke(*args, catch_exceptions: bool = True):
    return runner.invoke(app, list(args), catch_exceptions=catch_exceptions)


class TestTopLevelHelp:
    def test_help_flag_exits_zero(self):
        result = _invoke("--help")
        assert result.exit_code == 0

    def test_help_lists_groups(self):
        output = _invoke("--help").output
        for group in ("timer", "stats", "settings", "sounds", "notifications", "config"):
            assert group in output

    def test_no_args_shows_help(self):
        result = _invoke()
        assert "Usage" in result.output


class TestSubCommandHelp:
    @pytest.mark.parametrize(
        "group,command",
        [
            ("timer", "run"),
            ("stats", "history"),
            ("settings", "set"),
            ("sounds", "preview"),
            ("notifications", "enable"),
            ("config", "get"),
        ],
    )
    def test_group_help_lists_command(self, group, command):
        result = _invoke(group, "--help")
        assert result.exit_code == 0
        assert command in result.output


class TestCallback:
    def test_version(self, cli_config):
        result = _invoke("version")

        assert result.exit_code == 0
        assert f"version {__version__}" in result.output

    def test_applies_log_level(self, cli_config):
        cli_config.set("logging.level", "warning")

        with patch("pomodoro_cli.main.set_log_level") as mock_level:
            _invoke("version")

        mock_level.assert_called_once_with("WARNING")

    def test_broken_config_exits(self):
        service = MagicMock()
        type(service).config = PropertyMock(
            side_effect=RuntimeError("Failed to load config: bad")
        )
        with patch("pomodoro_cli.main.get_config_service", return_value=service):
            result = _invoke("version")

        assert result.exit_code == ERROR_CONFIG
        assert "Failed to load config" in result.output

    def test_routes_to_command(self, cli_config, cli_engine):
        cli_engine.record_session("work")

        result = _invoke("stats", "show", "-o", "json")

        assert result.exit_code == 0
        assert '"total": 1' in result.output

    def test_releases_engine_resources_after_command(self, cli_config):
        with patch("pomodoro_cli.main.close_engines") as mock_close:
            result = _invoke("version")

        assert result.exit_code == 0
        mock_close.assert_called_once_with()
