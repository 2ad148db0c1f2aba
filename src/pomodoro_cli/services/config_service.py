"""Configuration service for managing Pomodoro CLI configuration.

This module provides the ConfigService class, the single source of truth for
application configuration. It handles:

- Loading and saving config.json
- Dotted-key access (``notifications.enabled``) for the ``config`` commands
- Config file initialization with defaults on first run
- Resolving the key/value store location
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from pomodoro_cli.models.config_models import AppConfig

_APP_NAME = "pomodoro_cli"
_DB_FILE = "pomodoro.db"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: write the defaults so users can find and edit them
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        if self.config_path.exists():
            self.config_path.unlink()
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get(self, key: str) -> Any:
        """Get a configuration value by dotted key (e.g. ``ui.fullscreen``).

        Raises:
            KeyError: If the key does not exist.
        """
        node: Any = self.config
        for part in key.split("."):
            if not isinstance(node, BaseModel) or part not in type(node).model_fields:
                raise KeyError(key)
            node = getattr(node, part)
        return node

    def set(self, key: str, value: Any) -> Any:
        """Set a configuration value by dotted key and persist it.

        The value goes through model validation, so ``"false"`` becomes
        ``False`` for boolean fields and out-of-range numbers are rejected.

        Returns:
            The value as stored after validation.

        Raises:
            KeyError: If the key does not exist.
            ValueError: If the value fails validation.
        """
        *parents, leaf = key.split(".")
        data = self.config.model_dump()
        node = data
        for part in parents:
            if not isinstance(node.get(part), dict):
                raise KeyError(key)
            node = node[part]
        if leaf not in node or isinstance(node[leaf], dict):
            raise KeyError(key)
        node[leaf] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value}") from e

        self.save_config()
        return self.get(key)

    def get_store_path(self) -> Path:
        """Return the SQLite file backing timer settings and session history."""
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser()
        return self.data_dir / _DB_FILE


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
