"""Service layer for Pomodoro CLI."""

from .config_service import ConfigService, get_config_service
from .engine_service import get_engine

__all__ = ["ConfigService", "get_config_service", "get_engine"]
