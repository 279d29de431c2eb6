"""Application configuration helpers."""

from __future__ import annotations

from .env import ConfigurationError, env_flag
from .logging import configure_logging
from .storage import DatabaseConfig, default_database_path, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "configure_logging",
    "default_database_path",
    "env_flag",
    "get_database_config",
]
