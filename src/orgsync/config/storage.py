"""Where orgsync keeps its database.

``DATABASE_URI`` wins when set. Otherwise orgsync uses a SQLite file named
``orgsync.db`` in ``$ORGSYNC_DATA_DIR``, falling back to
``$XDG_DATA_HOME/orgsync`` (``~/.local/share/orgsync``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_flag

DATABASE_URI_ENV: Final[str] = "DATABASE_URI"
DATA_DIR_ENV: Final[str] = "ORGSYNC_DATA_DIR"
SQL_ECHO_ENV: Final[str] = "ORGSYNC_SQL_ECHO"
DEFAULT_DB_FILENAME: Final[str] = "orgsync.db"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str
    echo: bool = False


def default_database_path() -> Path:
    """Return the SQLite file path, creating its directory."""

    explicit = os.getenv(DATA_DIR_ENV)
    if explicit:
        data_dir = Path(explicit)
    else:
        data_home = os.getenv("XDG_DATA_HOME")
        base = Path(data_home) if data_home else Path.home() / ".local" / "share"
        data_dir = base / "orgsync"
    data_dir = data_dir.expanduser().resolve()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DEFAULT_DB_FILENAME


def get_database_config() -> DatabaseConfig:
    uri = os.getenv(DATABASE_URI_ENV) or f"sqlite+pysqlite:///{default_database_path()}"
    return DatabaseConfig(uri=uri, echo=env_flag(SQL_ECHO_ENV))
