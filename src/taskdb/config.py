"""Settings loaded from TASKDB_* environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "TASKDB"
APP_NAME = "taskdb"
DB_FILENAME = "task_db.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v


def _env_log_level(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def default_db_path() -> str:
    """Resolve the data file: TASKDB_FILE, then XDG_DATA_HOME, then ~/.local/share."""
    explicit = _env(_k("FILE"))
    if explicit:
        return os.path.expanduser(explicit)
    data_home = _env("XDG_DATA_HOME") or os.path.join("~", ".local", "share")
    return os.path.join(os.path.expanduser(data_home), APP_NAME, DB_FILENAME)


@dataclass(frozen=True)
class Settings:
    db_path: str
    log_level: int = logging.WARNING


def load_settings() -> Settings:
    return Settings(
        db_path=default_db_path(),
        log_level=_env_log_level(_k("LOG_LEVEL"), logging.WARNING),
    )
