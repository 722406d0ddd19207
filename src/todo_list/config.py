# src/todo_list/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object, built by the composition root and passed along.
- Every key has a working default, so a fresh checkout runs as-is.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import Priority

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_priority(name: str, default: Priority) -> Priority:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return Priority.parse(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Presentation ----
    default_priority: Priority
    use_color: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo") or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        default_priority = _env_priority(_k("DEFAULT_PRIORITY"), Priority.default())
        # NO_COLOR (https://no-color.org) wins over our own switch.
        use_color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            default_priority=default_priority,
            use_color=use_color,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


def get_settings() -> Settings:
    return Settings.from_env()
