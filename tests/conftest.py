# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.tasks.task_models import Priority
from todo_list.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than reading the real env,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        default_priority=Priority.MEDIUM,
        use_color=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace):
    """Real SQLite store in a per-test temp dir."""
    s = TaskStore(settings.tasks_db_path).open()
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
