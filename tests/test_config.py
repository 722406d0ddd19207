# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list.config import Settings
from todo_list.tasks.task_models import Priority


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TODO_APP_NAME",
        "TODO_LOG_LEVEL",
        "TODO_DATA_DIR",
        "TODO_TASKS_DB_PATH",
        "TODO_DEFAULT_PRIORITY",
        "TODO_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "INFO"
    assert s.default_priority is Priority.MEDIUM
    assert s.use_color is True
    assert s.data_dir == Path(".local/todo")
    assert s.tasks_db_path == Path(".local/todo/tasks.sqlite3")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_DEFAULT_PRIORITY", "high")
    monkeypatch.setenv("TODO_COLOR", "off")

    s = Settings.from_env()
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.default_priority is Priority.HIGH
    assert s.use_color is False


def test_bad_priority_falls_back_and_no_color_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_DEFAULT_PRIORITY", "urgent")
    monkeypatch.setenv("NO_COLOR", "1")

    s = Settings.from_env()
    assert s.default_priority is Priority.MEDIUM
    assert s.use_color is False
