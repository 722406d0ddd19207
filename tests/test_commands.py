# tests/test_commands.py

from __future__ import annotations

import pytest

from todo_list.cli.commands import CommandRegistry, registry
from todo_list.core.display import EMPTY_LIST_TEXT
from todo_list.core.state import AppState
from todo_list.tasks.task_models import Priority

from .fakes import make_commits_fail


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return " ".join(args)

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "x y"
    assert reg.handle(state, "/ALPHA z") == "z"
    assert called["a"] == 2


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_list_empty(state: AppState) -> None:
    assert registry.handle(state, "/list") == EMPTY_LIST_TEXT


def test_add_with_priority_flag(state: AppState) -> None:
    reply = registry.handle(state, "/add -p high Call mom") or ""
    assert "Added #" in reply
    (task,) = state.task_store.list_all()
    assert task.title == "Call mom"
    assert task.priority is Priority.HIGH


def test_add_rejects_bad_priority(state: AppState) -> None:
    reply = registry.handle(state, "/add -p urgent Call mom") or ""
    assert "Unknown priority" in reply
    assert state.task_store.count_tasks() == 0


def test_priority_selection(state: AppState) -> None:
    assert "Medium" in (registry.handle(state, "/priority") or "")
    assert registry.handle(state, "/priority low") == "Selected priority: Low"
    registry.handle(state, "/add water plants")
    assert state.task_store.list_all()[0].priority is Priority.LOW


def test_fav_by_position(state: AppState) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/add B")

    reply = registry.handle(state, "/fav 1") or ""
    assert reply.startswith("Marked")
    assert state.snapshot[0].title == "B"
    assert state.snapshot[0].is_favorite is True

    assert (registry.handle(state, "/fav 1") or "").startswith("Unmarked")
    assert "No task at position 5" in (registry.handle(state, "/fav 5") or "")
    assert "Usage" in (registry.handle(state, "/fav x") or "")


def test_del_by_positions(state: AppState) -> None:
    for title in ("A", "B", "C"):
        registry.handle(state, f"/add {title}")

    reply = registry.handle(state, "/del 1 3") or ""
    assert "Deleted 2 task(s)." in reply
    assert [t.title for t in state.snapshot] == ["B"]


def test_rm_by_id_is_idempotent(state: AppState) -> None:
    registry.handle(state, "/add A")
    task_id = state.snapshot[0].id

    assert (registry.handle(state, f"/rm {task_id}") or "").startswith(f"Deleted #{task_id}.")
    assert (registry.handle(state, f"/rm {task_id}") or "").startswith(f"Deleted #{task_id}.")
    assert "Usage" in (registry.handle(state, "/rm") or "")


def test_store_failure_is_reported_not_raised(
    state: AppState, monkeypatch: pytest.MonkeyPatch
) -> None:
    make_commits_fail(monkeypatch, state.task_store)
    reply = registry.handle(state, "/add A") or ""
    assert reply.startswith("Could not save changes")


def test_status_and_help(state: AppState) -> None:
    registry.handle(state, "/add A")
    status = registry.handle(state, "/status") or ""
    assert "Tasks: 1" in status
    help_text = registry.handle(state, "/help") or ""
    assert "/add" in help_text and "/del" in help_text
