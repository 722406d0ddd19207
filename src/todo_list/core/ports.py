# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Actions and commands depend on this Protocol rather than on TaskStore, so the
storage backend stays swappable and tests can pass in fakes.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import BatchDeleteResult, Priority, Task


class TaskRepo(Protocol):
    # Queries (return snapshots)
    def list_all(self, sort_by: str = "date_created", descending: bool = True) -> list[Task]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def count_tasks(self) -> int: ...

    # Commands
    def create(self, title: str, priority: Priority | str = Priority.MEDIUM) -> Task: ...
    def toggle_favorite(self, task_id: int) -> Task: ...
    def delete(self, task_id: int) -> None: ...
    def delete_batch(self, task_ids: Iterable[int]) -> BatchDeleteResult: ...

    # Lifecycle
    def close(self) -> None: ...
