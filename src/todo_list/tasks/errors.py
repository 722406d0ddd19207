# src/todo_list/tasks/errors.py

"""
Task store exceptions.

- PersistenceError: a durable read/write/commit failed; recoverable.
- StoreOpenError: the store could not be opened or created at all; fatal.
- NotFoundError: the operation targets an id that is not in the store.
"""

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for task store failures."""


class PersistenceError(TaskStoreError):
    pass


class StoreOpenError(PersistenceError):
    pass


class NotFoundError(TaskStoreError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} not found")
        self.task_id = task_id


class BatchDeleteError(PersistenceError):
    """Some ids of a batch delete failed; the others were still deleted."""

    def __init__(self, failures: dict[int, Exception]) -> None:
        ids = ", ".join(str(i) for i in sorted(failures))
        super().__init__(f"Failed to delete {len(failures)} task(s): {ids}")
        self.failures = dict(failures)
