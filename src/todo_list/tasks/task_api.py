# src/todo_list/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.state import AppState
from .errors import PersistenceError, TaskStoreError
from .task_models import BatchDeleteResult, Priority, Task

logger = logging.getLogger(__name__)


def refresh(state: AppState) -> list[Task]:
    """Re-query the store and replace state.snapshot (newest first)."""
    state.snapshot = state.task_store.list_all()
    return state.snapshot


def _refresh_after_failure(state: AppState) -> None:
    # The original store error is what the caller needs to see.
    try:
        refresh(state)
    except PersistenceError:
        logger.warning("Could not refresh task list after a failed operation.", exc_info=True)


def save_task(state: AppState, title: str, priority: Priority | str | None = None) -> Task:
    """
    Create a task from user input.

    Uses the currently selected priority when none is given.
    """
    level = state.selected_priority if priority is None else Priority(priority)
    try:
        task = state.task_store.create(title, level)
    except TaskStoreError:
        _refresh_after_failure(state)
        raise
    logger.info("Saved task id=%s priority=%s", task.id, level.value)
    refresh(state)
    return task


def toggle_favorite(state: AppState, task_id: int) -> Task:
    try:
        task = state.task_store.toggle_favorite(task_id)
    except TaskStoreError:
        _refresh_after_failure(state)
        raise
    refresh(state)
    return task


def delete_task(state: AppState, task_id: int) -> None:
    try:
        state.task_store.delete(task_id)
    except TaskStoreError:
        _refresh_after_failure(state)
        raise
    refresh(state)


def task_at_offset(state: AppState, offset: int) -> Task | None:
    """Task at a 0-based position of the current snapshot, or None."""
    if 0 <= offset < len(state.snapshot):
        return state.snapshot[offset]
    return None


def delete_at_offsets(state: AppState, offsets: Iterable[int]) -> BatchDeleteResult:
    """
    Delete the tasks at the given 0-based positions of the current snapshot.

    Positions are resolved against the snapshot the user was looking at.
    Offsets outside it are skipped. Ids that were deleted elsewhere in the
    meantime are harmless because store deletes are idempotent.
    """
    ids: list[int] = []
    for offset in offsets:
        task = task_at_offset(state, offset)
        if task is None:
            logger.warning("Ignoring out-of-range list offset %s (size=%s)", offset, len(state.snapshot))
            continue
        ids.append(task.id)

    result = state.task_store.delete_batch(ids)
    if result.failed:
        logger.warning(
            "Batch delete: %d deleted, %d failed (%s)",
            len(result.deleted),
            len(result.failed),
            sorted(result.failed),
        )
        _refresh_after_failure(state)
    else:
        refresh(state)
    return result
