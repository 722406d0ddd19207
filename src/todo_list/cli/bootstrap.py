# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the local (gitignored) data directory exists,
- opens the TaskStore and wires it into AppState,
- loads the initial task list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # The db directory is created by TaskStore.open() so failures there surface as StoreOpenError.
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Raises StoreOpenError if the task database cannot be opened; the app has
    nothing to do without it, so callers should treat that as fatal.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_db_path).open()
    state = AppState(
        settings=settings,
        task_store=store,
        selected_priority=settings.default_priority,
    )
    task_api.refresh(state)
    return state


def shutdown(state: AppState) -> None:
    """Close the store. Nothing here should stop the process from exiting."""
    try:
        state.task_store.close()
    except Exception:
        logger.exception("TaskStore close failed.")
