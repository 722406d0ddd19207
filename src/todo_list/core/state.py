# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Priority, Task
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them without a global.
    settings: object

    task_store: TaskRepo
    selected_priority: Priority = Priority.MEDIUM

    # Last query result. Read-only projection; replaced after every mutation.
    snapshot: list[Task] = field(default_factory=list)
