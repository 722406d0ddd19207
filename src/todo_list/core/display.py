# src/todo_list/core/display.py

"""Priority colors and text rendering for task lists.

Every priority maps to one color; anything that does not parse as a known
priority (schema drift, hand-edited rows, None) gets FALLBACK_COLOR instead
of an error, so rendering is total over whatever is stored.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from ..tasks.task_models import Priority, Task

FALLBACK_COLOR = "gray"
EMPTY_LIST_TEXT = "No tasks yet!"

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "orange",
    Priority.HIGH: "red",
}

# 256-color foreground codes
_ANSI_CODES: dict[str, str] = {
    "green": "\033[38;5;34m",
    "orange": "\033[38;5;208m",
    "red": "\033[38;5;196m",
    "gray": "\033[38;5;245m",
}
RESET = "\033[0m"
DIM = "\033[2m"

DOT = "●"
HEART_FILLED = "♥"
HEART_EMPTY = "♡"


def color_for_priority(value: object) -> str:
    level = Priority.from_db(value) if isinstance(value, str) else None
    if level is None:
        return FALLBACK_COLOR
    return PRIORITY_COLORS[level]


def _paint(text: str, code: str, enabled: bool) -> str:
    if not enabled:
        return text
    return code + text + RESET


def priority_marker(value: object, *, use_color: bool = True) -> str:
    return _paint(DOT, _ANSI_CODES[color_for_priority(value)], use_color)


def favorite_marker(is_favorite: bool, *, use_color: bool = True) -> str:
    if is_favorite:
        return _paint(HEART_FILLED, _ANSI_CODES["red"], use_color)
    return HEART_EMPTY


def format_task_line(index: int, task: Task, *, use_color: bool = True) -> str:
    created = datetime.fromtimestamp(task.date_created).strftime("%Y-%m-%d %H:%M")
    return (
        f"{index:>3}. {priority_marker(task.priority, use_color=use_color)} "
        f"{task.title}  {favorite_marker(task.is_favorite, use_color=use_color)}  "
        f"(#{task.id}, {task.priority}, {created})"
    )


def format_task_list(tasks: Sequence[Task], *, use_color: bool = True) -> str:
    """Numbered list, 1-based, in the order given. Empty input renders EMPTY_LIST_TEXT."""
    if not tasks:
        return _paint(EMPTY_LIST_TEXT, DIM, use_color)
    return "\n".join(
        format_task_line(i, t, use_color=use_color) for i, t in enumerate(tasks, start=1)
    )
