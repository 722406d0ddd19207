# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import BatchDeleteError


class Priority(StrEnum):
    """
    Task priority.

    The stored value and the display label are the same string, so a Task's
    priority round-trips through the database without a mapping table.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def id(self) -> str:
        # Stable identity for list diffing: the label itself.
        return self.value

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def default(cls) -> Priority:
        return cls.MEDIUM

    @classmethod
    def from_db(cls, raw: str | None) -> Priority | None:
        """Parse a stored label. Unknown or empty values yield None, never an error."""
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def parse(cls, text: str) -> Priority:
        """
        Parse user input: full label or first letter, case-insensitive.

        Raises ValueError for anything else.
        """
        s = (text or "").strip().lower()
        for p in cls:
            if s in (p.value.lower(), p.value[0].lower()):
                return p
        raise ValueError(f"Unknown priority: {text!r} (expected one of: Low, Medium, High)")


_RANKS = {Priority.LOW: 0, Priority.MEDIUM: 1, Priority.HIGH: 2}


@dataclass(frozen=True, slots=True)
class Task:
    """Read-only snapshot of a stored task row."""

    id: int
    title: str
    # Priority member when the stored label is known, raw label otherwise.
    priority: str
    date_created: float
    is_favorite: bool = False

    @property
    def level(self) -> Priority | None:
        return Priority.from_db(self.priority)


@dataclass(slots=True)
class BatchDeleteResult:
    deleted: list[int]
    failed: dict[int, Exception]

    @property
    def ok(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        if self.failed:
            raise BatchDeleteError(self.failed)
