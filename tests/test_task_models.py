# tests/test_task_models.py

from __future__ import annotations

import pytest

from todo_list.tasks.task_models import Priority, Task


def test_priority_order_and_labels() -> None:
    assert list(Priority) == [Priority.LOW, Priority.MEDIUM, Priority.HIGH]
    assert [p.label for p in Priority] == ["Low", "Medium", "High"]
    assert [p.rank for p in Priority] == [0, 1, 2]
    assert Priority.default() is Priority.MEDIUM


def test_priority_id_is_stable() -> None:
    assert Priority.HIGH.id == Priority.HIGH.id == "High"
    assert len({p.id for p in Priority}) == 3


def test_from_db_never_raises() -> None:
    assert Priority.from_db("Low") is Priority.LOW
    assert Priority.from_db("Urgent") is None
    assert Priority.from_db("") is None
    assert Priority.from_db(None) is None


@pytest.mark.parametrize("text", ["high", "HIGH", " High ", "h"])
def test_parse_accepts_label_or_initial(text: str) -> None:
    assert Priority.parse(text) is Priority.HIGH


def test_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Priority.parse("urgent")


def test_task_is_a_frozen_snapshot() -> None:
    t = Task(id=1, title="A", priority=Priority.LOW, date_created=1.0)
    assert t.is_favorite is False
    assert t.level is Priority.LOW
    with pytest.raises(AttributeError):
        t.is_favorite = True  # type: ignore[misc]
