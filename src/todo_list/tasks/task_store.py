# src/todo_list/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Iterable, Iterator
from pathlib import Path

from .errors import NotFoundError, PersistenceError, StoreOpenError
from .task_models import BatchDeleteResult, Priority, Task

logger = logging.getLogger(__name__)

_PRIORITY_RANK_SQL = (
    "CASE priority "
    + " ".join(f"WHEN '{p.value}' THEN {p.rank}" for p in Priority)
    + " ELSE -1 END"
)

# Whitelisted ORDER BY expressions (never interpolate user input).
_SORT_KEYS: dict[str, str] = {
    "date_created": "date_created",
    "dateCreated": "date_created",
    "title": "title COLLATE NOCASE",
    "priority": _PRIORITY_RANK_SQL,
    "id": "id",
}


class TaskStore:
    """
    SQLite task store.

    One fixed schema, created on open(). Every operation opens its own
    short-lived connection and commits before returning, so a call is atomic
    on its own and nothing is shared between calls.

    Lifecycle:
    - open() at startup (raises StoreOpenError if the file cannot be created)
    - close() at shutdown; later calls raise PersistenceError
    - or use it as a context manager

    Queries return frozen Task snapshots. The only mutation paths are
    create(), toggle_favorite(), delete() and delete_batch().
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._is_open = False

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> TaskStore:
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._ensure_schema()
        except (OSError, sqlite3.Error) as exc:
            logger.critical("TaskStore cannot open db=%s: %s", self._db_path, exc)
            raise StoreOpenError(f"Cannot open task store at {self._db_path}: {exc}") from exc

        self._is_open = True
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())
        return self

    def close(self) -> None:
        """No persistent connections are held; this only ends the handle's lifetime."""
        if self._is_open:
            logger.debug("TaskStore closed db=%s", self._db_path)
        self._is_open = False

    def __enter__(self) -> TaskStore:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL DEFAULT '',
                    priority TEXT NOT NULL DEFAULT 'Medium',
                    date_created REAL NOT NULL,
                    is_favorite INTEGER NOT NULL DEFAULT 0
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_date_created ON tasks(date_created)")
            conn.commit()
        finally:
            conn.close()

    @contextlib.contextmanager
    def _connect(self, action: str) -> Iterator[sqlite3.Connection]:
        """
        Connection for a single operation.

        Commits on success. Any sqlite3.Error rolls back and is re-raised as
        PersistenceError; other exceptions close the connection uncommitted.
        """
        if not self._is_open:
            raise PersistenceError(f"TaskStore is closed (db={self._db_path})")

        try:
            conn = self._get_conn()
        except sqlite3.Error as exc:
            logger.error("TaskStore %s: cannot connect db=%s: %s", action, self._db_path, exc)
            raise PersistenceError(f"{action} failed: {exc}") from exc

        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            with contextlib.suppress(sqlite3.Error):
                conn.rollback()
            logger.error("TaskStore %s failed db=%s: %s", action, self._db_path, exc)
            raise PersistenceError(f"{action} failed: {exc}") from exc
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        raw_priority = str(row["priority"] or "")
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            priority=Priority.from_db(raw_priority) or raw_priority,
            date_created=float(row["date_created"] or 0.0),
            is_favorite=bool(row["is_favorite"]),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._connect("count") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def create(self, title: str, priority: Priority | str = Priority.MEDIUM) -> Task:
        level = Priority(priority)
        now = time.time()

        with self._connect("create") as conn:
            cur = conn.execute(
                "INSERT INTO tasks(title, priority, date_created, is_favorite) VALUES (?, ?, ?, 0)",
                (str(title), level.value, now),
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise PersistenceError("SQLite did not return lastrowid for tasks insert")

        task = Task(id=int(rowid), title=str(title), priority=level, date_created=now)
        logger.debug("Task created id=%s priority=%s", task.id, level.value)
        return task

    def get_task(self, task_id: int) -> Task | None:
        with self._connect("get") as conn:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
            return self._row_to_task(row) if row else None

    def list_all(self, sort_by: str = "date_created", descending: bool = True) -> list[Task]:
        """
        Return every task in the requested order (newest first by default).

        Ties are broken by id in the same direction, so of two tasks created
        within the same clock tick the later insert still sorts first.
        """
        expr = _SORT_KEYS.get(sort_by)
        if expr is None:
            raise ValueError(f"Unsupported sort field: {sort_by!r}")
        direction = "DESC" if descending else "ASC"

        with self._connect("list") as conn:
            rows = conn.execute(
                f"SELECT * FROM tasks ORDER BY {expr} {direction}, id {direction}"
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

    def toggle_favorite(self, task_id: int) -> Task:
        """
        Flip is_favorite in a single UPDATE and return the new snapshot.

        If the commit fails the transaction is rolled back, so the stored
        flag keeps its previous value.
        """
        with self._connect("toggle_favorite") as conn:
            cur = conn.execute(
                "UPDATE tasks SET is_favorite = 1 - is_favorite WHERE id = ?",
                (int(task_id),),
            )
            if cur.rowcount == 0:
                raise NotFoundError(int(task_id))
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()

        task = self._row_to_task(row)
        logger.debug("Task favorite toggled id=%s is_favorite=%s", task.id, task.is_favorite)
        return task

    def delete(self, task_id: int) -> None:
        """Delete a task. Deleting an id that is already gone is a no-op."""
        with self._connect("delete") as conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            removed = cur.rowcount

        if removed:
            logger.debug("Task deleted id=%s", task_id)
        else:
            logger.debug("Task delete no-op (already gone) id=%s", task_id)

    def delete_batch(self, task_ids: Iterable[int]) -> BatchDeleteResult:
        """
        Delete each id on its own.

        A failure on one id does not stop the others; failures are collected
        in the result instead of being raised.
        """
        result = BatchDeleteResult(deleted=[], failed={})
        for task_id in dict.fromkeys(int(i) for i in task_ids):
            try:
                self.delete(task_id)
            except PersistenceError as exc:
                logger.warning("Batch delete failed for id=%s: %s", task_id, exc)
                result.failed[task_id] = exc
            else:
                result.deleted.append(task_id)
        return result
