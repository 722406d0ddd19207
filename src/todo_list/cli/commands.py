# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.display import format_task_list
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import NotFoundError, PersistenceError
from ..tasks.task_models import Priority

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Store failures are reported back as text; they never end the session.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except NotFoundError as e:
            logger.info("Command /%s: %s", name, e)
            return f"{e}. Use /list to see current tasks."
        except PersistenceError as e:
            logger.exception("Command /%s failed to persist.", name)
            return f"Could not save changes: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Plain text (no leading /) adds a task with the selected priority.")
        return "\n".join(lines)


registry = CommandRegistry()


def _use_color(state: AppState) -> bool:
    return bool(getattr(state.settings, "use_color", False))


def _render(state: AppState) -> str:
    return format_task_list(state.snapshot, use_color=_use_color(state))


def _parse_positions(args: list[str]) -> list[int] | None:
    """1-based list positions -> 0-based offsets. None if any arg is not a number."""
    try:
        return [int(a) - 1 for a in args]
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    task_api.refresh(state)
    return _render(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title>             -> add with the selected priority
    /add -p high <title>     -> add with an explicit priority
    """
    priority: Priority | None = None
    if len(args) >= 2 and args[0] in ("-p", "--priority"):
        try:
            priority = Priority.parse(args[1])
        except ValueError as e:
            return str(e)
        args = args[2:]

    title = " ".join(args)
    task = task_api.save_task(state, title, priority)
    return f"Added #{task.id} [{task.priority}] {task.title}\n{_render(state)}"


def cmd_priority(state: AppState, args: list[str]) -> str:
    """
    /priority         -> show selected priority
    /priority <level> -> select priority for new tasks (low|medium|high)
    """
    if not args:
        choices = " | ".join(p.label for p in Priority)
        return f"Selected priority: {state.selected_priority.label} (choices: {choices})"
    try:
        state.selected_priority = Priority.parse(args[0])
    except ValueError as e:
        return str(e)
    return f"Selected priority: {state.selected_priority.label}"


def cmd_fav(state: AppState, args: list[str]) -> str:
    offsets = _parse_positions(args[:1])
    if not offsets:
        return "Usage: /fav <n> (position in /list)."

    task = task_api.task_at_offset(state, offsets[0])
    if task is None:
        return f"No task at position {args[0]}. Use /list to see current tasks."

    updated = task_api.toggle_favorite(state, task.id)
    verb = "Marked" if updated.is_favorite else "Unmarked"
    return f"{verb} #{updated.id} as favorite.\n{_render(state)}"


def cmd_del(state: AppState, args: list[str]) -> str:
    offsets = _parse_positions(args)
    if not offsets:
        return "Usage: /del <n> [n ...] (positions in /list)."

    result = task_api.delete_at_offsets(state, offsets)
    lines = [f"Deleted {len(result.deleted)} task(s)."]
    if result.failed:
        ids = ", ".join(f"#{i}" for i in sorted(result.failed))
        lines.append(f"Could not delete: {ids}")
    lines.append(_render(state))
    return "\n".join(lines)


def cmd_rm(state: AppState, args: list[str]) -> str:
    try:
        task_id = int(args[0])
    except (IndexError, ValueError):
        return "Usage: /rm <id>."

    task_api.delete_task(state, task_id)
    return f"Deleted #{task_id}.\n{_render(state)}"


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    db_path = getattr(store, "db_path", "?")
    return (
        "Status:\n"
        f"  Store: {db_path}\n"
        f"  Tasks: {store.count_tasks()}\n"
        f"  Selected priority: {state.selected_priority.label}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks, newest first.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add [-p low|medium|high] <title>.")
registry.register(
    "priority", cmd_priority, help_text="Select priority for new tasks: /priority low|medium|high."
)
registry.register("fav", cmd_fav, help_text="Toggle favorite: /fav <n>.")
registry.register("del", cmd_del, help_text="Delete by list position: /del <n> [n ...].")
registry.register("rm", cmd_rm, help_text="Delete by task id: /rm <id>.")
registry.register("status", cmd_status, help_text="Show store path and task count.")
