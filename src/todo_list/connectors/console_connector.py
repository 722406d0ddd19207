# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.display import format_task_list
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import PersistenceError

logger = logging.getLogger(__name__)

PROMPT = "todo> "


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one line of user input into a reply.

    Slash commands go to the registry; any other non-empty text is saved as a
    new task with the selected priority. Returns None for blank input.
    """
    line = line.strip()
    if not line:
        return None

    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply

    try:
        task = task_api.save_task(state, line)
    except PersistenceError as e:
        logger.exception("Saving task from console input failed.")
        return f"Could not save task: {e}"
    return f"Added #{task.id} [{task.priority}] {task.title}"


def run_console_loop(state: AppState, *, read: Callable[[str], str] = input) -> None:
    logger.info("Console started (tasks=%s).", len(state.snapshot))
    use_color = bool(getattr(state.settings, "use_color", False))
    app_name = str(getattr(state.settings, "app_name", "todo"))

    print(f"[{app_name}] Type a title to add a task. Use /help for commands, /exit to quit.\n")
    print(format_task_list(state.snapshot, use_color=use_color))

    while True:
        try:
            user_input = read(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console finished.")
