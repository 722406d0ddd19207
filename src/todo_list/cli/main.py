# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store, then runs the console loop in the
main thread until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import StoreOpenError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, file_level=file_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StoreOpenError as e:
        logger.critical("Cannot start without a task store: %s", e)
        print(f"Fatal: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    finally:
        shutdown(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
