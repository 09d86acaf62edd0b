# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu loop
in the main thread until the user picks Exit (or stdin closes).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.log_dir if getattr(settings, "log_to_file", False) else None
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (log_file=%s)...", getattr(settings, "app_name", "Task Manager"), log_file)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. tasks_left=%s", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
