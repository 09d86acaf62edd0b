# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import MenuRegistry, parse_int
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState, menu: MenuRegistry | None = None) -> None:
    """
    Interactive menu loop over stdin/stdout.

    Runs until the Exit action clears state.running, or stdin is closed / interrupted.
    A failing action is logged and reported, and the loop goes on.
    """
    if menu is None:
        menu = menu_registry
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "Task Manager"))

    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    print(f"Welcome to the {app_name}!")

    while state.running:
        print()
        print(menu.build_menu())
        print()

        try:
            choice = parse_int(input("Enter your choice: "))
            print()

            if not menu.handle(state, choice):
                print(f"Please enter a valid number from 1 to {len(menu)}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break
        except Exception:
            logger.exception("Menu action crashed.")
            print("Internal error while handling a menu action.")

    logger.info("Console connector finished.")
