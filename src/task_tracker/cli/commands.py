# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.state import AppState
from ..core.validation import are_inputs_blank, is_yes_or_no
from ..tasks.task_models import CompletionFlag, Task

MenuHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)

INT_REGEX = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@dataclass(slots=True, frozen=True)
class MenuEntry:
    label: str
    handler: MenuHandler


class MenuRegistry:
    """Numbered menu used by the console connector (1. Add a task, ...)."""

    def __init__(self) -> None:
        self._entries: list[MenuEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, label: str, handler: MenuHandler) -> int:
        """Append an entry; returns its 1-based menu number."""
        self._entries.append(MenuEntry(label=label, handler=handler))
        return len(self._entries)

    def labels(self) -> list[str]:
        return [e.label for e in self._entries]

    def build_menu(self) -> str:
        return "\n".join(f"{i}. {e.label}" for i, e in enumerate(self._entries, start=1))

    def handle(self, state: AppState, choice: int | None) -> bool:
        """
        Run the entry numbered `choice`.
        Returns False (and runs nothing) if choice is missing or out of range.
        """
        if choice is None or not 1 <= choice <= len(self._entries):
            return False

        entry = self._entries[choice - 1]
        logger.debug("Menu choice %s (%s)", choice, entry.label)
        entry.handler(state)
        return True


registry = MenuRegistry()


def parse_int(raw: str | None) -> int | None:
    """
    Parse a menu choice / task id the way a 32-bit integer prompt would.

    Only an optional sign and ASCII digits (plus surrounding whitespace) are
    accepted; underscores, non-ASCII digits and values outside int32 give None.
    """
    if raw is None or not INT_REGEX.fullmatch(raw):
        return None
    value = int(raw.strip())
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def _read_task_fields(prefix: str = "") -> tuple[str, str, str, str]:
    title = input(f"Enter {prefix}title: ")
    description = input(f"Enter {prefix}description: ")
    date = input(f"Enter {prefix}date (MM-DD-YYYY): ")
    completed = input(f"Enter {prefix}completion status (y/N): ")
    return title, description, date, completed


def format_task_line(position: int, task: Task) -> str:
    return (
        f"{position}. Task ID: {task.id}, Title: {task.title}, "
        f"Description: {task.description}, Date: {task.date}, Completed: {task.completed}"
    )


def display_tasks(tasks: Sequence[Task], empty_message: str) -> None:
    if not tasks:
        print(empty_message)
        return
    for i, task in enumerate(tasks, start=1):
        print(format_task_line(i, task))


def cmd_add(state: AppState) -> None:
    title, description, date, completed = _read_task_fields()

    if are_inputs_blank(title, description, date, completed):
        print()
        print("All fields are required.")
        return

    state.task_store.add_task(
        title=title, description=description, date=date, completed=completed
    )
    print("Task added successfully.")


def cmd_list(state: AppState) -> None:
    display_tasks(state.task_store.list_incomplete_tasks(), "No Tasks found.")


def cmd_update(state: AppState) -> None:
    if not state.task_store.list_incomplete_tasks():
        print("No tasks to edit")
        return

    cmd_list(state)
    print()
    print("Enter task ID to edit: ")
    task_id = parse_int(input())
    if task_id is None:
        print("Invalid task number.")
        return

    title, description, date, completed = _read_task_fields("new ")

    if are_inputs_blank(title, description, date, completed):
        print("All fields are required.")
        return

    err = state.task_store.try_update_task(
        task_id, title=title, description=description, date=date, completed=completed
    )
    if err is not None:
        print(err)
        return
    print("Task Updated successfully.")


def cmd_delete(state: AppState) -> None:
    if not state.task_store.list_incomplete_tasks():
        print("No tasks to delete")
        return

    cmd_list(state)
    print()
    print("Enter a task ID to delete:  ")
    task_id = parse_int(input())
    if task_id is None:
        print("Invalid task number.")
        return

    confirmation = input("Are you sure? (y/N): ")
    if are_inputs_blank(confirmation) or not is_yes_or_no(confirmation):
        print("Please enter a valid option")
        return

    if CompletionFlag.parse(confirmation) is not CompletionFlag.YES:
        logger.debug("Delete of task id=%s cancelled by user", task_id)
        return

    err = state.task_store.try_delete_task(task_id)
    if err is not None:
        print(err)
        return
    print("Task Deleted Successfully.")


def cmd_exit(state: AppState) -> None:
    state.running = False
    print("Goodbye!")


registry.register("Add a task", cmd_add)
registry.register("List all tasks", cmd_list)
registry.register("Update a task", cmd_update)
registry.register("Delete a task", cmd_delete)
registry.register("Exit", cmd_exit)
