# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging

from .task_models import Task

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Please enter a valid task ID available in the task list."


class InvalidIdentifier(LookupError):
    """Raised (or returned by the try_* variants) when a task id is not in the store."""

    def __init__(self, task_id: int, message: str = INVALID_ID_MESSAGE) -> None:
        super().__init__(message)
        self.task_id = task_id
        self.message = message

    def __str__(self) -> str:
        return self.message


class TaskStore:
    """
    In-memory task store.

    Tasks live in a single list kept sorted by id:
    - new ids are "last id + 1" (0 for an empty store) and are appended
    - updates replace a record in place, deletes only remove
    so lookups can use binary search.

    Ids come from the last element, not from a counter: deleting the newest
    task makes its id available again, deleting an older one leaves a gap.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        logger.info("TaskStore ready total=%s", self.count_tasks())

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- lookup ----

    def binary_search(self, left: int, right: int, target_id: int) -> tuple[bool, int]:
        """
        Search tasks[left..right] (inclusive) for target_id.

        Returns (True, index) on a hit, (False, -1) otherwise.
        An empty store is searched as (0, -1) and misses immediately.
        """
        if left > right:
            return False, -1

        middle = (left + right) // 2
        stored_id = self._tasks[middle].id
        if stored_id < target_id:
            return self.binary_search(middle + 1, right, target_id)
        if stored_id > target_id:
            return self.binary_search(left, middle - 1, target_id)
        return True, middle

    def _find_index(self, task_id: int) -> int | None:
        found, index = self.binary_search(0, len(self._tasks) - 1, int(task_id))
        return index if found else None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        index = self._find_index(task_id)
        return self._tasks[index] if index is not None else None

    def add_task(self, *, title: str, description: str, date: str, completed: str) -> int:
        task_id = self._tasks[-1].id + 1 if self._tasks else 0
        self._tasks.append(
            Task(id=task_id, title=title, description=description, date=date, completed=completed)
        )
        logger.debug("Task added id=%s completed=%s", task_id, completed)
        return task_id

    def update_task(
        self,
        task_id: int,
        *,
        title: str,
        description: str,
        date: str,
        completed: str,
    ) -> None:
        """Replace every field of an existing task; the id stays the same."""
        index = self._find_index(task_id)
        if index is None:
            logger.info("Update rejected: no task id=%s", task_id)
            raise InvalidIdentifier(task_id)

        self._tasks[index] = Task(
            id=int(task_id),
            title=title,
            description=description,
            date=date,
            completed=completed,
        )
        logger.debug("Task updated id=%s completed=%s", task_id, completed)

    def delete_task(self, task_id: int) -> None:
        index = self._find_index(task_id)
        if index is None:
            logger.info("Delete rejected: no task id=%s", task_id)
            raise InvalidIdentifier(task_id)

        del self._tasks[index]
        logger.debug("Task deleted id=%s remaining=%s", task_id, len(self._tasks))

    def try_update_task(
        self,
        task_id: int,
        *,
        title: str,
        description: str,
        date: str,
        completed: str,
    ) -> InvalidIdentifier | None:
        """Like update_task, but returns the error instead of raising it."""
        try:
            self.update_task(
                task_id, title=title, description=description, date=date, completed=completed
            )
        except InvalidIdentifier as e:
            return e
        return None

    def try_delete_task(self, task_id: int) -> InvalidIdentifier | None:
        """Like delete_task, but returns the error instead of raising it."""
        try:
            self.delete_task(task_id)
        except InvalidIdentifier as e:
            return e
        return None

    def list_incomplete_tasks(self) -> list[Task]:
        """
        Tasks whose flag is "n" (any case), in store order.

        Anything else, including "y", blank or malformed flags, is left out.
        """
        return [t for t in self._tasks if t.is_incomplete]
