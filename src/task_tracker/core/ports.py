# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell.

Menu actions depend on this Protocol instead of the concrete TaskStore,
so tests and alternative stores can be swapped in.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    # Listing / lookup
    def list_incomplete_tasks(self) -> list[Any]: ...
    def get_task(self, task_id: int) -> Any | None: ...
    def count_tasks(self) -> int: ...

    # Mutation
    def add_task(self, *, title: str, description: str, date: str, completed: str) -> int: ...

    # Explicit-result variants (return the error instead of raising it)
    def try_update_task(
            self,
            task_id: int,
            *,
            title: str,
            description: str,
            date: str,
            completed: str,
    ) -> Exception | None: ...

    def try_delete_task(self, task_id: int) -> Exception | None: ...
