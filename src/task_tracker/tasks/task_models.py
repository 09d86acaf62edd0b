# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CompletionFlag(StrEnum):
    """
    Conventional values of Task.completed.

    Notes:
    - the store never coerces flags; only the shell checks them (delete confirmation)
    - comparison is case-insensitive
    """

    YES = "y"
    NO = "n"

    @classmethod
    def parse(cls, raw: str | None) -> CompletionFlag | None:
        if not raw:
            return None
        try:
            return cls(raw.lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str
    date: str  # free text, shown as MM-DD-YYYY by convention
    completed: str

    @property
    def is_incomplete(self) -> bool:
        return self.completed.lower() == CompletionFlag.NO.value
