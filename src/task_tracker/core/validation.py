# src/task_tracker/core/validation.py

from __future__ import annotations

from ..tasks.task_models import CompletionFlag


def are_inputs_blank(*values: str | None) -> bool:
    """True if any value is missing, empty or whitespace-only."""
    return any(v is None or not v.strip() for v in values)


def is_yes_or_no(value: str | None) -> bool:
    return CompletionFlag.parse(value) is not None
