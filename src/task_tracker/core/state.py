# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass(slots=True)
class AppState:
    # Settings object (config.Settings or a test double).
    settings: object

    task_store: TaskRepo

    # Menu loop keeps going while this is True; the Exit action clears it.
    running: bool = True
