# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import ScriptedInput


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment and .env file.
    """
    return SimpleNamespace(
        app_name="Task Manager",
        log_level="WARNING",
        log_to_file=False,
        log_dir=None,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def script(monkeypatch: pytest.MonkeyPatch):
    """
    Install scripted stdin answers: script("1", "title", ...).

    Returns the ScriptedInput so tests can check what was consumed.
    """

    def _install(*lines: str) -> ScriptedInput:
        fake = ScriptedInput(list(lines))
        monkeypatch.setattr("builtins.input", fake)
        return fake

    return _install
