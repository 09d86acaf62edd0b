# tests/test_console_connector.py

from __future__ import annotations

from task_tracker.cli.commands import MenuRegistry
from task_tracker.connectors.console_connector import run_console_loop

MENU_LINES = [
    "1. Add a task",
    "2. List all tasks",
    "3. Update a task",
    "4. Delete a task",
    "5. Exit",
]


def test_banner_menu_and_exit(state, script, capsys) -> None:
    script("5")
    run_console_loop(state)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Welcome to the Task Manager!",
        "",
        *MENU_LINES,
        "",
        "Enter your choice: ",
        "Goodbye!",
    ]
    assert state.running is False


def test_banner_uses_app_name(state, script, capsys) -> None:
    state.settings.app_name = "Chore Board"
    script("5")
    run_console_loop(state)
    assert capsys.readouterr().out.startswith("Welcome to the Chore Board!\n")


def test_invalid_choices_reprompt(state, script, capsys) -> None:
    fake = script("9", "abc", "", "0", "5")
    run_console_loop(state)

    out = capsys.readouterr().out
    assert out.count("Please enter a valid number from 1 to 5") == 4
    assert fake.prompts.count("Enter your choice: ") == 5
    assert out.rstrip().endswith("Goodbye!")


def test_full_session(state, script, capsys) -> None:
    script(
        # add two tasks, the second already complete
        "1", "Buy milk", "2% milk", "01-01-2030", "n",
        "1", "Pay rent", "June", "06-01-2030", "y",
        "2",
        # update task 0
        "3", "0", "Buy oat milk", "1L", "01-02-2030", "n",
        "2",
        # delete task 0 with confirmation
        "4", "0", "y",
        "2",
        "5",
    )
    run_console_loop(state)

    out = capsys.readouterr().out
    assert out.count("Task added successfully.") == 2
    assert "1. Task ID: 0, Title: Buy milk, Description: 2% milk, Date: 01-01-2030, Completed: n" in out
    # the completed task (id 1) never shows up in a listing
    assert "Task ID: 1," not in out
    assert "Task Updated successfully." in out
    assert "1. Task ID: 0, Title: Buy oat milk, Description: 1L, Date: 01-02-2030, Completed: n" in out
    assert "Task Deleted Successfully." in out
    assert "No Tasks found." in out
    assert out.rstrip().endswith("Goodbye!")

    # completed task survives: it is only hidden from listings
    assert [t.title for t in state.task_store.all_tasks()] == ["Pay rent"]


def test_store_error_is_reported_and_loop_continues(state, script, capsys) -> None:
    state.task_store.add_task(title="a", description="d", date="1", completed="n")
    script("4", "3", "y", "5")
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Please enter a valid task ID available in the task list." in out
    assert out.rstrip().endswith("Goodbye!")
    assert state.task_store.count_tasks() == 1


def test_eof_ends_loop(state, script, capsys) -> None:
    script("1", "title")  # stdin closes in the middle of the add flow
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Goodbye!" not in out
    assert state.task_store.count_tasks() == 0


def test_keyboard_interrupt_ends_loop(state, monkeypatch, capsys) -> None:
    def interrupted(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    run_console_loop(state)
    assert capsys.readouterr().out.startswith("Welcome to the Task Manager!")


def test_crashing_action_is_reported(state, script, capsys) -> None:
    menu = MenuRegistry()

    def boom(state):
        raise RuntimeError("boom")

    def stop(state):
        state.running = False

    menu.register("Boom", boom)
    menu.register("Stop", stop)

    script("1", "2")
    run_console_loop(state, menu=menu)

    out = capsys.readouterr().out
    assert "Internal error while handling a menu action." in out
    assert state.running is False
