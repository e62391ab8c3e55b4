"""Interactive terminal front-end for the task list.

Renders a :class:`tasklist_client.TaskBoard` after every action and
maps each input line to one board operation:

``<text>``
    Put ``<text>`` in the form and submit it (adds a task, or updates
    the task being edited).
``/edit N``
    Start editing task ``N``; the next plain line replaces its text.
``/cancel``
    Leave edit mode.
``/delete N``
    Delete task ``N`` after a y/N confirmation.
``/reload``
    Fetch the list from the server again.
``/quit``
    Exit.

The server URL is taken from ``--base-url`` or the
``TASKLIST_API_URL`` environment variable.

Usage:
    python tasklist_console.py --base-url http://localhost:4000
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Callable, List, Optional

from tasklist_client import DEFAULT_BASE_URL, TaskBoard, TaskListAPI

HELP_TEXT = "Commands: <text> | /edit N | /cancel | /delete N | /reload | /quit"


def ask_confirmation(prompt: str, read: Callable[[str], str] = input) -> bool:
    """Ask a yes/no question; only an explicit yes confirms."""
    answer = read(f"{prompt} [y/N] ").strip().lower()
    return answer in {"y", "yes"}


def _parse_id(argument: str) -> Optional[int]:
    try:
        return int(argument)
    except ValueError:
        return None


def handle_line(board: TaskBoard, line: str) -> bool:
    """Apply one input line to ``board``.

    Returns ``False`` when the user asked to quit.
    """
    command_line = line.strip()
    if not command_line.startswith("/"):
        board.input_text = line
        board.submit()
        return True

    command, _, argument = command_line.partition(" ")
    if command == "/quit":
        return False
    if command == "/cancel":
        board.cancel_edit()
    elif command == "/reload":
        board.load()
    elif command in {"/edit", "/delete"}:
        task_id = _parse_id(argument.strip())
        task = board.find(task_id) if task_id is not None else None
        if task is None:
            print(f"No task with id {argument.strip()!r}")
        elif command == "/edit":
            board.begin_edit(task)
        else:
            board.delete(task["id"])
    else:
        print(HELP_TEXT)
    return True


def run(board: TaskBoard, read: Callable[[str], str] = input) -> None:
    """Load the board and process input lines until ``/quit`` or EOF."""
    board.load()
    print(HELP_TEXT)
    while True:
        print(board.render())
        try:
            line = read("> " if not board.is_editing else f"edit {board.editing_id}> ")
        except EOFError:
            break
        if not handle_line(board, line):
            break


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Manage the task list from the terminal.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("TASKLIST_API_URL", DEFAULT_BASE_URL),
        help="Server base URL (default: $TASKLIST_API_URL or %(default)s)",
    )
    ap.add_argument("--log-level", default="WARNING", help="Client log level")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s [%(levelname)s] %(message)s")
    board = TaskBoard(TaskListAPI(base_url=args.base_url), confirm=ask_confirmation)
    try:
        run(board)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
