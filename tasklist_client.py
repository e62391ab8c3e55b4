"""Task List API client and UI state.

This module contains the client half of the task list:

* :class:`TaskListAPI` wraps the four REST operations of the server
  (``GET/POST /tasks``, ``PUT/DELETE /tasks/{id}``) using ``requests``.
  Every method returns a ``(result, error)`` tuple instead of raising.
* :class:`TaskBoard` holds the view state of the UI: the local copy of
  the task list, the text in the input form and the id of the task
  being edited.  Each user action issues one request and updates the
  local state only after the server confirmed it.  Failures are logged
  and leave the task list untouched.

The board has no rendering toolkit of its own; :meth:`TaskBoard.render`
returns plain text and ``tasklist_console`` drives it interactively.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Task = Dict[str, Any]
ApiError = Dict[str, Any]

DEFAULT_BASE_URL = "http://localhost:4000"
EMPTY_LIST_MESSAGE = "No tasks yet."
DELETE_PROMPT = "Are you sure you want to delete this task?"


class TaskListAPI:
    """Client for the task list REST API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:4000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  On success ``data`` holds the
            parsed JSON body (``None`` for empty responses) and ``error``
            is ``None``.  On failure ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or ""
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Task], Optional[ApiError]]:
        """Retrieve all tasks in server order.

        Returns:
            A tuple ``(tasks, error)``.  ``tasks`` is empty on failure.
        """
        data, error = self._request("GET", "/tasks")
        if error:
            return [], error
        if not isinstance(data, list):
            return [], {"status_code": None, "message": "Expected a list of tasks"}
        return data, None

    def create_task(self, text: str) -> Tuple[Optional[Task], Optional[ApiError]]:
        """Create a task.

        Returns:
            A tuple ``(task, error)`` where ``task`` carries the new id.
        """
        return self._request("POST", "/tasks", json_body={"text": text})

    def update_task(self, task_id: int, text: str) -> Tuple[Optional[Task], Optional[ApiError]]:
        """Replace the text of a task.

        Returns:
            A tuple ``(task, error)``.
        """
        return self._request("PUT", f"/tasks/{task_id}", json_body={"text": text})

    def delete_task(self, task_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete a task.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/tasks/{task_id}")
        if error:
            return False, error
        return True, None


class TaskBoard:
    """View state of the task list UI.

    Attributes:
        tasks: Local copy of the task list in server order.  Replaced on
            :meth:`load` and patched after each confirmed mutation.
        input_text: Current content of the input form.
        editing_id: Id of the task being edited, or ``None`` when the
            form creates new tasks.
    """

    def __init__(
        self,
        api: TaskListAPI,
        *,
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> None:
        """Create an empty board.

        Args:
            api: Client used for every request.
            confirm: Callback asked before deleting a task.  It receives
                the prompt text and returns ``True`` to proceed.  Without
                one, deletions proceed unconditionally.
        """
        self.api = api
        self.confirm = confirm or (lambda prompt: True)
        self.tasks: List[Task] = []
        self.input_text: str = ""
        self.editing_id: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def load(self) -> None:
        """Replace the local list with the server's."""
        tasks, error = self.api.list_tasks()
        if error:
            logger.error("Failed to fetch tasks: %s", error["message"])
            return
        self.tasks = tasks

    def submit(self) -> None:
        """Send the form: update the edited task, or create a new one.

        Blank input is ignored.  The input is cleared after the request
        whether it succeeded or not; edit mode ends only on success.
        """
        if not self.input_text.strip():
            return

        if self.editing_id is not None:
            task, error = self.api.update_task(self.editing_id, self.input_text.strip())
            if error:
                logger.error("Failed to update task: %s", error["message"])
            else:
                self.tasks = [task if t["id"] == self.editing_id else t for t in self.tasks]
                self.editing_id = None
        else:
            task, error = self.api.create_task(self.input_text)
            if error:
                logger.error("Failed to create task: %s", error["message"])
            else:
                self.tasks = self.tasks + [task]

        self.input_text = ""

    def begin_edit(self, task: Task) -> None:
        """Put the form in edit mode for ``task``."""
        self.editing_id = task["id"]
        self.input_text = task["text"]

    def cancel_edit(self) -> None:
        """Leave edit mode and clear the form."""
        self.editing_id = None
        self.input_text = ""

    def delete(self, task_id: int) -> None:
        """Delete a task after confirmation."""
        if not self.confirm(DELETE_PROMPT):
            return
        deleted, error = self.api.delete_task(task_id)
        if error or not deleted:
            logger.error("Failed to delete task: %s", error["message"] if error else "unknown error")
            return
        self.tasks = [t for t in self.tasks if t["id"] != task_id]

    def find(self, task_id: int) -> Optional[Task]:
        """Return the local task with ``task_id`` or ``None``."""
        for task in self.tasks:
            if task["id"] == task_id:
                return task
        return None

    def render(self) -> str:
        """Return the board as text: the task list followed by the form."""
        lines: List[str] = []
        if not self.tasks:
            lines.append(EMPTY_LIST_MESSAGE)
        for task in self.tasks:
            marker = "*" if task["id"] == self.editing_id else " "
            lines.append(f"{marker} [{task['id']}] {task['text']}")
        action = "Update" if self.is_editing else "Add"
        lines.append(f"> {self.input_text}  ({action})")
        return "\n".join(lines)
