"""
Service for reading and mutating tasks.

Each public method runs exactly one parameterized SQL statement on a
pooled connection.  The connection is released when the statement
finishes, whether it succeeded or not.  Store failures propagate as
``StoreError`` for the API layer to translate.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import text

from tasklist_api.app.core.db import Database
from tasklist_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate

logger = logging.getLogger(__name__)

# Ids outside the signed 64-bit range cannot exist in the table and are
# rejected by the SQLite driver with OverflowError.
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1


def _valid_id(task_id: int) -> bool:
    return MIN_TASK_ID <= task_id <= MAX_TASK_ID


class TaskService:
    """Service for creating, listing, updating and deleting tasks."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def list_tasks(self) -> List[TaskRead]:
        """Return every task ordered by id ascending."""
        async with self.database.connection() as conn:
            result = await conn.execute(text("SELECT id, text FROM tasks ORDER BY id ASC"))
            rows = result.mappings().all()
        return [TaskRead(id=row["id"], text=row["text"]) for row in rows]

    async def create_task(self, data: TaskCreate) -> TaskRead:
        """Insert a task and return it with the id assigned by the store."""
        async with self.database.connection() as conn:
            result = await conn.execute(
                text("INSERT INTO tasks (text) VALUES (:text)"),
                {"text": data.text},
            )
            task_id = result.lastrowid
        logger.info("Created task %s", task_id)
        return TaskRead(id=task_id, text=data.text)

    async def update_task(self, task_id: int, data: TaskUpdate) -> Optional[TaskRead]:
        """Replace the text of a task.

        Returns the updated task, or ``None`` if no row has ``task_id``.
        """
        if not _valid_id(task_id):
            return None
        async with self.database.connection() as conn:
            result = await conn.execute(
                text("UPDATE tasks SET text = :text WHERE id = :id"),
                {"text": data.text, "id": task_id},
            )
            affected = result.rowcount
        if not affected:
            return None
        logger.info("Updated task %s", task_id)
        return TaskRead(id=task_id, text=data.text)

    async def delete_task(self, task_id: int) -> bool:
        """Delete a task by id.

        Returns ``True`` if a row was deleted, ``False`` otherwise.
        """
        if not _valid_id(task_id):
            return False
        async with self.database.connection() as conn:
            result = await conn.execute(
                text("DELETE FROM tasks WHERE id = :id"),
                {"id": task_id},
            )
            affected = result.rowcount
        if affected:
            logger.info("Deleted task %s", task_id)
        return affected > 0
