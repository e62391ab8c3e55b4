"""
Task endpoints.

These handlers expose CRUD over the ``tasks`` table.  Each one runs a
single statement through ``TaskService`` and translates the outcome
into a status code.  Store failures are logged with their traceback
and reported to the client as a static message only.
"""

import logging
from typing import List

from fastapi import Depends, HTTPException, Response, status

from tasklist_api.app.core.db import Database, StoreError, get_database
from tasklist_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate
from tasklist_api.app.services.task_service import TaskService

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Task not found"


def get_task_service(database: Database = Depends(get_database)) -> TaskService:
    """Build a ``TaskService`` over the database attached to the app."""
    return TaskService(database)


async def list_tasks(service: TaskService = Depends(get_task_service)) -> List[TaskRead]:
    """Return all tasks ordered by id."""
    try:
        return await service.list_tasks()
    except StoreError:
        logger.exception("Error fetching tasks")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch tasks")


async def create_task(
    task_in: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> TaskRead:
    """Create a task and return it with its new id (HTTP 201)."""
    try:
        return await service.create_task(task_in)
    except StoreError:
        logger.exception("Error creating task")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create task")


async def update_task(
    task_id: int,
    task_in: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> TaskRead:
    """Replace the text of a task.

    Returns HTTP 404 if no task has ``task_id``.
    """
    try:
        task = await service.update_task(task_id, task_in)
    except StoreError:
        logger.exception("Error updating task %s", task_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update task")
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return task


async def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Delete a task (HTTP 204, empty body).

    Returns HTTP 404 if no task has ``task_id``.
    """
    try:
        deleted = await service.delete_task(task_id)
    except StoreError:
        logger.exception("Error deleting task %s", task_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete task")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
