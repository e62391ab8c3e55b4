"""
Route table for the API.

Every path/method pair is listed in ``ROUTES`` together with its
handler and response options.  ``build_router`` turns the table into
an ``APIRouter`` when the application is created; handler modules do
not register themselves.
"""

from typing import Any, Callable, Dict, List, NamedTuple

from fastapi import APIRouter, status

from tasklist_api.app.schemas.task import TaskRead

from .endpoints import health, tasks


class Route(NamedTuple):
    path: str
    method: str
    endpoint: Callable[..., Any]
    options: Dict[str, Any]


ROUTES: List[Route] = [
    Route(
        "/tasks",
        "GET",
        tasks.list_tasks,
        {"response_model": List[TaskRead], "summary": "List tasks", "tags": ["tasks"]},
    ),
    Route(
        "/tasks",
        "POST",
        tasks.create_task,
        {
            "response_model": TaskRead,
            "status_code": status.HTTP_201_CREATED,
            "summary": "Create a task",
            "tags": ["tasks"],
        },
    ),
    Route(
        "/tasks/{task_id}",
        "PUT",
        tasks.update_task,
        {"response_model": TaskRead, "summary": "Update a task", "tags": ["tasks"]},
    ),
    Route(
        "/tasks/{task_id}",
        "DELETE",
        tasks.delete_task,
        {
            "status_code": status.HTTP_204_NO_CONTENT,
            "summary": "Delete a task",
            "tags": ["tasks"],
        },
    ),
    Route("/health", "GET", health.health, {"summary": "Store health check", "tags": ["health"]}),
]


def build_router(routes: List[Route] = ROUTES) -> APIRouter:
    """Build an ``APIRouter`` from a route table."""
    router = APIRouter()
    for route in routes:
        router.add_api_route(route.path, route.endpoint, methods=[route.method], **route.options)
    return router
