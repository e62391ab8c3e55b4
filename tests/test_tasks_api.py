"""HTTP tests for the task endpoints using FastAPI's TestClient."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tasklist_api.app.core.config import Settings
from tasklist_api.app.main import create_app


def test_list_starts_empty(client: TestClient) -> None:
    response = client.get("/tasks")
    assert response.status_code == 200
    assert response.json() == []


def test_end_to_end_scenario(client: TestClient) -> None:
    """Create, read, update, delete and read again."""
    response = client.post("/tasks", json={"text": "buy milk"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "text": "buy milk"}

    assert client.get("/tasks").json() == [{"id": 1, "text": "buy milk"}]

    response = client.put("/tasks/1", json={"text": "buy bread"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "text": "buy bread"}

    response = client.delete("/tasks/1")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/tasks").json() == []


def test_create_assigns_unused_ids_and_keeps_text(client: TestClient) -> None:
    first = client.post("/tasks", json={"text": "  padded text  "}).json()
    second = client.post("/tasks", json={"text": "second"}).json()

    assert first["text"] == "  padded text  "
    assert second["id"] != first["id"]
    assert [task["id"] for task in client.get("/tasks").json()] == [first["id"], second["id"]]


def test_list_is_ordered_by_id(client: TestClient) -> None:
    for label in ["c", "a", "b"]:
        client.post("/tasks", json={"text": label})
    client.put("/tasks/1", json={"text": "z"})

    tasks = client.get("/tasks").json()
    assert [task["id"] for task in tasks] == [1, 2, 3]
    assert [task["text"] for task in tasks] == ["z", "a", "b"]


def test_create_rejects_missing_or_empty_text(client: TestClient) -> None:
    for body in [{}, {"text": ""}, {"text": None}, {"text": 42}, {"other": "x"}]:
        response = client.post("/tasks", json=body)
        assert response.status_code == 400, body
        assert response.json() == {"error": "Task text must not be empty"}

    assert client.get("/tasks").json() == []


def test_whitespace_only_text_is_accepted(client: TestClient) -> None:
    response = client.post("/tasks", json={"text": "   "})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "text": "   "}
    assert client.get("/tasks").json() == [{"id": 1, "text": "   "}]


def test_create_rejects_missing_body(client: TestClient) -> None:
    response = client.post("/tasks")
    assert response.status_code == 400
    assert response.json() == {"error": "Task text must not be empty"}


def test_create_rejects_malformed_json(client: TestClient) -> None:
    response = client.post("/tasks", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_update_replaces_text_and_keeps_id(client: TestClient) -> None:
    created = client.post("/tasks", json={"text": "old"}).json()

    response = client.put(f"/tasks/{created['id']}", json={"text": "new"})

    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "text": "new"}
    assert client.get("/tasks").json() == [{"id": created["id"], "text": "new"}]


def test_update_with_same_text_succeeds(client: TestClient) -> None:
    created = client.post("/tasks", json={"text": "same"}).json()

    response = client.put(f"/tasks/{created['id']}", json={"text": "same"})

    assert response.status_code == 200


def test_update_missing_task_returns_404(client: TestClient) -> None:
    client.post("/tasks", json={"text": "keep me"})

    response = client.put("/tasks/999", json={"text": "ghost"})

    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}
    assert client.get("/tasks").json() == [{"id": 1, "text": "keep me"}]


def test_update_rejects_empty_text(client: TestClient) -> None:
    client.post("/tasks", json={"text": "keep me"})

    response = client.put("/tasks/1", json={"text": ""})

    assert response.status_code == 400
    assert client.get("/tasks").json() == [{"id": 1, "text": "keep me"}]


def test_delete_twice_returns_404(client: TestClient) -> None:
    created = client.post("/tasks", json={"text": "once"}).json()

    assert client.delete(f"/tasks/{created['id']}").status_code == 204
    response = client.delete(f"/tasks/{created['id']}")

    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


def test_ids_beyond_integer_range_are_not_found(client: TestClient) -> None:
    client.post("/tasks", json={"text": "keep me"})

    for task_id in ["99999999999999999999", "-99999999999999999999"]:
        updated = client.put(f"/tasks/{task_id}", json={"text": "ghost"})
        deleted = client.delete(f"/tasks/{task_id}")

        assert (updated.status_code, updated.json()) == (404, {"error": "Task not found"})
        assert (deleted.status_code, deleted.json()) == (404, {"error": "Task not found"})

    assert client.get("/tasks").json() == [{"id": 1, "text": "keep me"}]


def test_non_integer_id_is_rejected(client: TestClient) -> None:
    response = client.delete("/tasks/abc")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


def test_text_is_bound_not_interpolated(client: TestClient) -> None:
    hostile = "x'); DROP TABLE tasks; --"

    created = client.post("/tasks", json={"text": hostile})

    assert created.status_code == 201
    assert client.get("/tasks").json() == [{"id": 1, "text": hostile}]


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    response = client.get("/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_cors_allows_configured_origin(client: TestClient) -> None:
    response = client.options(
        "/tasks",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_ignores_other_origins(client: TestClient) -> None:
    response = client.get("/tasks", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in response.headers


def test_cors_disabled_without_origins(app_settings: Settings) -> None:
    app_settings.cors_origins = ""
    with TestClient(create_app(app_settings)) as test_client:
        response = test_client.get("/tasks", headers={"Origin": "http://localhost:5173"})
    assert "access-control-allow-origin" not in response.headers


def test_store_failures_return_500(broken_settings: Settings) -> None:
    with TestClient(create_app(broken_settings)) as test_client:
        listed = test_client.get("/tasks")
        created = test_client.post("/tasks", json={"text": "x"})
        updated = test_client.put("/tasks/1", json={"text": "x"})
        deleted = test_client.delete("/tasks/1")

    assert (listed.status_code, listed.json()) == (500, {"error": "Failed to fetch tasks"})
    assert (created.status_code, created.json()) == (500, {"error": "Failed to create task"})
    assert (updated.status_code, updated.json()) == (500, {"error": "Failed to update task"})
    assert (deleted.status_code, deleted.json()) == (500, {"error": "Failed to delete task"})


def test_validation_runs_before_store(broken_settings: Settings) -> None:
    with TestClient(create_app(broken_settings)) as test_client:
        response = test_client.post("/tasks", json={"text": ""})
    assert response.status_code == 400
