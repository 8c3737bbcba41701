"""Task API tests.

- GET /api/tasks - list_tasks (filters, pagination, sort)
- POST /api/tasks - create_task
- GET/PUT/PATCH/DELETE /api/tasks/<id>
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


def _create(client, headers, **payload):
    payload.setdefault("title", "Write report")
    return client.post("/api/tasks", json=payload, headers=headers)


def test_create_task(client, headers):
    resp = _create(
        client,
        headers,
        description="Quarterly numbers",
        priority="high",
        category="work",
        dueDate="2030-01-15T09:00:00Z",
        estimatedTime=90,
        tags=["q1", " finance "],
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["ok"] is True
    task = body["task"]
    assert task["title"] == "Write report"
    assert task["priority"] == "high"
    assert task["category"] == "work"
    assert task["status"] == "pending"
    assert task["dueDate"].startswith("2030-01-15T09:00:00")
    assert task["estimatedTime"] == 90
    assert task["tags"] == ["q1", "finance"]
    assert task["completedAt"] is None


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"title": ""}, "title"),
        ({"title": "x" * 101}, "title"),
        ({"title": "ok", "priority": "critical"}, "priority"),
        ({"title": "ok", "status": "done"}, "status"),
        ({"title": "ok", "estimatedTime": 0}, "estimatedTime"),
        ({"description": "missing title"}, "title"),
    ],
)
def test_create_task_validation(client, headers, payload, field):
    resp = client.post("/api/tasks", json=payload, headers=headers)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["ok"] is False
    assert body["error"] == "validation_error"
    assert field in {d["field"] for d in body["details"]}


def test_get_update_delete(client, headers):
    task_id = _create(client, headers).get_json()["task"]["id"]

    resp = client.get(f"/api/tasks/{task_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["task"]["id"] == task_id

    resp = client.patch(f"/api/tasks/{task_id}", json={"priority": "urgent"}, headers=headers)
    assert resp.status_code == 200
    task = resp.get_json()["task"]
    assert task["priority"] == "urgent"
    assert task["title"] == "Write report"

    resp = client.put(f"/api/tasks/{task_id}", json={"description": "Draft"}, headers=headers)
    assert resp.get_json()["task"]["description"] == "Draft"

    resp = client.delete(f"/api/tasks/{task_id}", headers=headers)
    assert resp.status_code == 200
    resp = client.get(f"/api/tasks/{task_id}", headers=headers)
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Task not found"


def test_update_rejects_null_for_required_fields(client, headers):
    task_id = _create(client, headers).get_json()["task"]["id"]
    resp = client.patch(f"/api/tasks/{task_id}", json={"title": None}, headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"

    resp = client.patch(f"/api/tasks/{task_id}", json={"dueDate": None}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["task"]["dueDate"] is None


def test_completion_timestamp_via_api(client, headers):
    task_id = _create(client, headers).get_json()["task"]["id"]
    done = client.patch(f"/api/tasks/{task_id}", json={"status": "completed"}, headers=headers).get_json()["task"]
    assert done["completedAt"] is not None

    reopened = client.patch(f"/api/tasks/{task_id}", json={"status": "pending"}, headers=headers).get_json()["task"]
    assert reopened["completedAt"] == done["completedAt"]


def test_ownership_isolation(client, headers, other_headers):
    task_id = _create(client, headers).get_json()["task"]["id"]

    assert client.get(f"/api/tasks/{task_id}", headers=other_headers).status_code == 404
    assert client.patch(f"/api/tasks/{task_id}", json={"title": "x"}, headers=other_headers).status_code == 404
    assert client.delete(f"/api/tasks/{task_id}", headers=other_headers).status_code == 404

    listing = client.get("/api/tasks", headers=other_headers).get_json()
    assert listing["items"] == []
    assert listing["total"] == 0


def test_list_envelope_and_pagination(client, headers):
    for i in range(12):
        _create(client, headers, title=f"Task {i:02d}", priority="low" if i % 2 else "high")

    body = client.get("/api/tasks", headers=headers).get_json()
    assert body["ok"] is True
    assert body["total"] == 12
    assert body["limit"] == 10
    assert body["page"] == 1
    assert body["pages"] == 2
    assert len(body["items"]) == 10

    body = client.get("/api/tasks?page=2&limit=5&sort=title", headers=headers).get_json()
    assert [t["title"] for t in body["items"]] == [f"Task {i:02d}" for i in range(5, 10)]

    body = client.get("/api/tasks?priority=high", headers=headers).get_json()
    assert body["total"] == 6


@pytest.mark.parametrize("query", ["limit=0", "limit=101", "page=0", "status=bogus", "sort=nope"])
def test_list_rejects_bad_query(client, headers, query):
    resp = client.get(f"/api/tasks?{query}", headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_write_report_end_to_end(client, headers):
    task_id = _create(client, headers, priority="high").get_json()["task"]["id"]

    dash = client.get("/api/dashboard", headers=headers).get_json()
    assert dash["totalTasks"] == 1
    assert dash["pendingTasks"] == 1
    assert dash["completedTasks"] == 0
    assert dash["completionRate"] == 0.0

    client.patch(f"/api/tasks/{task_id}", json={"status": "completed"}, headers=headers)

    dash = client.get("/api/dashboard", headers=headers).get_json()
    assert dash["completedTasks"] == 1
    assert dash["pendingTasks"] == 0
    assert dash["completionRate"] == 100.0
    assert dash["summary"]["productivity"] == "high"
