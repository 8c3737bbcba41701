"""Dashboard API tests."""

import pytest

pytestmark = pytest.mark.integration

from mindmanaged.domains.tasks.services import create_task


def test_dashboard_envelope(client, headers, user):
    create_task(user.id, title="One")
    resp = client.get("/api/dashboard", headers=headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is True
    for key in (
        "totalTasks",
        "completedTasks",
        "pendingTasks",
        "weeklyGoals",
        "monthlyTasks",
        "weeklyTasks",
        "overdueTasks",
        "completionRate",
        "recentTasks",
        "tasksByPriority",
        "tasksByCategory",
        "summary",
    ):
        assert key in body
    assert body["totalTasks"] == 1
    assert body["recentTasks"][0]["title"] == "One"


def test_dashboard_requires_auth(client):
    assert client.get("/api/dashboard").status_code == 401


def test_analytics_period_validation(client, headers):
    resp = client.get("/api/dashboard/analytics?period=14", headers=headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["period"] == 14
    assert body["dailyStats"] == []

    assert client.get("/api/dashboard/analytics?period=0", headers=headers).status_code == 400
    assert client.get("/api/dashboard/analytics?period=366", headers=headers).status_code == 400
