"""User profile API tests."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

from mindmanaged.core.users.models import User
from mindmanaged.domains.tasks.models import Task
from mindmanaged.domains.tasks.services import create_task
from mindmanaged.extensions import db


def test_get_profile(client, headers):
    resp = client.get("/api/users/profile", headers=headers)
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["email"] == "tester@example.com"
    assert user["preferences"]["theme"] == "light"
    assert "createdAt" in user


def test_update_profile_merges_preferences(client, headers):
    resp = client.put(
        "/api/users/profile",
        json={"name": "Renamed", "preferences": {"theme": "dark"}},
        headers=headers,
    )
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["name"] == "Renamed"
    assert user["preferences"] == {"theme": "dark", "notifications": True}

    resp = client.put("/api/users/profile", json={"preferences": {"notifications": False}}, headers=headers)
    assert resp.get_json()["user"]["preferences"] == {"theme": "dark", "notifications": False}


def test_update_profile_rejects_taken_email(client, headers, other_user):
    resp = client.put("/api/users/profile", json={"email": "other@example.com"}, headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "email_already_exists"


def test_update_profile_validation(client, headers):
    resp = client.put("/api/users/profile", json={"name": "x"}, headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_delete_account_leaves_owned_rows(client, headers, user):
    create_task(user.id, title="Orphan me")
    resp = client.delete("/api/users/account", headers=headers)
    assert resp.status_code == 200
    assert db.session.get(User, user.id) is None
    assert Task.query.filter_by(user_id=user.id).count() == 1

    resp = client.get("/api/users/profile", headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "unauthorized"


def test_deleted_account_id_is_not_reused(client, headers, user):
    create_task(user.id, title="Private to the deleted account")
    assert client.delete("/api/users/account", headers=headers).status_code == 200

    resp = client.post(
        "/api/auth/register",
        json={"name": "Newcomer", "email": "newcomer@example.com", "password": "secret123"},
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["user"]["id"] != user.id

    resp = client.get("/api/tasks", headers={"Authorization": f"Bearer {body['token']}"})
    assert resp.status_code == 200
    assert resp.get_json()["total"] == 0


def test_token_rejected_after_account_deletion(client, headers):
    assert client.delete("/api/users/account", headers=headers).status_code == 200

    resp = client.post("/api/tasks", json={"title": "ghost"}, headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "unauthorized"
    assert Task.query.filter_by(title="ghost").count() == 0


def test_unrevoked_token_for_missing_user_is_unauthorized(client, headers, user):
    db.session.delete(user)
    db.session.commit()

    resp = client.get("/api/tasks", headers=headers)
    assert resp.status_code == 401
    body = resp.get_json()
    assert body["error"] == "unauthorized"
    assert body["message"] == "User no longer exists"
