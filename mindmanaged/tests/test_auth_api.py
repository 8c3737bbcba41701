"""Auth flow tests: register, login, refresh, logout, me."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

from mindmanaged.core.auth.auth_service import authenticate_user, is_token_revoked, revoke_token
from mindmanaged.core.auth.password import hash_password, verify_password
from mindmanaged.core.users.models import User


def _register(client, **overrides):
    payload = {"name": "Ada Lovelace", "email": "ada@example.com", "password": "secret123"}
    payload.update(overrides)
    return client.post("/api/auth/register", json=payload)


def test_register_returns_tokens_and_user(client):
    resp = _register(client)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["ok"] is True
    assert body["token"]
    assert body["refreshToken"]
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["name"] == "Ada Lovelace"
    assert body["user"]["preferences"] == {"theme": "light", "notifications": True}
    assert "passwordHash" not in body["user"]


def test_register_normalizes_email(client):
    resp = _register(client, email="Ada@Example.COM")
    assert resp.status_code == 201
    assert resp.get_json()["user"]["email"] == "ada@example.com"


def test_register_duplicate_email(client):
    _register(client)
    resp = _register(client, email="ADA@example.com")
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["ok"] is False
    assert body["error"] == "email_already_exists"


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"password": "123"}, "password"),
        ({"email": "not-an-email"}, "email"),
        ({"name": " a "}, "name"),
    ],
)
def test_register_validation(client, overrides, field):
    resp = _register(client, **overrides)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "validation_error"
    assert any(d["field"] == field for d in body["details"])


def test_login_success_and_me(client):
    _register(client)
    resp = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert resp.status_code == 200
    token = resp.get_json()["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.get_json()["user"]["email"] == "ada@example.com"


def test_login_invalid_credentials(client):
    _register(client)
    resp = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrong-password"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "invalid_credentials"

    resp = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "invalid_credentials"


def test_refresh_issues_new_access_token(client):
    refresh_token = _register(client).get_json()["refreshToken"]
    resp = client.post("/api/auth/refresh", headers={"Authorization": f"Bearer {refresh_token}"})
    assert resp.status_code == 200
    new_token = resp.get_json()["token"]
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {new_token}"})
    assert me.status_code == 200


def test_logout_revokes_token(client):
    token = _register(client).get_json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    resp = client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200

    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "unauthorized"


class TestAuthService:
    def test_password_hash_roundtrip(self, app):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("other", hashed)
        assert not verify_password("secret123", "")
        assert not verify_password("secret123", "plain-text-not-a-hash")

    def test_authenticate_user_is_case_insensitive(self, app, make_user):
        user = make_user("case@example.com")
        assert authenticate_user("CASE@example.com", "secret123").id == user.id
        assert authenticate_user("case@example.com", "nope") is None

    def test_revoke_token_is_idempotent(self, app):
        revoke_token("abc-123", user_id=1)
        revoke_token("abc-123", user_id=1)
        assert is_token_revoked("abc-123")
        assert not is_token_revoked("other")

    def test_user_row_persisted(self, app, user):
        assert User.query.filter_by(email="tester@example.com").count() == 1
