import sys
from pathlib import Path

import pytest
from flask_jwt_extended import create_access_token

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mindmanaged import create_app
from mindmanaged.core.auth.password import hash_password
from mindmanaged.core.users.models import User
from mindmanaged.extensions import db


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """Per-test app bound to a fresh in-memory database."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


def _create_user(email: str, name: str = "Test User", password: str = "secret123") -> User:
    user = User(name=name, email=email, password_hash=hash_password(password), preferences={})
    db.session.add(user)
    db.session.commit()
    return user


def _bearer(user_id: int) -> dict[str, str]:
    token = create_access_token(identity=str(user_id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(app):
    """Factory fixture: create and commit a user with a bcrypt-hashed password."""
    return _create_user


@pytest.fixture
def auth_headers(app):
    """Factory fixture: bearer headers for a user id."""
    return _bearer


@pytest.fixture
def user(app):
    return _create_user("tester@example.com")


@pytest.fixture
def headers(app, user):
    return _bearer(user.id)


@pytest.fixture
def other_user(app):
    return _create_user("other@example.com", name="Other User")


@pytest.fixture
def other_headers(app, other_user):
    return _bearer(other_user.id)
