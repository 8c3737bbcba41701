"""Authentication service layer."""

from __future__ import annotations

import logging
from typing import Optional

from flask_jwt_extended import create_access_token, create_refresh_token

from mindmanaged.core.auth.models import TokenBlocklist
from mindmanaged.core.auth.password import hash_password, verify_password
from mindmanaged.core.auth.schemas import RegisterRequest
from mindmanaged.core.users.models import User
from mindmanaged.core.users.services import find_by_email
from mindmanaged.extensions import db

logger = logging.getLogger(__name__)


def authenticate_user(email: str, password: str) -> Optional[User]:
    """Return the user if credentials are valid."""
    user = find_by_email(email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def issue_tokens(user: User) -> dict[str, str]:
    """Create access and refresh tokens for a user."""
    identity = str(user.id)
    return {
        "token": create_access_token(identity=identity),
        "refreshToken": create_refresh_token(identity=identity),
    }


def register_user(payload: RegisterRequest) -> User:
    """Create a user; raises ``ValueError("email_already_exists")`` on duplicates."""
    normalized_email = payload.email.strip().lower()
    if find_by_email(normalized_email):
        raise ValueError("email_already_exists")
    user = User(
        name=payload.name,
        email=normalized_email,
        password_hash=hash_password(payload.password),
        preferences={},
    )
    db.session.add(user)
    db.session.commit()
    logger.info("Registered user_id=%s", user.id)
    return user


def revoke_token(jti: str, user_id: Optional[int] = None) -> None:
    """Add a token id to the blocklist (idempotent)."""
    if is_token_revoked(jti):
        return
    db.session.add(TokenBlocklist(jti=jti, user_id=user_id))
    db.session.commit()


def is_token_revoked(jti: str) -> bool:
    return db.session.query(TokenBlocklist.id).filter_by(jti=jti).first() is not None
