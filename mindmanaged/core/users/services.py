"""User service layer."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func

from mindmanaged.core.users.models import User
from mindmanaged.core.users.preferences import merge_preferences
from mindmanaged.core.users.schemas import ProfileUpdateRequest
from mindmanaged.extensions import db

logger = logging.getLogger(__name__)


def get_user(user_id: int) -> Optional[User]:
    return db.session.get(User, int(user_id))


def find_by_email(email: str) -> Optional[User]:
    return User.query.filter(func.lower(User.email) == email.strip().lower()).first()


def update_profile(user: User, payload: ProfileUpdateRequest) -> User:
    """Apply a partial profile update; raises ``ValueError`` on a taken email."""
    if payload.email:
        email = payload.email.strip().lower()
        if email != user.email:
            existing = find_by_email(email)
            if existing and existing.id != user.id:
                raise ValueError("email_already_exists")
            user.email = email
    if payload.name:
        user.name = payload.name
    if payload.preferences:
        merge_preferences(user, payload.preferences)
    db.session.commit()
    return user


def delete_user(user: User) -> None:
    """Remove the account row only; owned tasks, entries and check-ins are left as-is."""
    db.session.delete(user)
    db.session.commit()
    logger.info("Deleted account user_id=%s", user.id)
