"""Typed schemas for user IO."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, TYPE_CHECKING

from pydantic import EmailStr, Field

from mindmanaged.core.users.preferences import get_preferences
from mindmanaged.core.utils.schemas import CamelModel

if TYPE_CHECKING:
    from mindmanaged.core.users.models import User


class ProfileUpdateRequest(CamelModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    email: Optional[EmailStr] = None
    preferences: Optional[Dict[str, Any]] = None


class UserResponse(CamelModel):
    id: int
    name: str
    # Response should not re-validate persisted emails
    email: str
    preferences: Dict[str, Any] = {}
    created_at: Optional[datetime] = None


def serialize_user(user: "User") -> dict:
    """Build the public user payload with merged preferences."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        preferences=get_preferences(user),
        created_at=user.created_at,
    ).to_json()
