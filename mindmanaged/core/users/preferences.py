"""Default and merged preferences for users."""

from __future__ import annotations

from typing import Any, Dict

from mindmanaged.core.users.models import User

DEFAULT_PREFS: Dict[str, Any] = {
    "theme": "light",
    "notifications": True,
}


def get_preferences(user: User) -> Dict[str, Any]:
    """Merge stored preferences with defaults."""
    prefs = DEFAULT_PREFS.copy()
    prefs.update(user.preferences or {})
    return prefs


def merge_preferences(user: User, updates: Dict[str, Any]) -> None:
    # Reassign so SQLAlchemy notices the JSON change.
    merged = dict(user.preferences or {})
    merged.update(updates)
    user.preferences = merged
