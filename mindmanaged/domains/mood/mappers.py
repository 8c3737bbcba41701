"""Mood check-in mappers."""

from __future__ import annotations

from mindmanaged.domains.mood.models import MoodCheckIn
from mindmanaged.domains.mood.schemas.mood_schemas import MoodCheckInResponse


def map_checkin(checkin: MoodCheckIn) -> dict:
    return MoodCheckInResponse.model_validate(checkin).to_json()
