"""Mood domain models."""

from mindmanaged.domains.mood.models.mood_checkin import MOOD_LEVELS, MOODS, MoodCheckIn

__all__ = ["MoodCheckIn", "MOODS", "MOOD_LEVELS"]
