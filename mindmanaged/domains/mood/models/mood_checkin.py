"""Mood check-in model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from mindmanaged.extensions import db

MOODS = ("great", "okay", "not_great")
# Chart level for each mood; higher is better.
MOOD_LEVELS = {"great": 3, "okay": 2, "not_great": 1}


class MoodCheckIn(db.Model):
    __tablename__ = "mood_checkin"
    __table_args__ = (db.Index("ix_mood_checkin_user_logged_at", "user_id", "logged_at"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(db.Integer, index=True, nullable=False)
    logged_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
    mood: Mapped[str] = mapped_column(db.String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
