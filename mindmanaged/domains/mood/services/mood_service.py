"""Mood check-in services."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from mindmanaged.domains.mood.models import MOOD_LEVELS, MOODS, MoodCheckIn
from mindmanaged.domains.mood.schemas.mood_schemas import MoodTrend, MoodTrendPoint
from mindmanaged.extensions import db

logger = logging.getLogger(__name__)


def create_checkin(user_id: int, *, mood: str, logged_at: Optional[datetime] = None) -> MoodCheckIn:
    if mood not in MOODS:
        raise ValueError("validation_error")
    checkin = MoodCheckIn(user_id=user_id, mood=mood, logged_at=logged_at or datetime.utcnow())
    db.session.add(checkin)
    db.session.commit()
    logger.info("Created mood check-in id=%s user_id=%s", checkin.id, user_id)
    return checkin


def get_checkin(user_id: int, checkin_id: int) -> Optional[MoodCheckIn]:
    return MoodCheckIn.query.filter_by(id=checkin_id, user_id=user_id).first()


def delete_checkin(user_id: int, checkin_id: int) -> bool:
    checkin = get_checkin(user_id, checkin_id)
    if not checkin:
        return False
    db.session.delete(checkin)
    db.session.commit()
    return True


def list_checkins(user_id: int, *, limit: int = 50) -> Tuple[List[MoodCheckIn], int]:
    """Newest check-ins first, capped at ``limit``; also returns the owner's total."""
    query = MoodCheckIn.query.filter_by(user_id=user_id)
    total = query.count()
    items = query.order_by(MoodCheckIn.logged_at.desc(), MoodCheckIn.id.desc()).limit(limit).all()
    return items, total


def mood_trend(user_id: int, *, days: int = 30, now: Optional[datetime] = None) -> MoodTrend:
    """Chronological mood levels inside the trailing window, with per-mood counts."""
    cutoff = (now or datetime.utcnow()) - timedelta(days=days)
    checkins = (
        MoodCheckIn.query.filter(MoodCheckIn.user_id == user_id, MoodCheckIn.logged_at >= cutoff)
        .order_by(MoodCheckIn.logged_at.asc(), MoodCheckIn.id.asc())
        .all()
    )
    points = [MoodTrendPoint(logged_at=c.logged_at, mood=c.mood, level=MOOD_LEVELS.get(c.mood, 0)) for c in checkins]
    counts = Counter(c.mood for c in checkins)
    average = round(sum(p.level for p in points) / len(points), 2) if points else 0.0
    return MoodTrend(
        days=days,
        points=points,
        counts={mood: counts.get(mood, 0) for mood in MOODS},
        average_level=average,
    )
