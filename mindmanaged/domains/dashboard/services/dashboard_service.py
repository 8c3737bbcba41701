"""Dashboard aggregations over a user's tasks."""

from __future__ import annotations

import datetime as dt
from collections import Counter, defaultdict
from typing import Dict, List, Optional

from sqlalchemy import func

from mindmanaged.domains.tasks.mappers import map_task_summary
from mindmanaged.domains.tasks.models import OPEN_STATUSES, Task
from mindmanaged.extensions import db

RECENT_TASK_LIMIT = 5
OVERDUE_WARNING_THRESHOLD = 5

# (minimum completion rate, productivity label, message), checked top-down.
_TIERS = (
    (80.0, "high", "Excellent work! You're crushing your goals! 🎉"),
    (60.0, "medium", "Great progress! Keep up the momentum! 💪"),
    (40.0, "moderate", "You're making steady progress. Stay focused! 🎯"),
)
_LOW_MESSAGE = "Every step forward counts. You've got this! 🌟"
_OVERDUE_MESSAGE = "You have some overdue tasks. Let's tackle them! ⚡"


def completion_rate(completed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(completed / total * 100, 1)


def productivity_level(rate: float) -> str:
    for threshold, label, _ in _TIERS:
        if rate >= threshold:
            return label
    return "low"


def motivational_message(rate: float, overdue: int) -> str:
    for threshold, _, message in _TIERS:
        if rate >= threshold:
            return message
    if overdue > OVERDUE_WARNING_THRESHOLD:
        return _OVERDUE_MESSAGE
    return _LOW_MESSAGE


def summarize(rate: float, overdue: int) -> Dict[str, str]:
    return {"message": motivational_message(rate, overdue), "productivity": productivity_level(rate)}


def start_of_week(now: dt.datetime) -> dt.datetime:
    """Midnight of the most recent Sunday (weeks start on Sunday)."""
    days_since_sunday = (now.weekday() + 1) % 7
    return dt.datetime.combine(now.date() - dt.timedelta(days=days_since_sunday), dt.time.min)


def start_of_month(now: dt.datetime) -> dt.datetime:
    return dt.datetime.combine(now.date().replace(day=1), dt.time.min)


def _grouped_counts(user_id: int, column) -> Dict[str, int]:
    rows = (
        db.session.query(column, func.count(Task.id))
        .filter(Task.user_id == user_id)
        .group_by(column)
        .all()
    )
    return {value: count for value, count in rows}


def _count(*criteria) -> int:
    return db.session.query(func.count(Task.id)).filter(*criteria).scalar() or 0


def get_dashboard(user_id: int, now: Optional[dt.datetime] = None) -> dict:
    now = now or dt.datetime.utcnow()

    by_status = _grouped_counts(user_id, Task.status)
    total = sum(by_status.values())
    completed = by_status.get("completed", 0)
    pending = sum(by_status.get(status, 0) for status in OPEN_STATUSES)

    monthly = _count(Task.user_id == user_id, Task.created_at >= start_of_month(now))
    weekly = _count(Task.user_id == user_id, Task.created_at >= start_of_week(now))
    overdue = _count(
        Task.user_id == user_id,
        Task.status.in_(OPEN_STATUSES),
        Task.due_date.is_not(None),
        Task.due_date < now,
    )

    recent = (
        Task.query.filter_by(user_id=user_id)
        .order_by(Task.updated_at.desc(), Task.id.desc())
        .limit(RECENT_TASK_LIMIT)
        .all()
    )

    rate = completion_rate(completed, total)
    return {
        "totalTasks": total,
        "completedTasks": completed,
        "pendingTasks": pending,
        "weeklyGoals": weekly,
        "monthlyTasks": monthly,
        "weeklyTasks": weekly,
        "overdueTasks": overdue,
        "completionRate": rate,
        "recentTasks": [map_task_summary(t) for t in recent],
        "tasksByPriority": _grouped_counts(user_id, Task.priority),
        "tasksByCategory": _grouped_counts(user_id, Task.category),
        "summary": summarize(rate, overdue),
    }


def get_analytics(user_id: int, period: int = 30, now: Optional[dt.datetime] = None) -> dict:
    """Per-day creation counts by status over the trailing ``period`` days."""
    now = now or dt.datetime.utcnow()
    since = now - dt.timedelta(days=period)

    rows = (
        db.session.query(Task.created_at, Task.status)
        .filter(Task.user_id == user_id, Task.created_at >= since)
        .all()
    )
    per_day: Dict[str, Counter] = defaultdict(Counter)
    for created_at, status in rows:
        per_day[created_at.date().isoformat()][status] += 1
    daily_stats: List[dict] = [
        {
            "date": day,
            "statuses": [{"status": status, "count": count} for status, count in sorted(per_day[day].items())],
        }
        for day in sorted(per_day)
    ]

    avg_time = (
        db.session.query(func.avg(Task.actual_time))
        .filter(Task.user_id == user_id, Task.status == "completed", Task.actual_time > 0)
        .scalar()
    )
    return {
        "period": period,
        "dailyStats": daily_stats,
        "averageCompletionTime": float(avg_time) if avg_time is not None else 0,
    }
