"""Task model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from mindmanaged.extensions import db

TASK_STATUSES = ("pending", "in-progress", "completed", "cancelled")
OPEN_STATUSES = ("pending", "in-progress")
TASK_PRIORITIES = ("low", "medium", "high", "urgent")
TASK_CATEGORIES = ("personal", "work", "health", "learning", "other")


class Task(db.Model):
    __tablename__ = "task"
    __table_args__ = (
        db.Index("ix_task_user_status", "user_id", "status"),
        db.Index("ix_task_user_due_date", "user_id", "due_date"),
        db.Index("ix_task_user_created_at", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    # Owner reference only; removing a user leaves their tasks in place.
    user_id: Mapped[int] = mapped_column(db.Integer, index=True, nullable=False)
    title: Mapped[str] = mapped_column(db.String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(db.String(500))
    status: Mapped[str] = mapped_column(db.String(16), default="pending", nullable=False)
    priority: Mapped[str] = mapped_column(db.String(16), default="medium", nullable=False)
    category: Mapped[str] = mapped_column(db.String(16), default="personal", nullable=False)
    due_date: Mapped[datetime | None] = mapped_column()
    completed_at: Mapped[datetime | None] = mapped_column()
    estimated_time: Mapped[int | None] = mapped_column(db.Integer)
    actual_time: Mapped[int | None] = mapped_column(db.Integer)
    tags: Mapped[list] = mapped_column(db.JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    def mark_status(self, status: str, now: datetime | None = None) -> None:
        """Set the status, stamping ``completed_at`` on the first completion."""
        self.status = status
        if status == "completed" and self.completed_at is None:
            self.completed_at = now or datetime.utcnow()


__all__ = [
    "Task",
    "TASK_STATUSES",
    "OPEN_STATUSES",
    "TASK_PRIORITIES",
    "TASK_CATEGORIES",
]
