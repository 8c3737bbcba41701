"""Task services: owner-scoped CRUD and listing."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from mindmanaged.domains.tasks.models import Task
from mindmanaged.extensions import db

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    "createdAt": Task.created_at,
    "updatedAt": Task.updated_at,
    "dueDate": Task.due_date,
    "completedAt": Task.completed_at,
    "priority": Task.priority,
    "status": Task.status,
    "category": Task.category,
    "title": Task.title,
}

_UPDATABLE_FIELDS = (
    "title",
    "description",
    "status",
    "priority",
    "category",
    "due_date",
    "estimated_time",
    "actual_time",
    "tags",
)


def create_task(
    user_id: int,
    *,
    title: str,
    description: Optional[str] = None,
    status: str = "pending",
    priority: str = "medium",
    category: str = "personal",
    due_date: Optional[datetime] = None,
    estimated_time: Optional[int] = None,
    actual_time: Optional[int] = None,
    tags: Optional[List[str]] = None,
) -> Task:
    title_norm = (title or "").strip()
    if not title_norm:
        raise ValueError("validation_error")
    task = Task(
        user_id=user_id,
        title=title_norm,
        description=(description or "").strip() or None,
        priority=priority,
        category=category,
        due_date=due_date,
        estimated_time=estimated_time,
        actual_time=actual_time,
        tags=list(tags or []),
    )
    task.mark_status(status)
    db.session.add(task)
    db.session.commit()
    logger.info("Created task id=%s user_id=%s", task.id, user_id)
    return task


def get_task(user_id: int, task_id: int) -> Optional[Task]:
    return Task.query.filter_by(id=task_id, user_id=user_id).first()


def update_task(user_id: int, task_id: int, **fields) -> Optional[Task]:
    """Merge the supplied fields into the owned task; ``None`` if no such task."""
    task = get_task(user_id, task_id)
    if not task:
        return None
    for key in _UPDATABLE_FIELDS:
        if key not in fields:
            continue
        val = fields[key]
        if isinstance(val, str):
            val = val.strip()
        if key == "description":
            val = val or None
        if key == "status":
            task.mark_status(val)
        elif key == "tags":
            task.tags = list(val)
        else:
            setattr(task, key, val)
    db.session.commit()
    return task


def delete_task(user_id: int, task_id: int) -> bool:
    task = get_task(user_id, task_id)
    if not task:
        return False
    db.session.delete(task)
    db.session.commit()
    logger.info("Deleted task id=%s user_id=%s", task_id, user_id)
    return True


def list_tasks(
    user_id: int,
    *,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    category: Optional[str] = None,
    sort: str = "-createdAt",
    page: int = 1,
    per_page: int = 10,
) -> Tuple[List[Task], int]:
    query = Task.query.filter_by(user_id=user_id)
    if status:
        query = query.filter(Task.status == status)
    if priority:
        query = query.filter(Task.priority == priority)
    if category:
        query = query.filter(Task.category == category)
    total = query.count()
    items = (
        query.order_by(_sort_clause(sort), Task.id.desc())
        .offset((max(page, 1) - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return items, total


def _sort_clause(sort: str):
    descending = sort.startswith("-")
    column = _SORT_COLUMNS.get(sort.lstrip("-"))
    if column is None:
        raise ValueError("validation_error")
    return column.desc() if descending else column.asc()
