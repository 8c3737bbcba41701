"""Task mappers for DTO responses."""

from __future__ import annotations

from mindmanaged.domains.tasks.models import Task
from mindmanaged.domains.tasks.schemas.task_schemas import TaskResponse


def map_task(task: Task) -> dict:
    return TaskResponse.model_validate(task).to_json()


def map_task_summary(task: Task) -> dict:
    """Compact row used by the dashboard's recent-task list."""
    return {
        "id": task.id,
        "title": task.title,
        "status": task.status,
        "priority": task.priority,
        "dueDate": task.due_date.isoformat() if task.due_date else None,
        "updatedAt": task.updated_at.isoformat() if task.updated_at else None,
    }
