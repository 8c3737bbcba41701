"""Task domain models."""

from mindmanaged.domains.tasks.models.task_models import (
    OPEN_STATUSES,
    TASK_CATEGORIES,
    TASK_PRIORITIES,
    TASK_STATUSES,
    Task,
)

__all__ = ["Task", "TASK_STATUSES", "OPEN_STATUSES", "TASK_PRIORITIES", "TASK_CATEGORIES"]
