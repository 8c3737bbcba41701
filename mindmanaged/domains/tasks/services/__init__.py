from mindmanaged.domains.tasks.services.task_service import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)

__all__ = [
    "create_task",
    "get_task",
    "update_task",
    "delete_task",
    "list_tasks",
]
