"""Task request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import ConfigDict, Field, StringConstraints, field_validator

from mindmanaged.core.utils.schemas import CamelModel, Pagination, to_naive_utc

TaskStatus = Literal["pending", "in-progress", "completed", "cancelled"]
TaskPriority = Literal["low", "medium", "high", "urgent"]
TaskCategory = Literal["personal", "work", "health", "learning", "other"]
Tag = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=30)]

SORT_FIELDS = ("createdAt", "updatedAt", "dueDate", "completedAt", "priority", "status", "category", "title")


class TaskCreate(CamelModel):
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    status: TaskStatus = "pending"
    priority: TaskPriority = "medium"
    category: TaskCategory = "personal"
    due_date: Optional[datetime] = None
    estimated_time: Optional[int] = Field(default=None, ge=1)
    actual_time: Optional[int] = Field(default=None, ge=0)
    tags: List[Tag] = Field(default_factory=list)

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, value):
        return to_naive_utc(value)


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[TaskCategory] = None
    due_date: Optional[datetime] = None
    estimated_time: Optional[int] = Field(default=None, ge=1)
    actual_time: Optional[int] = Field(default=None, ge=0)
    tags: Optional[List[Tag]] = None

    @field_validator("title", "status", "priority", "category", "tags")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, value):
        return to_naive_utc(value)

    def changes(self) -> dict:
        """Only the fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class TaskListFilter(Pagination):
    limit: int = Field(default=10, ge=1, le=100)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[TaskCategory] = None
    sort: str = "-createdAt"

    @field_validator("sort")
    @classmethod
    def _known_sort_field(cls, value: str) -> str:
        if value.lstrip("-") not in SORT_FIELDS:
            raise ValueError(f"sort must be one of {', '.join(SORT_FIELDS)} (prefix '-' for descending)")
        return value


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str]
    status: str
    priority: str
    category: str
    due_date: Optional[datetime]
    completed_at: Optional[datetime]
    estimated_time: Optional[int]
    actual_time: Optional[int]
    tags: List[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
