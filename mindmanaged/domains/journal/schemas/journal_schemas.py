"""Journal request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from mindmanaged.core.utils.schemas import CamelModel, Pagination, to_naive_utc


class JournalEntryCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    entry: str = Field(min_length=1)
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def _date_utc(cls, value):
        return to_naive_utc(value)


class JournalEntryUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    entry: Optional[str] = Field(default=None, min_length=1)
    date: Optional[datetime] = None

    @field_validator("title", "entry", "date")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return to_naive_utc(value) if isinstance(value, datetime) else value


class JournalEntryListFilter(Pagination):
    pass


class JournalEntryResponse(CamelModel):
    id: int
    date: datetime
    title: str
    entry: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
