"""Mood check-in schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from mindmanaged.core.utils.schemas import CamelModel, to_naive_utc

Mood = Literal["great", "okay", "not_great"]


class MoodCheckInCreate(CamelModel):
    mood: Mood
    logged_at: Optional[datetime] = Field(default=None, alias="datetime")

    @field_validator("logged_at")
    @classmethod
    def _logged_at_utc(cls, value):
        return to_naive_utc(value)


class MoodCheckInListFilter(CamelModel):
    limit: int = Field(default=50, ge=1, le=500)


class MoodTrendFilter(CamelModel):
    days: int = Field(default=30, ge=1, le=365)


class MoodCheckInResponse(CamelModel):
    id: int
    mood: str
    logged_at: datetime = Field(alias="datetime")
    created_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class MoodTrendPoint(CamelModel):
    logged_at: datetime = Field(alias="datetime")
    mood: str
    level: int


class MoodTrend(CamelModel):
    days: int
    points: List[MoodTrendPoint]
    counts: Dict[str, int]
    average_level: float
