"""Dashboard query schemas."""

from __future__ import annotations

from pydantic import Field

from mindmanaged.core.utils.schemas import CamelModel


class AnalyticsFilter(CamelModel):
    period: int = Field(default=30, ge=1, le=365, description="Trailing window in days")
