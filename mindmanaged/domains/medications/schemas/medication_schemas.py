"""Medication search query schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from mindmanaged.core.utils.schemas import CamelModel
from mindmanaged.domains.medications.services.medication_service import DEFAULT_LIMIT, clamp_limit


class MedicationSearchQuery(CamelModel):
    q: str = Field(min_length=1)
    limit: int = DEFAULT_LIMIT

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp(cls, value: Any) -> int:
        # Out-of-range or garbage limits are clamped, never rejected.
        return clamp_limit(value)
