"""Base schema classes shared across domains."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema that reads and writes camelCase keys on the wire.

    Inputs are accepted under either the camelCase alias or the Python field
    name; responses are dumped with ``by_alias=True``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Pagination(CamelModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store datetimes as naive UTC, converting aware inputs first."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
