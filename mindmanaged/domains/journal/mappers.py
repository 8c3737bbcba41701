"""Journal mappers for DTO responses."""

from __future__ import annotations

from mindmanaged.domains.journal.models import JournalEntry
from mindmanaged.domains.journal.schemas.journal_schemas import JournalEntryResponse


def map_entry(entry: JournalEntry) -> dict:
    return JournalEntryResponse.model_validate(entry).to_json()
