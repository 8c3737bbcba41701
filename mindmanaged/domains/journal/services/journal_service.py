"""Journal services: owner-scoped CRUD and listing."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from mindmanaged.domains.journal.models import JournalEntry
from mindmanaged.extensions import db

logger = logging.getLogger(__name__)


def create_entry(
    user_id: int,
    *,
    title: str,
    entry: str,
    date: Optional[datetime] = None,
) -> JournalEntry:
    title_norm = (title or "").strip()
    body = (entry or "").strip()
    if not title_norm or not body:
        raise ValueError("validation_error")
    journal_entry = JournalEntry(
        user_id=user_id,
        title=title_norm,
        entry=body,
        date=date or datetime.utcnow(),
    )
    db.session.add(journal_entry)
    db.session.commit()
    logger.info("Created journal entry id=%s user_id=%s", journal_entry.id, user_id)
    return journal_entry


def get_entry(user_id: int, entry_id: int) -> Optional[JournalEntry]:
    return JournalEntry.query.filter_by(id=entry_id, user_id=user_id).first()


def update_entry(user_id: int, entry_id: int, **fields) -> Optional[JournalEntry]:
    journal_entry = get_entry(user_id, entry_id)
    if not journal_entry:
        return None
    for key in ("title", "entry", "date"):
        if key in fields and fields[key] is not None:
            val = fields[key]
            if isinstance(val, str):
                val = val.strip()
            setattr(journal_entry, key, val)
    db.session.commit()
    return journal_entry


def delete_entry(user_id: int, entry_id: int) -> bool:
    journal_entry = get_entry(user_id, entry_id)
    if not journal_entry:
        return False
    db.session.delete(journal_entry)
    db.session.commit()
    logger.info("Deleted journal entry id=%s user_id=%s", entry_id, user_id)
    return True


def list_entries(user_id: int, *, page: int = 1, per_page: int = 20) -> Tuple[List[JournalEntry], int]:
    query = JournalEntry.query.filter_by(user_id=user_id)
    total = query.count()
    entries = (
        query.order_by(JournalEntry.date.desc(), JournalEntry.created_at.desc())
        .offset((max(page, 1) - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return entries, total
