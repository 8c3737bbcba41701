"""Journal API tests.

- GET /api/journals - list_journal
- GET /api/journals/<id> - get_entry
- POST /api/journals - create_journal_entry
- PUT/PATCH /api/journals/<id> - update_journal_entry
- DELETE /api/journals/<id> - delete_journal_entry
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

pytestmark = pytest.mark.integration

from mindmanaged.domains.journal.models import JournalEntry
from mindmanaged.domains.journal.services import journal_service


def _create(client, headers, **payload):
    payload.setdefault("title", "Morning pages")
    payload.setdefault("entry", "Slept well, feeling focused.")
    return client.post("/api/journals", json=payload, headers=headers)


def test_list_journal_empty(client, headers):
    resp = client.get("/api/journals", headers=headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body == {"ok": True, "items": [], "page": 1, "pages": 0, "limit": 20, "total": 0}


def test_create_entry_defaults_date(client, headers):
    resp = _create(client, headers)
    assert resp.status_code == 201
    entry = resp.get_json()["entry"]
    assert entry["title"] == "Morning pages"
    assert entry["entry"] == "Slept well, feeling focused."
    assert entry["date"] is not None
    assert "createdAt" in entry


def test_create_entry_requires_title_and_body(client, headers):
    resp = client.post("/api/journals", json={"title": "Only title"}, headers=headers)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "validation_error"
    assert {d["field"] for d in body["details"]} == {"entry"}

    resp = client.post("/api/journals", json={"title": "   ", "entry": "x"}, headers=headers)
    assert resp.status_code == 400


def test_list_newest_date_first(client, headers):
    _create(client, headers, title="Older", date="2024-01-01T08:00:00Z")
    _create(client, headers, title="Newer", date="2024-02-01T08:00:00Z")
    body = client.get("/api/journals", headers=headers).get_json()
    assert [e["title"] for e in body["items"]] == ["Newer", "Older"]
    assert body["total"] == 2


def test_update_partial(client, headers):
    entry_id = _create(client, headers).get_json()["entry"]["id"]
    resp = client.patch(f"/api/journals/{entry_id}", json={"title": "Evening pages"}, headers=headers)
    assert resp.status_code == 200
    entry = resp.get_json()["entry"]
    assert entry["title"] == "Evening pages"
    assert entry["entry"] == "Slept well, feeling focused."

    resp = client.put(f"/api/journals/{entry_id}", json={"entry": None}, headers=headers)
    assert resp.status_code == 400


def test_get_and_delete(client, headers):
    entry_id = _create(client, headers).get_json()["entry"]["id"]
    assert client.get(f"/api/journals/{entry_id}", headers=headers).status_code == 200
    assert client.delete(f"/api/journals/{entry_id}", headers=headers).status_code == 200
    resp = client.get(f"/api/journals/{entry_id}", headers=headers)
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Journal entry not found"


def test_ownership_isolation(client, headers, other_headers):
    entry_id = _create(client, headers).get_json()["entry"]["id"]
    assert client.get(f"/api/journals/{entry_id}", headers=other_headers).status_code == 404
    assert client.patch(f"/api/journals/{entry_id}", json={"title": "x"}, headers=other_headers).status_code == 404
    assert client.delete(f"/api/journals/{entry_id}", headers=other_headers).status_code == 404
    assert client.get("/api/journals", headers=other_headers).get_json()["total"] == 0


class TestJournalService:
    def test_create_strips_and_persists(self, app, user):
        entry = journal_service.create_entry(user.id, title="  Title ", entry=" Body ")
        assert entry.title == "Title"
        assert entry.entry == "Body"
        assert JournalEntry.query.count() == 1

    def test_create_blank_rejected(self, app, user):
        with pytest.raises(ValueError):
            journal_service.create_entry(user.id, title="Title", entry="  ")

    def test_list_paginates(self, app, user):
        base = datetime(2024, 3, 1)
        for i in range(5):
            journal_service.create_entry(user.id, title=f"Day {i}", entry="...", date=base + timedelta(days=i))
        entries, total = journal_service.list_entries(user.id, page=2, per_page=2)
        assert total == 5
        assert [e.title for e in entries] == ["Day 2", "Day 1"]
