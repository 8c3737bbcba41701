"""Journal JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from mindmanaged.core.utils.responses import error_response, page_count, parse_body, parse_query
from mindmanaged.domains.journal.mappers import map_entry
from mindmanaged.domains.journal.schemas.journal_schemas import (
    JournalEntryCreate,
    JournalEntryListFilter,
    JournalEntryUpdate,
)
from mindmanaged.domains.journal.services import journal_service

journal_api_bp = Blueprint("journal_api", __name__)


@journal_api_bp.get("")
@jwt_required()
def list_journal():
    user_id = int(get_jwt_identity())
    filters, err = parse_query(JournalEntryListFilter)
    if err:
        return err
    entries, total = journal_service.list_entries(user_id, page=filters.page, per_page=filters.limit)
    return jsonify(
        {
            "ok": True,
            "items": [map_entry(e) for e in entries],
            "page": filters.page,
            "pages": page_count(total, filters.limit),
            "limit": filters.limit,
            "total": total,
        }
    )


@journal_api_bp.get("/<int:entry_id>")
@jwt_required()
def get_entry(entry_id: int):
    user_id = int(get_jwt_identity())
    entry = journal_service.get_entry(user_id, entry_id)
    if not entry:
        return error_response("not_found", 404, "Journal entry not found")
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.post("")
@jwt_required()
def create_journal_entry():
    data, err = parse_body(JournalEntryCreate)
    if err:
        return err
    user_id = int(get_jwt_identity())
    try:
        entry = journal_service.create_entry(user_id, title=data.title, entry=data.entry, date=data.date)
    except ValueError:
        return error_response("validation_error", 400, "Title and entry are required")
    return jsonify({"ok": True, "entry": map_entry(entry)}), 201


@journal_api_bp.route("/<int:entry_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_journal_entry(entry_id: int):
    data, err = parse_body(JournalEntryUpdate)
    if err:
        return err
    user_id = int(get_jwt_identity())
    entry = journal_service.update_entry(user_id, entry_id, **data.model_dump(exclude_unset=True))
    if not entry:
        return error_response("not_found", 404, "Journal entry not found")
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.delete("/<int:entry_id>")
@jwt_required()
def delete_journal_entry(entry_id: int):
    user_id = int(get_jwt_identity())
    if not journal_service.delete_entry(user_id, entry_id):
        return error_response("not_found", 404, "Journal entry not found")
    return jsonify({"ok": True, "message": "Journal entry deleted successfully"})
