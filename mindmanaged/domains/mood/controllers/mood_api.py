"""Mood check-in JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from mindmanaged.core.utils.responses import error_response, parse_body, parse_query
from mindmanaged.domains.mood.mappers import map_checkin
from mindmanaged.domains.mood.schemas.mood_schemas import (
    MoodCheckInCreate,
    MoodCheckInListFilter,
    MoodTrendFilter,
)
from mindmanaged.domains.mood.services import mood_service

mood_api_bp = Blueprint("mood_api", __name__)


@mood_api_bp.get("")
@jwt_required()
def list_checkins():
    user_id = int(get_jwt_identity())
    params, err = parse_query(MoodCheckInListFilter)
    if err:
        return err
    items, total = mood_service.list_checkins(user_id, limit=params.limit)
    return jsonify({"ok": True, "items": [map_checkin(c) for c in items], "limit": params.limit, "total": total})


@mood_api_bp.post("")
@jwt_required()
def create_checkin():
    data, err = parse_body(MoodCheckInCreate)
    if err:
        return err
    user_id = int(get_jwt_identity())
    checkin = mood_service.create_checkin(user_id, mood=data.mood, logged_at=data.logged_at)
    return jsonify({"ok": True, "checkIn": map_checkin(checkin)}), 201


@mood_api_bp.get("/trends")
@jwt_required()
def trends():
    user_id = int(get_jwt_identity())
    params, err = parse_query(MoodTrendFilter)
    if err:
        return err
    trend = mood_service.mood_trend(user_id, days=params.days)
    return jsonify({"ok": True, "trend": trend.to_json()})


@mood_api_bp.get("/<int:checkin_id>")
@jwt_required()
def get_checkin(checkin_id: int):
    user_id = int(get_jwt_identity())
    checkin = mood_service.get_checkin(user_id, checkin_id)
    if not checkin:
        return error_response("not_found", 404, "Mood check-in not found")
    return jsonify({"ok": True, "checkIn": map_checkin(checkin)})


@mood_api_bp.delete("/<int:checkin_id>")
@jwt_required()
def delete_checkin(checkin_id: int):
    user_id = int(get_jwt_identity())
    if not mood_service.delete_checkin(user_id, checkin_id):
        return error_response("not_found", 404, "Mood check-in not found")
    return jsonify({"ok": True, "message": "Mood check-in deleted successfully"})
