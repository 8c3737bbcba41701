"""Dashboard JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from mindmanaged.core.utils.responses import parse_query
from mindmanaged.domains.dashboard.schemas.dashboard_schemas import AnalyticsFilter
from mindmanaged.domains.dashboard.services import dashboard_service

dashboard_api_bp = Blueprint("dashboard_api", __name__)


@dashboard_api_bp.get("")
@jwt_required()
def dashboard():
    user_id = int(get_jwt_identity())
    return jsonify({"ok": True, **dashboard_service.get_dashboard(user_id)})


@dashboard_api_bp.get("/analytics")
@jwt_required()
def analytics():
    user_id = int(get_jwt_identity())
    params, err = parse_query(AnalyticsFilter)
    if err:
        return err
    return jsonify({"ok": True, **dashboard_service.get_analytics(user_id, period=params.period)})
