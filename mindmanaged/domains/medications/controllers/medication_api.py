"""Medication lookup JSON API (openFDA proxy)."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required

from mindmanaged.core.utils.responses import error_response, parse_query
from mindmanaged.domains.medications.schemas.medication_schemas import MedicationSearchQuery
from mindmanaged.domains.medications.services import medication_service
from mindmanaged.domains.medications.services.medication_service import (
    MedicationApiSettings,
    MedicationSearchError,
)

logger = logging.getLogger(__name__)

medication_api_bp = Blueprint("medication_api", __name__)


@medication_api_bp.get("/search")
@jwt_required()
def search():
    params, err = parse_query(MedicationSearchQuery)
    if err:
        return err
    settings = MedicationApiSettings.from_config(current_app.config)
    try:
        results = medication_service.search_medications(params.q, params.limit, settings)
    except MedicationSearchError as exc:
        return error_response(exc.code, exc.status_code, exc.message)
    return jsonify(
        {
            "ok": True,
            "success": True,
            "query": params.q,
            "total": len(results),
            "results": results,
        }
    )


@medication_api_bp.get("/status")
@jwt_required()
def status():
    """Probe the upstream API with a one-result lookup."""
    settings = MedicationApiSettings.from_config(current_app.config)
    try:
        count = medication_service.check_connection(settings)
    except MedicationSearchError as exc:
        logger.warning("Medication API status check failed: %s", exc)
        return error_response(exc.code, exc.status_code, exc.message)
    return jsonify(
        {
            "ok": True,
            "configured": bool(settings.url),
            "apiUrl": settings.url,
            "hasApiKey": bool(settings.api_key),
            "testResults": count,
        }
    )
