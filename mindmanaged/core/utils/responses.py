"""JSON envelope helpers shared by all controllers."""

from __future__ import annotations

from typing import Any, Optional

from flask import jsonify, request
from pydantic import BaseModel, ValidationError

ERROR_MESSAGES = {
    "validation_error": "Request data failed validation",
    "not_found": "Resource not found",
    "unauthorized": "Authentication required",
    "invalid_credentials": "Invalid email or password",
    "email_already_exists": "Email is already in use",
    "rate_limited": "Too many requests, please try again later",
    "unexpected_error": "Something went wrong",
}


def error_response(code: str, status: int, message: Optional[str] = None, details: Optional[list] = None):
    body: dict[str, Any] = {"ok": False, "error": code, "message": message or ERROR_MESSAGES.get(code, code)}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


def validation_details(exc: ValidationError) -> list[dict]:
    """Flatten pydantic errors into ``{field, message, type}`` rows."""
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "__root__"]
        details.append(
            {
                "field": ".".join(loc) or None,
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return details


def validation_error(exc: ValidationError, message: Optional[str] = None):
    return error_response("validation_error", 400, message=message, details=validation_details(exc))


def parse_body(schema_cls: type[BaseModel]):
    """Validate the JSON body; returns ``(model, None)`` or ``(None, error_response)``."""
    payload = request.get_json(silent=True) or {}
    try:
        return schema_cls.model_validate(payload), None
    except ValidationError as exc:
        return None, validation_error(exc)


def parse_query(schema_cls: type[BaseModel]):
    """Validate query-string arguments against a schema."""
    data = {k: v for k, v in request.args.items()}
    try:
        return schema_cls.model_validate(data), None
    except ValidationError as exc:
        return None, validation_error(exc)


def page_count(total: int, per_page: int) -> int:
    return (total + per_page - 1) // per_page if per_page else 1
