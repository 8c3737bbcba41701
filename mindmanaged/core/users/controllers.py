"""User profile API."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required

from mindmanaged.core.auth.auth_service import revoke_token
from mindmanaged.core.users.schemas import ProfileUpdateRequest, serialize_user
from mindmanaged.core.users.services import delete_user, get_user, update_profile
from mindmanaged.core.utils.responses import error_response, parse_body

user_api_bp = Blueprint("user_api", __name__)


@user_api_bp.get("/profile")
@jwt_required()
def get_profile():
    user = get_user(get_jwt_identity())
    if not user:
        return error_response("not_found", 404, "User not found")
    return jsonify({"ok": True, "user": serialize_user(user)})


@user_api_bp.put("/profile")
@jwt_required()
def update_profile_route():
    data, err = parse_body(ProfileUpdateRequest)
    if err:
        return err
    user = get_user(get_jwt_identity())
    if not user:
        return error_response("not_found", 404, "User not found")
    try:
        user = update_profile(user, data)
    except ValueError as exc:
        return error_response(str(exc), 400)
    return jsonify({"ok": True, "message": "Profile updated successfully", "user": serialize_user(user)})


@user_api_bp.delete("/account")
@jwt_required()
def delete_account():
    user = get_user(get_jwt_identity())
    if not user:
        return error_response("not_found", 404, "User not found")
    user_id = user.id
    delete_user(user)
    # The presented token must not outlive the account.
    revoke_token(get_jwt()["jti"], user_id=user_id)
    return jsonify({"ok": True, "message": "Account deleted successfully"})
