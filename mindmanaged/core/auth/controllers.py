"""Auth HTTP controllers (API only)."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import create_access_token, get_jwt, get_jwt_identity, jwt_required

from mindmanaged.core.auth.auth_service import authenticate_user, issue_tokens, register_user, revoke_token
from mindmanaged.core.auth.schemas import LoginRequest, RegisterRequest
from mindmanaged.core.users.schemas import serialize_user
from mindmanaged.core.users.services import get_user
from mindmanaged.core.utils.responses import error_response, parse_body
from mindmanaged.extensions import limiter

auth_bp = Blueprint("auth_api", __name__)


@auth_bp.post("/register")
@limiter.limit("5/minute")
def register():
    data, err = parse_body(RegisterRequest)
    if err:
        return err
    try:
        user = register_user(data)
    except ValueError as exc:
        return error_response(str(exc), 400)
    return jsonify({"ok": True, **issue_tokens(user), "user": serialize_user(user)}), 201


@auth_bp.post("/login")
@limiter.limit("10/minute")
def login():
    data, err = parse_body(LoginRequest)
    if err:
        return err
    user = authenticate_user(data.email, data.password)
    if not user:
        return error_response("invalid_credentials", 401)
    return jsonify({"ok": True, **issue_tokens(user), "user": serialize_user(user)})


@auth_bp.post("/refresh")
@jwt_required(refresh=True)
def refresh():
    identity = str(get_jwt_identity())
    return jsonify({"ok": True, "token": create_access_token(identity=identity)})


@auth_bp.post("/logout")
@jwt_required(verify_type=False)
def logout():
    claims = get_jwt()
    revoke_token(claims["jti"], user_id=int(get_jwt_identity()))
    return jsonify({"ok": True, "message": "Logged out"})


@auth_bp.get("/me")
@jwt_required()
def me():
    user = get_user(get_jwt_identity())
    if not user:
        return error_response("not_found", 404, "User not found")
    return jsonify({"ok": True, "user": serialize_user(user)})
