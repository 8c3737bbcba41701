"""Mind Managed application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from flask import Flask

from mindmanaged.config import config_by_name
from mindmanaged.extensions import init_extensions, jwt, limiter

_HTTP_ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
    415: "unsupported_media_type",
    429: "rate_limited",
}


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Mind Managed Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(__name__, instance_path=str(instance_root), instance_relative_config=True)
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    app.json.sort_keys = False

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        db_path = Path(db_uri.replace("sqlite:///", "", 1))
        if not db_path.is_absolute():
            db_path = project_root / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{db_path}"

    _configure_logging(app)
    init_extensions(app)
    _import_models()
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_jwt_handlers(app)

    @app.get("/api/health")
    @limiter.exempt
    def health():
        return {
            "ok": True,
            "status": "OK",
            "message": "Mind Managed 2 API is running",
            "timestamp": datetime.utcnow().isoformat() + "Z",
        }, 200

    # Register CLI commands
    from mindmanaged.scripts.commands import register_commands

    register_commands(app)

    app.logger.info("Mind Managed app created (env=%s)", env_name)
    return app


def _configure_logging(app: Flask) -> None:
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(level)
    app.logger.setLevel(level)
    logging.getLogger("mindmanaged").setLevel(level)


def _import_models() -> None:
    """Import every model module so ``db.metadata`` is complete for create_all and migrations."""
    from mindmanaged.core.auth import models as _auth_models  # noqa: F401
    from mindmanaged.core.users import models as _user_models  # noqa: F401
    from mindmanaged.domains.journal import models as _journal_models  # noqa: F401
    from mindmanaged.domains.mood import models as _mood_models  # noqa: F401
    from mindmanaged.domains.tasks import models as _task_models  # noqa: F401


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from mindmanaged.core.auth.controllers import auth_bp  # local import to avoid circulars
    from mindmanaged.core.users.controllers import user_api_bp
    from mindmanaged.domains.dashboard.controllers.dashboard_api import dashboard_api_bp
    from mindmanaged.domains.journal.controllers.journal_api import journal_api_bp
    from mindmanaged.domains.medications.controllers.medication_api import medication_api_bp
    from mindmanaged.domains.mood.controllers.mood_api import mood_api_bp
    from mindmanaged.domains.tasks.controllers.task_api import task_api_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(user_api_bp, url_prefix="/api/users")
    app.register_blueprint(task_api_bp, url_prefix="/api/tasks")
    app.register_blueprint(journal_api_bp, url_prefix="/api/journals")
    app.register_blueprint(mood_api_bp, url_prefix="/api/mood-checkins")
    app.register_blueprint(dashboard_api_bp, url_prefix="/api/dashboard")
    app.register_blueprint(medication_api_bp, url_prefix="/api/medications")


def _register_error_handlers(app: Flask) -> None:
    """JSON error envelopes for every failure."""
    from werkzeug.exceptions import HTTPException

    from mindmanaged.core.utils.responses import error_response

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        code = _HTTP_ERROR_CODES.get(exc.code, "http_error")
        if exc.code == 404:
            return error_response(code, 404, "Route not found")
        if exc.code == 429:
            return error_response(code, 429)
        return error_response(code, exc.code or 500, exc.description)

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return error_response("unexpected_error", 500, str(exc))
        return error_response("unexpected_error", 500)


def _register_jwt_handlers(app: Flask) -> None:
    """Bearer-token failures share the error envelope."""
    from mindmanaged.core.auth.auth_service import is_token_revoked
    from mindmanaged.core.utils.responses import error_response

    @jwt.token_in_blocklist_loader
    def _check_revoked(_jwt_header, jwt_payload):
        return is_token_revoked(jwt_payload["jti"])

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        return error_response("unauthorized", 401, "Access denied. No token provided.")

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        return error_response("unauthorized", 401, "Invalid token")

    @jwt.expired_token_loader
    def _expired_token(_jwt_header, _jwt_payload):
        return error_response("unauthorized", 401, "Token has expired")

    @jwt.revoked_token_loader
    def _revoked_token(_jwt_header, _jwt_payload):
        return error_response("unauthorized", 401, "Token has been revoked")

    @jwt.user_lookup_loader
    def _load_user(_jwt_header, jwt_data):
        from mindmanaged.core.users.services import get_user

        return get_user(jwt_data["sub"])

    @jwt.user_lookup_error_loader
    def _missing_user(_jwt_header, _jwt_data):
        return error_response("unauthorized", 401, "User no longer exists")
