"""Shared Flask helpers: caller identity from headers, role guard, JSON errors."""

from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..users.model import Viewer
from ..users.service import ViewerService
from .validators import require_role

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-Id"
USER_ROLE_HEADER = "X-User-Role"


def current_viewer() -> Viewer:
    """Identity handed over by the login layer; credentials are checked upstream."""

    user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not user_id:
        raise AuthorizationError(f"Missing {USER_ID_HEADER} header")
    role = require_role(request.headers.get(USER_ROLE_HEADER) or Role.USER.value)
    return Viewer(user_id=user_id, role=role)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        g.viewer = current_viewer()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        viewer = current_viewer()
        ViewerService.require_admin(viewer)
        g.viewer = viewer
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data


def _error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        logger.warning("Validation failed: %s", e)
        return _error(str(e), 400)

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return _error(str(e), 403)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        logger.warning("%s", e)
        return _error(str(e), 404)

    @app.errorhandler(PersistenceError)
    def _storage(e: PersistenceError):
        logger.error("Storage failure: %s", e)
        return _error("Attendance storage is unavailable", 503)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return _error(str(e), 400)
