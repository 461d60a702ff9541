from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import Flask, current_app, g, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AiTaskInProgressError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .log import get_logger

log = get_logger(__name__)

EXTENSION_KEY = "edu_control"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (AiTaskInProgressError, 409),
)


def get_container():
    return current_app.extensions[EXTENSION_KEY]


def current_user():
    """The logged-in user, loaded once per request."""
    if "current_user" not in g:
        try:
            g.current_user = get_container().user_service.get(session["user_id"])
        except NotFoundError:
            session.clear()
            raise AuthenticationError("Session expired, please log in again")
    return g.current_user


def sign_in(user) -> None:
    session.clear()
    session["user_id"] = user.id
    session["role"] = user.role.value


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def ok(payload: Any = None, status: int = 200):
    body = {"success": True}
    if payload is not None:
        body["data"] = payload
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            if session.get("role") not in {r.value for r in allowed}:
                return fail("You do not have access to this page", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def query_int(name: str) -> Optional[int]:
    raw = request.args.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number")


def status_for(error: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(error, cls):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return fail(str(e), status_for(e))

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # HTTP errors raised by Flask itself keep their own status.
        code = getattr(e, "code", None)
        if isinstance(code, int) and code < 500:
            return fail(getattr(e, "description", str(e)), code)
        log.exception("unhandled error")
        return fail("System error, please try again", 500)
