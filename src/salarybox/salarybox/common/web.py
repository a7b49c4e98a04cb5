from __future__ import annotations

from datetime import date
from functools import wraps

from flask import Flask, current_app, g, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date, parse_month
from .http import fail

# Domain error -> (HTTP status, machine code)
ERROR_STATUS = (
    (ValidationError, 400, "VALIDATION_ERROR"),
    (AuthenticationError, 401, "UNAUTHENTICATED"),
    (AuthorizationError, 403, "FORBIDDEN"),
    (NotFoundError, 404, "NOT_FOUND"),
    (ConflictError, 409, "CONFLICT"),
)


def login_required(view):
    """Resolve the stored user id into a SessionUser on every request (``g.current_user``)."""

    @wraps(view)
    async def wrapper(*args, **kwargs):
        container = current_app.extensions["salarybox"]
        g.current_user = container.auth_service.resolve(session.get("user_id"))
        return await view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    async def wrapper(*args, **kwargs):
        container = current_app.extensions["salarybox"]
        g.current_user = container.auth_service.resolve(session.get("user_id"))
        if not g.current_user.is_admin:
            raise AuthorizationError("Admin only")
        return await view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    return data


def date_arg(value: str | None, field_name: str) -> date:
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def month_arg(value: str | None, *, default: date) -> date:
    if not value:
        return default
    try:
        return parse_month(value)
    except (TypeError, ValueError):
        raise ValidationError("month must be YYYY-MM")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        for exc_type, status, code in ERROR_STATUS:
            if isinstance(e, exc_type):
                app.logger.info("%s %s -> %s: %s", request.method, request.path, status, e)
                return fail(str(e), status=status, code=code)
        app.logger.warning("unmapped domain error on %s: %s", request.path, e)
        return fail(str(e), status=400)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
