from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NetworkAccessDenied,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NetworkAccessDenied, 403),
    (ValidationError, 400),
)


def json_error(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def domain_error_response(exc: DomainError):
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return json_error(str(exc), status)
    return json_error(str(exc), 400)


def system_error_response(exc: Exception, what: str):
    logger.exception("unexpected error while %s", what)
    return json_error(f"System error while {what}", 500)
