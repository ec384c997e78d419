"""
Error taxonomy and the DRF exception handler.

Services raise the ``APIException`` subclasses below; the handler renders
every failure as ``{"error": <message>}`` and hides the details of
anything it does not recognise behind a generic 500.
"""
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
TOKEN_REQUIRED_MESSAGE = "Access token required"


class ValidationError(exceptions.APIException):
    """Required input is missing."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"
    default_code = "validation_error"


class ConflictError(exceptions.APIException):
    """Duplicate email or duplicate patient/doctor pair."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Conflict"
    default_code = "conflict"


class AuthError(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "auth_error"


class InvalidTokenError(AuthError):
    """A bearer token was sent but failed verification."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token"
    default_code = "invalid_token"


class NotFoundError(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class AuthorizationError(exceptions.APIException):
    """The entity exists but the caller has no rights over it."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"
    default_code = "access_denied"


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = INTERNAL_ERROR_MESSAGE
    default_code = "internal_error"


def _flatten(detail) -> str:
    if isinstance(detail, dict):
        if "detail" in detail:
            return _flatten(detail["detail"])
        return "; ".join(f"{key}: {_flatten(value)}" for key, value in detail.items())
    if isinstance(detail, (list, tuple)):
        return " ".join(_flatten(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    # rest_framework.views loads the authentication classes, which import this module.
    from rest_framework.views import exception_handler as drf_exception_handler

    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "request", exc_info=exc)
        return Response({"error": INTERNAL_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.NotAuthenticated):
        message = TOKEN_REQUIRED_MESSAGE
    elif isinstance(exc, InternalError):
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = _flatten(resp.data)

    headers = {name: resp[name] for name in ("WWW-Authenticate", "Retry-After") if resp.has_header(name)}
    return Response({"error": message}, status=resp.status_code, headers=headers)
