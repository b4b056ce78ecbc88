"""API error types and the exception handler enforcing the error envelope."""

import logging
from typing import Any

from django.conf import settings
from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class InvalidCredentials(APIException):
    """Password did not match the stored hash for an existing user."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class Conflict(APIException):
    """Uniqueness violation or a request that contradicts current state."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource conflict"
    default_code = "conflict"


class PayloadTooLarge(APIException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_detail = "Uploaded file is too large"
    default_code = "payload_too_large"


class StorageError(APIException):
    """The uploaded file could not be written to storage."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Failed to store uploaded file."
    default_code = "storage_error"


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        # Common DRF pattern: {"detail": "..."}
        return [payload["detail"]]
    return [payload]


def _error_code(exc: APIException) -> str:
    codes = exc.get_codes()
    if isinstance(codes, str):
        return codes
    # Field-level validation errors produce nested code structures.
    return exc.default_code


def error_response(errors: list[Any], code: str, status_code: int) -> Response:
    return Response({"data": None, "errors": errors, "code": code}, status=status_code)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in `{ "data": null, "errors": [...], "code": ... }` shape.

    - Uses DRF's default handler to produce the base response.
    - Normalizes authentication messages unless DEBUG_AUTH_ERRORS is enabled.
    - Maps datastore failures to an enveloped 503 response.
    """

    # Treat database errors as a temporary service outage and still respect the
    # global envelope format instead of returning Django's HTML 500 page.
    if isinstance(exc, DatabaseError):
        logger.error("Database error in %s: %s", _view_name(context), exc)
        return error_response(
            ["Service temporarily unavailable."],
            "service_unavailable",
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    if isinstance(exc, APIException):
        code = _error_code(exc)
    elif isinstance(exc, Http404):
        code = "not_found"
    else:
        code = "permission_denied"

    # Normalize auth-related status codes to 401, regardless of DRF's default
    # mapping, so that AuthenticationFailed/NotAuthenticated consistently
    # produce 401 responses.
    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        if response.status_code == status.HTTP_401_UNAUTHORIZED and not getattr(
            settings, "DEBUG_AUTH_ERRORS", False
        ):
            errors = ["Authentication credentials were not provided or are invalid."]
        else:
            errors = _normalize_errors(response.data)

        response.data = {"data": None, "errors": errors, "code": code}

    return response


def _view_name(context: dict[str, Any]) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown view"


__all__ = [
    "Conflict",
    "InvalidCredentials",
    "PayloadTooLarge",
    "StorageError",
    "custom_exception_handler",
    "error_response",
]
