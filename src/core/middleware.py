"""Middleware to authenticate requests via a JWT bearer token."""

import logging

from django.contrib.auth.models import AnonymousUser
from django.utils.deprecation import MiddlewareMixin
from rest_framework.exceptions import AuthenticationFailed

from authentication.services import TokenService

logger = logging.getLogger(__name__)


class JWTAuthMiddleware(MiddlewareMixin):
    """Decode the bearer token and attach the resulting principal as request.user.

    Failures are not answered here: the error is recorded on the request and
    raised by ``MiddlewareUserAuthentication`` only for views that require
    authentication, so public reads keep working with a stale token.
    """

    def process_request(self, request):  # type: ignore[override]
        """Authenticate request using Bearer token if present."""
        request.user = AnonymousUser()
        request.auth_error = None

        token = get_bearer_token(request)
        if token is None:
            return None

        try:
            request.user = TokenService.principal_from_token(token)
        except AuthenticationFailed as exc:
            logger.info("Rejected bearer token on %s: %s", request.path, exc.detail)
            request.auth_error = exc
        return None


def get_bearer_token(request) -> str | None:
    """Extract the Bearer token from Authorization header if present."""
    auth_header = request.META.get("HTTP_AUTHORIZATION", "")
    # Scheme names are case-insensitive (RFC 7235).
    if auth_header[:7].lower() != "bearer ":
        return None
    token = auth_header[7:].strip()
    return token or None


__all__ = ["JWTAuthMiddleware", "get_bearer_token"]
