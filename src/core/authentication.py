"""Authentication helpers that bridge JWT middleware into DRF.

DRF's ``Request.user`` normally relies on its own authentication classes.
Since this project verifies tokens in ``JWTAuthMiddleware``, this module
provides a lightweight authenticator that surfaces the principal already
attached to the underlying Django request, or the error recorded there.
"""

from typing import Any, Optional, Tuple

from django.contrib.auth.models import AnonymousUser
from rest_framework.authentication import BaseAuthentication


class MiddlewareUserAuthentication(BaseAuthentication):
    """Expose ``request._request.user`` (set by middleware) to DRF.

    This authenticator does *not* decode tokens itself. If the middleware
    rejected the bearer token, the recorded ``AuthenticationFailed`` is raised
    so the view answers 401. If no token was sent, authentication is skipped
    and permission classes decide whether anonymous access is allowed.
    """

    def authenticate(self, request) -> Optional[Tuple[Any, None]]:
        # DRF's Request wraps the original Django HttpRequest as ``._request``.
        django_request = getattr(request, "_request", None)
        if django_request is None:
            return None

        auth_error = getattr(django_request, "auth_error", None)
        if auth_error is not None:
            raise auth_error

        user = getattr(django_request, "user", None)
        if user is None or isinstance(user, AnonymousUser):
            return None

        if not getattr(user, "is_authenticated", False):
            return None

        return user, None

    def authenticate_header(self, request) -> str:
        return 'Bearer realm="api"'


__all__ = ["MiddlewareUserAuthentication"]
