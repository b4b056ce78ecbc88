"""Permission classes gating views on the principal's role."""

from django.conf import settings
from rest_framework import permissions


class IsAuthenticatedPrincipal(permissions.BasePermission):
    """Allow any principal carrying a verified session token."""

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        return bool(user and getattr(user, "is_authenticated", False))


class RolePermission(IsAuthenticatedPrincipal):
    """Check the principal's role against the view's ``required_role``.

    Unauthenticated requests fail the base check, which DRF turns into a 401;
    authenticated principals with the wrong role get a 403.
    """

    message = "Access denied"

    def has_permission(self, request, view) -> bool:
        if not super().has_permission(request, view):
            return False

        required_role = getattr(view, "required_role", None)
        if not required_role:
            return False
        return getattr(request.user, "role", None) == required_role


class RejectedListPermission(RolePermission):
    """Admin-only unless ``settings.REJECTED_ARTICLES_PUBLIC`` opens the list."""

    def has_permission(self, request, view) -> bool:
        if getattr(settings, "REJECTED_ARTICLES_PUBLIC", False):
            return True
        return super().has_permission(request, view)


__all__ = ["IsAuthenticatedPrincipal", "RejectedListPermission", "RolePermission"]
