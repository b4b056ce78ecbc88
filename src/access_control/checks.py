"""System checks for role-gated views."""

from django.core.checks import Error, register

from access_control.permissions import RolePermission


@register()
def role_gated_views_declare_required_role(app_configs, **kwargs):
    """Ensure views using RolePermission declare a required_role attribute.

    Only the known moderation views are inspected. New role-gated views should
    be added here so a missing ``required_role`` is caught at startup instead
    of silently denying every request.
    """
    errors: list[Error] = []

    # Import here to avoid circular imports at module load time.
    from articles.views import PendingArticlesView, RejectedArticlesView, ReviewArticleView

    gated_views = [PendingArticlesView, ReviewArticleView, RejectedArticlesView]

    for view_cls in gated_views:
        permission_classes = getattr(view_cls, "permission_classes", [])
        if any(issubclass(cls, RolePermission) for cls in permission_classes):
            role = getattr(view_cls, "required_role", None)
            if not role:
                errors.append(
                    Error(
                        f"{view_cls.__name__} uses RolePermission but does not "
                        f"define required_role.",
                        obj=view_cls,
                        id="access_control.E001",
                    )
                )

    return errors
