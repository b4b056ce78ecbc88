"""App configuration for the core project utilities."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app holds shared settings, URLs, middleware, and error handling."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
