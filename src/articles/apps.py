"""App configuration for the articles app."""

from django.apps import AppConfig


class ArticlesConfig(AppConfig):
    """Articles app holds the moderation lifecycle and upload policy."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"
