"""App configuration for accounts and session tokens."""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Authentication app holds the User model, bcrypt hashing, and JWT issuance."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
