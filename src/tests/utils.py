"""Shared helpers for tests (user creation, tokens, in-memory uploads)."""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from authentication.managers import UserManager
from authentication.models import Role
from authentication.services import TokenService

User = get_user_model()

# Smallest valid PNG: signature plus IHDR/IDAT/IEND chunks for a 1x1 pixel.
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06"
    b"\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01"
    b"\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def create_user(username: str, password: str, role: str = Role.USER, **extra):
    """Create a user with a bcrypt-hashed password for tests."""

    extra.setdefault("email", f"{username}@example.com")
    extra.setdefault("phone", "+10000000000")
    return User.objects.create(
        username=username,
        password_hash=UserManager.hash_password(password),
        role=role,
        **extra,
    )


def auth_client(user) -> APIClient:
    """Return an APIClient authenticated with a fresh session token."""
    token = TokenService.generate_token(user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


def image_upload(name: str = "photo.png", size: int | None = None, content_type: str = "image/png"):
    """Build an in-memory upload; ``size`` pads the payload to that many bytes."""
    content = PNG_BYTES
    if size is not None:
        content = content + b"\0" * max(0, size - len(content))
    return SimpleUploadedFile(name, content, content_type=content_type)
