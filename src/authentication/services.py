"""Token service for JWT creation and decoding, plus the request principal."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed


@dataclass(frozen=True)
class Principal:
    """Identity asserted by a verified session token.

    Built from token claims alone, so authorization decisions never need a
    database round-trip. Exposes the attributes DRF expects of ``request.user``.
    """

    user_id: str
    role: str

    is_authenticated = True
    is_anonymous = False

    @property
    def pk(self) -> str:
        return self.user_id

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class TokenService:
    """Handle JWT issuance and decoding."""

    ALGORITHM = "HS256"

    @classmethod
    def ttl(cls) -> timedelta:
        return timedelta(minutes=getattr(settings, "TOKEN_TTL_MINUTES", 60))

    @classmethod
    def generate_token(cls, user) -> str:
        """Generate a signed session token for the given user."""

        now = datetime.now(timezone.utc)
        payload = cls._build_payload(user, now, cls.ttl())
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=cls.ALGORITHM)

    @classmethod
    def _build_payload(cls, user, issued_at: datetime, ttl: timedelta) -> dict[str, Any]:
        exp = issued_at + ttl
        return {
            "sub": str(user.id),
            "role": user.role,
            "iat": int(issued_at.timestamp()),
            "exp": int(exp.timestamp()),
        }

    @classmethod
    def decode_token(cls, token: str) -> dict[str, Any]:
        """Decode and validate a JWT, checking signature and expiry."""

        try:
            payload = jwt.decode(
                token,
                settings.SECRET_KEY,
                algorithms=[cls.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

        if not payload.get("role"):
            raise AuthenticationFailed("Token carries no role")

        return payload

    @classmethod
    def principal_from_token(cls, token: str) -> Principal:
        payload = cls.decode_token(token)
        return Principal(user_id=str(payload["sub"]), role=str(payload["role"]))


__all__ = ["Principal", "TokenService"]
