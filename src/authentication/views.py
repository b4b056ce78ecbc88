"""Authentication endpoints: register, login, and logout."""

from typing import Any

from django.conf import settings
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status

from core.response import BaseAPIView, api_response
from .models import Role
from .serializers import LoginSerializer, RegisterSerializer, UserDetailSerializer
from .services import TokenService


class RegisterView(BaseAPIView):
    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    @extend_schema(request=RegisterSerializer, responses={201: UserDetailSerializer})
    def post(self, request):
        """Register a new user and return their profile."""
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return api_response(UserDetailSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(BaseAPIView):
    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    @extend_schema(
        request=LoginSerializer,
        responses=inline_serializer(
            "LoginResponse",
            {"token": serializers.CharField(), "redirectTo": serializers.CharField()},
        ),
    )
    def post(self, request):
        """Authenticate and issue a session token with a role-based redirect hint."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        token = TokenService.generate_token(user)
        return api_response({"token": token, "redirectTo": _redirect_for(user)})


class LogoutView(BaseAPIView):
    """Acknowledge logout.

    Tokens are stateless, so nothing is revoked server-side; the client is
    expected to discard its token, which stays valid until it expires.
    """

    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        return api_response({"message": "Logged out successfully"})


def _redirect_for(user) -> str:
    if user.role == Role.ADMIN:
        return settings.ADMIN_REDIRECT_URL
    return settings.DEFAULT_REDIRECT_URL
