"""Serializers for authentication flows (register, login, profile)."""

import logging
from typing import cast

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework import serializers
from rest_framework.exceptions import NotFound

from core.exceptions import Conflict, InvalidCredentials

from .managers import UserManager
from .models import Role

logger = logging.getLogger(__name__)

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    """Validate and create a user; uniqueness is left to the database."""

    username = serializers.CharField(max_length=150)
    phone = serializers.CharField(max_length=32)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    role = serializers.ChoiceField(choices=Role.choices, default=Role.USER)

    def create(self, validated_data):
        """Create the user, mapping unique-constraint violations to 409."""
        manager = cast(UserManager, User.objects)
        try:
            with transaction.atomic():
                return manager.create_user(**validated_data)
        except IntegrityError as exc:
            logger.info("Registration conflict for username %r", validated_data.get("username"))
            raise Conflict("Username or email already in use") from exc


class LoginSerializer(serializers.Serializer):
    """Authenticate a user via username/password using bcrypt verification."""

    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        """Authenticate credentials and attach the user to validated_data."""
        username = attrs.get("username")
        password = attrs.get("password")
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            raise NotFound("User not found")

        if not UserManager.verify_password(user, password):
            logger.info("Failed login for username %r", username)
            raise InvalidCredentials()

        attrs["user"] = user
        return attrs


class UserDetailSerializer(serializers.ModelSerializer):
    """Read-only user profile payload for responses."""

    class Meta:
        """Expose identity fields; the password hash never leaves the server."""
        model = User
        fields = ["id", "username", "phone", "email", "role"]
        read_only_fields = fields
