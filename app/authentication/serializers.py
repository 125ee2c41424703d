"""
Serializers for account endpoints.

This module provides DRF serializers for:
- User output (profile, directory rows, chat member summaries)
- Request bodies (register, login, profile update, password change)

Request serializers are closed schemas (StrictFieldsMixin): unknown keys,
missing keys and wrong types are rejected before AuthService runs.
Field rules (email format, lengths) are enforced by AuthService so that
they apply to every caller, not only HTTP.

Wire format uses camelCase keys (createdAt, oldPassword, ...).

Security:
    - Password fields are write-only
"""

from rest_framework import serializers

from authentication.models import User
from core.serializer_mixins import StrictFieldsMixin


# =============================================================================
# Output Serializers
# =============================================================================


class UserSummarySerializer(serializers.ModelSerializer):
    """Minimal user representation used in chat member lists and search."""

    class Meta:
        model = User
        fields = ["id", "username", "name"]
        read_only_fields = fields


class UserListSerializer(serializers.ModelSerializer):
    """Directory row for GET /users/list/<page>."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "name", "createdAt"]
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """
    Full profile of the authenticated user.

    Used by GET /users/profile.
    """

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "username", "name", "createdAt", "updatedAt"]
        read_only_fields = fields


class UpdatedUserSerializer(serializers.ModelSerializer):
    """User payload returned by PUT /users/update."""

    class Meta:
        model = User
        fields = ["id", "email", "username", "name"]
        read_only_fields = fields


class AuthResponseSerializer(serializers.Serializer):
    """Response of register and login (documentation only)."""

    message = serializers.CharField()
    userId = serializers.IntegerField()
    token = serializers.CharField()


# =============================================================================
# Request Serializers
# =============================================================================


class RegisterSerializer(StrictFieldsMixin, serializers.Serializer):
    """POST /users/register body."""

    email = serializers.CharField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    username = serializers.CharField(max_length=150)
    name = serializers.CharField(max_length=150)


class LoginSerializer(StrictFieldsMixin, serializers.Serializer):
    """POST /users/login body. identifier is an email or a username."""

    identifier = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class UserUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """PUT /users/update body. Every field is optional."""

    email = serializers.CharField(max_length=254, required=False)
    name = serializers.CharField(max_length=150, required=False)
    username = serializers.CharField(max_length=150, required=False)


class ChangePasswordSerializer(StrictFieldsMixin, serializers.Serializer):
    """POST /users/changePassword body."""

    oldPassword = serializers.CharField(
        source="old_password", write_only=True, trim_whitespace=False
    )
    newPassword = serializers.CharField(
        source="new_password", write_only=True, trim_whitespace=False
    )
