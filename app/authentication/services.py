"""
Authentication services.

This module provides the AuthService class for account registration,
login, bearer-token issue/verification, profile changes and the user
directory.

Related files:
    - models.py: User
    - backends.py: DRF authentication class built on verify_token()
    - views.py: HTTP endpoints under /users/

Security:
    - Passwords hashed with Django's configured hasher
    - Login failures use one message for unknown identifier and bad password
    - Tokens expire 24 hours after issue and have no refresh mechanism
    - Token verification re-resolves the user, so deleted accounts are revoked
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError
from django.db.models import Q
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from authentication.constants import USER_CONFIG
from authentication.models import User
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
    ValidationError,
)
from core.services import BaseService

if TYPE_CHECKING:
    from django.db.models import QuerySet

DUPLICATE_USER_MESSAGE = "Email or username already exists"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful register or login."""

    user: User
    token: str

    @property
    def user_id(self) -> int:
        return self.user.pk


def _field_error(field: str, message: str) -> dict[str, str]:
    return {"field": field, "message": message}


class AuthService(BaseService):
    """
    Centralized account and token logic.

    Usage:
        from authentication.services import AuthService

        result = AuthService.register("a@x.com", "secret1", "alice", "Alice")
        user = AuthService.verify_token(result.token)
    """

    # =========================================================================
    # Validation helpers
    # =========================================================================

    @classmethod
    def _validate_fields(
        cls,
        email: str | None = None,
        password: str | None = None,
        username: str | None = None,
        name: str | None = None,
    ) -> None:
        """
        Check field rules for every argument that is not None.

        Raises:
            ValidationError: With one entry per failing field
        """
        errors = []

        if email is not None:
            try:
                validate_email(email)
            except DjangoValidationError:
                errors.append(_field_error("email", "Enter a valid email address."))

        if password is not None and len(password) < USER_CONFIG.PASSWORD_MIN_LENGTH:
            errors.append(
                _field_error(
                    "password",
                    f"Password must be at least {USER_CONFIG.PASSWORD_MIN_LENGTH} characters.",
                )
            )

        if username is not None and len(username) < USER_CONFIG.USERNAME_MIN_LENGTH:
            errors.append(
                _field_error(
                    "username",
                    f"Username must be at least {USER_CONFIG.USERNAME_MIN_LENGTH} characters.",
                )
            )

        if name is not None and not name.strip():
            errors.append(_field_error("name", "Name may not be empty."))

        if errors:
            raise ValidationError("Validation failed", errors=errors)

    @classmethod
    def _ensure_unique(
        cls, email: str | None, username: str | None, exclude: User | None = None
    ) -> None:
        """
        Raise ConflictError when the email or username belongs to another user.
        """
        lookup = Q()
        if email is not None:
            lookup |= Q(email=User.objects.normalize_email(email))
        if username is not None:
            lookup |= Q(username=username)
        if not lookup:
            return

        existing = User.objects.filter(lookup)
        if exclude is not None:
            existing = existing.exclude(pk=exclude.pk)
        if existing.exists():
            raise ConflictError(DUPLICATE_USER_MESSAGE, error_code="USER_EXISTS")

    # =========================================================================
    # Tokens
    # =========================================================================

    @classmethod
    def issue_token(cls, user: User) -> str:
        """
        Create a signed access token for the user.

        Claims: token_type, id, username, iat, exp (24h after issue), jti.
        """
        token = AccessToken.for_user(user)
        token["username"] = user.username
        return str(token)

    @classmethod
    def verify_token(cls, raw_token: str | bytes) -> User:
        """
        Validate a bearer token and resolve the user it names.

        Args:
            raw_token: Encoded JWT from the Authorization header

        Returns:
            The active user identified by the token

        Raises:
            AuthenticationError: If the token is malformed, expired, signed
                with the wrong key, or the user no longer exists
        """
        if not raw_token:
            raise AuthenticationError(
                "Authentication credentials were not provided.",
                error_code="TOKEN_MISSING",
            )

        try:
            token = AccessToken(raw_token)
        except TokenError as exc:
            raise AuthenticationError(
                "Token is invalid or expired", error_code="TOKEN_INVALID"
            ) from exc

        user_id = token.get(api_settings.USER_ID_CLAIM)
        if user_id is None:
            raise AuthenticationError(
                "Token contained no recognizable user identification",
                error_code="TOKEN_INVALID",
            )

        user = User.objects.filter(pk=user_id, is_active=True).first()
        if user is None:
            raise AuthenticationError("User not found", error_code="USER_NOT_FOUND")
        return user

    # =========================================================================
    # Registration and login
    # =========================================================================

    @classmethod
    def register(
        cls, email: str, password: str, username: str, name: str
    ) -> AuthResult:
        """
        Create an account and return a token for it.

        Raises:
            ValidationError: If email, password, username or name breaks a rule
            ConflictError: If the email or username is already taken
        """
        cls._validate_fields(
            email=email, password=password, username=username, name=name
        )
        cls._ensure_unique(email, username)

        try:
            with cls.atomic():
                user = User.objects.create_user(
                    username=username,
                    email=email,
                    password=password,
                    name=name.strip(),
                )
        except IntegrityError as exc:
            # Lost a race with a concurrent registration
            raise ConflictError(DUPLICATE_USER_MESSAGE, error_code="USER_EXISTS") from exc

        cls.get_logger().info(
            f"Registered user {user.pk}", extra={"user_id": user.pk}
        )
        return AuthResult(user=user, token=cls.issue_token(user))

    @classmethod
    def login(cls, identifier: str, password: str) -> AuthResult:
        """
        Authenticate by email or username and return a fresh token.

        Raises:
            InvalidCredentialsError: Unknown identifier or wrong password
        """
        user = (
            User.objects.filter(
                Q(email=User.objects.normalize_email(identifier))
                | Q(username=identifier)
            )
            .order_by("id")
            .first()
        )

        if user is None:
            # Run the hasher anyway so response time does not reveal
            # whether the identifier exists
            User().set_password(password)
            cls.get_logger().info("Login failed: unknown identifier")
            raise InvalidCredentialsError()

        if not user.is_active or not user.check_password(password):
            cls.get_logger().info(
                f"Login failed for user {user.pk}", extra={"user_id": user.pk}
            )
            raise InvalidCredentialsError()

        return AuthResult(user=user, token=cls.issue_token(user))

    # =========================================================================
    # Account management
    # =========================================================================

    @classmethod
    def update_profile(
        cls,
        user: User,
        email: str | None = None,
        name: str | None = None,
        username: str | None = None,
    ) -> User:
        """
        Update any subset of email, name and username.

        Raises:
            ValidationError: If a provided field breaks a rule
            ConflictError: If the new email or username belongs to someone else
        """
        cls._validate_fields(email=email, username=username, name=name)
        cls._ensure_unique(email, username, exclude=user)

        update_fields = ["updated_at"]
        if email is not None:
            user.email = User.objects.normalize_email(email)
            update_fields.append("email")
        if name is not None:
            user.name = name.strip()
            update_fields.append("name")
        if username is not None:
            user.username = username
            update_fields.append("username")

        try:
            with cls.atomic():
                user.save(update_fields=update_fields)
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_USER_MESSAGE, error_code="USER_EXISTS") from exc

        return user

    @classmethod
    def change_password(cls, user: User, old_password: str, new_password: str) -> None:
        """
        Replace the password after checking the current one.

        Tokens issued before the change stay valid until they expire.

        Raises:
            ValidationError: If the old password is wrong or the new one is too short
        """
        if not user.check_password(old_password):
            raise ValidationError(
                "Old password is incorrect", error_code="WRONG_PASSWORD"
            )
        cls._validate_fields(password=new_password)

        user.set_password(new_password)
        user.save(update_fields=["password", "updated_at"])
        cls.get_logger().info(
            f"Password changed for user {user.pk}", extra={"user_id": user.pk}
        )

    @classmethod
    def delete_account(cls, user: User) -> None:
        """
        Delete the account with its chat memberships and authored messages.
        """
        user_id = user.pk
        user.delete()
        cls.get_logger().info(f"Deleted user {user_id}", extra={"user_id": user_id})

    # =========================================================================
    # Directory
    # =========================================================================

    @classmethod
    def directory(cls, user: User) -> QuerySet:
        """All users except the caller, in insertion order."""
        return User.objects.exclude(pk=user.pk).order_by("id")

    @classmethod
    def search(cls, user: User, query: str) -> list[User]:
        """
        Case-insensitive substring match on username or display name.

        Unpaginated; capped at USER_CONFIG.SEARCH_RESULT_LIMIT results in
        insertion order. The caller is never included.
        """
        matches = cls.directory(user).filter(
            Q(username__icontains=query) | Q(name__icontains=query)
        )
        return list(matches[: USER_CONFIG.SEARCH_RESULT_LIMIT])
