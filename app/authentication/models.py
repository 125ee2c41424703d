"""
Authentication models.

This module defines the identity record for the chat service:
- User: Account with unique email and username, display name and password hash

Related files:
    - managers.py: Custom user manager for user creation
    - services.py: AuthService business logic (register, login, tokens)

Security:
    - Passwords hashed with Django's configured password hasher
    - The plaintext password is never stored
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.core.validators import MinLengthValidator
from django.db import models

from authentication.constants import USER_CONFIG
from authentication.managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    Chat user.

    Users sign in with either their email or their username
    (see AuthService.login). Chat membership is the reverse side of
    Chat.members and is exposed as ``user.chats``.

    Fields:
        email: Unique email address
        username: Unique handle, at least 3 characters
        name: Display name
        is_active: Inactive users cannot authenticate
        is_staff: Whether the user can access Django admin
        created_at: When the account was created
        updated_at: When the account was last modified

    Deleting a user removes their chat memberships and their messages.
    """

    email = models.EmailField(
        unique=True,
        max_length=254,
        help_text="User's email address",
    )
    username = models.CharField(
        unique=True,
        max_length=USER_CONFIG.USERNAME_MAX_LENGTH,
        validators=[MinLengthValidator(USER_CONFIG.USERNAME_MIN_LENGTH)],
        help_text="Unique username (at least 3 characters)",
    )
    name = models.CharField(
        max_length=USER_CONFIG.NAME_MAX_LENGTH,
        help_text="Display name",
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Whether this user account is active.",
    )
    is_staff = models.BooleanField(
        default=False,
        help_text="Whether the user can access the admin site.",
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When the user account was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the user record was last modified",
    )

    USERNAME_FIELD = "username"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["email", "name"]

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        # Insertion order; user listing and search rely on it
        ordering = ["id"]

    def __str__(self):
        return self.username

    def get_full_name(self):
        return self.name or self.username

    def get_short_name(self):
        return self.username
