"""
Base service layer patterns for business logic encapsulation.

Service Layer Philosophy:
    Services encapsulate business logic separate from views and models.
    Views handle HTTP concerns, models handle data, services handle logic.

Error Handling:
    Services raise core.exceptions for expected failures (validation,
    access control, conflicts). The DRF exception handler maps them to
    HTTP responses, so service methods return plain domain objects.

Usage:
    from core.services import BaseService
    from core.exceptions import ConflictError

    class UserService(BaseService):
        @classmethod
        def create_user(cls, email: str, password: str) -> User:
            if User.objects.filter(email=email).exists():
                raise ConflictError("Email already registered")

            with cls.atomic():
                user = User.objects.create_user(email=email, password=password)

            cls.get_logger().info(f"Created user {user.id}")
            return user

Related:
    - core.exceptions: Domain error hierarchy
    - core.handlers: Conversion of errors to API responses
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Database transaction management

    Design Notes:
        - Use @staticmethod or @classmethod (no instance state)
        - Services should be stateless
        - Raise core.exceptions for expected failures
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.

        Example:
            class ChatService(BaseService):
                @classmethod
                def rename(cls, chat, title):
                    cls.get_logger().info(f"Renaming chat {chat.id}")
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Execute operations in a database transaction.

        All database operations within this context manager are
        wrapped in a transaction. If any operation fails, all
        changes are rolled back.

        Example:
            with cls.atomic():
                chat = Chat.objects.create(title=title)
                chat.members.set(members)
                # If adding members fails, the chat is rolled back too
        """
        with transaction.atomic():
            yield
