"""
Service-level authorization for chat operations.

This module provides the access rules every chat-scoped operation runs
through before touching data.

Key Components:
    ChatAuthorizationService: Stateless service class with authorization methods
    require_chat_member: Decorator for chat-level access with injection

Rules:
    - Chat reads, message posts, rename and membership changes require the
      acting user to be a current member. Non-members get the same 404 as
      a chat that does not exist.
    - Message edit/delete requires the acting user to be the author.
      Membership is not re-checked. Unknown message id gives 404, someone
      else's message gives 403.

Error Codes:
    CHAT_NOT_FOUND: Chat does not exist or user is not a member
    MESSAGE_NOT_FOUND: Message does not exist
    NOT_AUTHOR: User did not write the message

Usage:
    # Direct method call
    chat = ChatAuthorizationService.get_member_chat(user, chat_id)

    # Decorator usage
    class ChatService(BaseService):
        @classmethod
        @require_chat_member()
        def rename_chat(cls, user, chat_id, new_title, _chat=None):
            # _chat is injected by decorator
            _chat.title = new_title
            _chat.save()
            return _chat
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING, Callable, TypeVar

from core.exceptions import NotFoundError, PermissionDeniedError

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from authentication.models import User
    from chat.models import Chat, Message


T = TypeVar("T")

CHAT_NOT_FOUND_MESSAGE = "Chat not found or access denied"

logger = logging.getLogger(__name__)


class ChatAuthorizationService:
    """
    Stateless service providing authorization checks for chat operations.

    All methods are classmethods and can be called directly without instantiation.
    The get_* methods raise core.exceptions on failure so callers never
    handle a "denied" value by hand.
    """

    @classmethod
    def is_chat_member(cls, user: "User", chat_id: int) -> bool:
        """
        Check if user is currently a member of the chat.

        Args:
            user: User to check
            chat_id: ID of the chat

        Returns:
            True if user is a member, False otherwise (including unknown chats)
        """
        from chat.models import Chat

        return Chat.objects.filter(pk=chat_id, members=user).exists()

    @classmethod
    def member_chats(cls, user: "User") -> "QuerySet[Chat]":
        """Chats the user belongs to, most recently updated first."""
        from chat.models import Chat

        return Chat.objects.filter(members=user).order_by("-updated_at", "-id")

    @classmethod
    def get_member_chat(cls, user: "User", chat_id: int) -> "Chat":
        """
        Return the chat if user is a member of it.

        Raises:
            NotFoundError: If the chat does not exist or user is not a member.
                Both cases produce the same error.
        """
        chat = cls.member_chats(user).filter(pk=chat_id).first()
        if chat is None:
            logger.info(
                f"User {user.pk} denied access to chat {chat_id}",
                extra={"user_id": user.pk, "chat_id": chat_id},
            )
            raise NotFoundError(CHAT_NOT_FOUND_MESSAGE, error_code="CHAT_NOT_FOUND")
        return chat

    @classmethod
    def get_authored_message(cls, user: "User", message_id: int) -> "Message":
        """
        Return the message if user wrote it.

        Raises:
            NotFoundError: If the message does not exist
            PermissionDeniedError: If someone else wrote the message
        """
        from chat.models import Message

        message = Message.objects.select_related("chat").filter(pk=message_id).first()
        if message is None:
            raise NotFoundError("Message not found", error_code="MESSAGE_NOT_FOUND")

        if message.author_id != user.pk:
            logger.warning(
                f"User {user.pk} attempted to modify message {message_id} "
                f"written by user {message.author_id}",
                extra={"user_id": user.pk, "message_id": message_id},
            )
            raise PermissionDeniedError("Access denied", error_code="NOT_AUTHOR")

        return message


def require_chat_member(
    chat_id_param: str = "chat_id",
    user_param: str = "user",
) -> Callable:
    """
    Decorator that requires user to be a member of the chat.

    Extracts user and chat_id from method kwargs, resolves the chat, and
    injects it as the _chat kwarg to avoid a second query.

    Args:
        chat_id_param: Name of the kwarg containing the chat ID
        user_param: Name of the kwarg containing user (default: "user")

    Raises:
        NotFoundError: With CHAT_NOT_FOUND if the chat is missing or hidden
        TypeError: If the decorated method is called without the kwargs

    Example:
        class MessageService(BaseService):
            @classmethod
            @require_chat_member()
            def send_message(cls, user, chat_id, content, _chat=None):
                ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            user = kwargs.get(user_param)
            chat_id = kwargs.get(chat_id_param)

            if user is None or chat_id is None:
                raise TypeError(
                    f"{func.__name__}() requires keyword arguments "
                    f"'{user_param}' and '{chat_id_param}'"
                )

            kwargs["_chat"] = ChatAuthorizationService.get_member_chat(user, chat_id)
            return func(*args, **kwargs)

        return wrapper

    return decorator
