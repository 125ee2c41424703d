"""
Chat system service layer.

This module provides the business logic for the chat system, encapsulating
all operations on chats, membership, and messages.

Services:
    ChatService: Chat lifecycle and membership (create, rename, add, remove)
    MessageService: Message operations (history, send, edit, delete)

Design Principles:
    - Services are stateless (use class methods)
    - Expected failures raise core.exceptions
    - Access rules live in chat.authorization
    - Membership changes, renames and new messages bump Chat.updated_at

Usage:
    from chat.services import ChatService, MessageService

    # Create a chat; the creator is always a member
    chat = ChatService.create_chat(creator=user, title="Team", usernames=["bob"])

    # Send a message
    message = MessageService.send_message(user=user, chat_id=chat.id, content="hi")

    # Read a page of history, oldest first within the page
    page = MessageService.list_messages(user=user, chat_id=chat.id, page_index=0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from authentication.models import User
from chat.authorization import ChatAuthorizationService, require_chat_member
from chat.constants import CHAT_CONFIG, MESSAGE_CONFIG
from chat.models import Chat, Message
from core.exceptions import NotFoundError, ValidationError
from core.pagination import PageWindow, paginate_queryset
from core.services import BaseService

if TYPE_CHECKING:
    from collections.abc import Iterable


USER_NOT_FOUND_MESSAGE = "User not found"


@dataclass(frozen=True)
class ChatPage:
    """One page of a user's chat list."""

    chats: list[Chat]
    window: PageWindow

    @property
    def pages(self) -> int:
        return self.window.pages


@dataclass(frozen=True)
class MessagePage:
    """One page of a chat's history, in reading (oldest-first) order."""

    chat: Chat
    messages: list[Message]
    window: PageWindow

    @property
    def pages(self) -> int:
        return self.window.pages


class ChatService(BaseService):
    """
    Service for chat lifecycle and membership.

    Governance is flat: any member may rename the chat and add or remove any
    other member, including themselves.
    """

    @classmethod
    def list_chats(
        cls, user: User, page_index: int, page_size: int = CHAT_CONFIG.PAGE_SIZE
    ) -> ChatPage:
        """
        Return one page of the user's chats, most recently updated first.

        Members are prefetched for serialization.
        """
        queryset = ChatAuthorizationService.member_chats(user).prefetch_related(
            "members"
        )
        chats, window = paginate_queryset(queryset, page_index, page_size)
        return ChatPage(chats=chats, window=window)

    @classmethod
    def create_chat(cls, creator: User, title: str, usernames: Iterable[str]) -> Chat:
        """
        Create a chat with the creator and the named users as members.

        Duplicate usernames are collapsed, and the creator is added even when
        absent from the list.

        Args:
            creator: User creating the chat
            title: Chat title (non-empty)
            usernames: Usernames of the initial members

        Returns:
            The new Chat

        Raises:
            ValidationError: If the title is blank or any username is unknown
        """
        title = title.strip()
        if not title:
            raise ValidationError(
                "Validation failed",
                errors=[{"field": "title", "message": "This field may not be blank."}],
            )

        wanted = set(usernames)
        found = list(User.objects.filter(username__in=wanted))
        if len(found) != len(wanted):
            raise ValidationError(
                "One or more usernames are invalid", error_code="UNKNOWN_USERNAME"
            )

        members = {user.pk: user for user in found}
        members[creator.pk] = creator

        with cls.atomic():
            chat = Chat.objects.create(title=title)
            chat.members.add(*members.values())

        cls.get_logger().info(
            f"User {creator.pk} created chat {chat.pk} with {len(members)} members",
            extra={"user_id": creator.pk, "chat_id": chat.pk},
        )
        return chat

    @classmethod
    @require_chat_member()
    def get_chat(cls, *, user: User, chat_id: int, _chat: Chat | None = None) -> Chat:
        """
        Return a chat the user belongs to.

        Raises:
            NotFoundError: If the chat is missing or the user is not a member
        """
        return _chat

    @classmethod
    @require_chat_member()
    def rename_chat(
        cls, *, user: User, chat_id: int, new_title: str, _chat: Chat | None = None
    ) -> Chat:
        """
        Change the chat title.

        Raises:
            NotFoundError: If the chat is missing or the user is not a member
            ValidationError: If the new title is blank
        """
        new_title = new_title.strip()
        if not new_title:
            raise ValidationError(
                "Validation failed",
                errors=[
                    {"field": "newTitle", "message": "This field may not be blank."}
                ],
            )

        _chat.title = new_title
        _chat.save(update_fields=["title", "updated_at"])

        cls.get_logger().info(
            f"User {user.pk} renamed chat {_chat.pk}",
            extra={"user_id": user.pk, "chat_id": _chat.pk},
        )
        return _chat

    @classmethod
    @require_chat_member()
    def add_member(
        cls, *, user: User, chat_id: int, username: str, _chat: Chat | None = None
    ) -> User:
        """
        Add a user to the chat. Adding an existing member is a no-op.

        Returns:
            The added user

        Raises:
            NotFoundError: If the chat is hidden or the username is unknown
        """
        target = User.objects.filter(username=username).first()
        if target is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE, error_code="USER_NOT_FOUND")

        with cls.atomic():
            _chat.members.add(target)
            _chat.touch()

        cls.get_logger().info(
            f"User {user.pk} added user {target.pk} to chat {_chat.pk}",
            extra={"user_id": user.pk, "chat_id": _chat.pk},
        )
        return target

    @classmethod
    @require_chat_member()
    def remove_member(
        cls, *, user: User, chat_id: int, username: str, _chat: Chat | None = None
    ) -> User:
        """
        Remove a member from the chat.

        Removing oneself or the last member is allowed. The chat and its
        messages are kept.

        Returns:
            The removed user

        Raises:
            NotFoundError: If the chat is hidden or the username is not a member
        """
        target = _chat.members.filter(username=username).first()
        if target is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE, error_code="USER_NOT_FOUND")

        with cls.atomic():
            _chat.members.remove(target)
            _chat.touch()

        cls.get_logger().info(
            f"User {user.pk} removed user {target.pk} from chat {_chat.pk}",
            extra={"user_id": user.pk, "chat_id": _chat.pk},
        )
        return target

    @classmethod
    @require_chat_member()
    def get_members(
        cls, *, user: User, chat_id: int, _chat: Chat | None = None
    ) -> list[User]:
        """Members of a chat the user belongs to, in insertion order."""
        return list(_chat.members.order_by("id"))


class MessageService(BaseService):
    """
    Service for message operations.

    Posting requires membership. Editing and deleting require authorship
    only, so an author who left the chat can still manage their messages.
    """

    @classmethod
    def _clean_content(cls, content: str) -> str:
        if len(content.strip()) < MESSAGE_CONFIG.MIN_CONTENT_LENGTH:
            raise ValidationError(
                "Validation failed",
                errors=[{"field": "content", "message": "This field may not be blank."}],
            )
        if len(content) > MESSAGE_CONFIG.MAX_CONTENT_LENGTH:
            raise ValidationError(
                "Validation failed",
                errors=[
                    {
                        "field": "content",
                        "message": (
                            f"Ensure this field has no more than "
                            f"{MESSAGE_CONFIG.MAX_CONTENT_LENGTH} characters."
                        ),
                    }
                ],
            )
        return content

    @classmethod
    @require_chat_member()
    def list_messages(
        cls,
        *,
        user: User,
        chat_id: int,
        page_index: int,
        page_size: int = MESSAGE_CONFIG.PAGE_SIZE,
        _chat: Chat | None = None,
    ) -> MessagePage:
        """
        Return one page of a chat's history.

        Page boundaries are computed from the newest message: page 0 holds
        the latest messages. Within the page, messages are returned oldest
        first.

        Raises:
            NotFoundError: If the chat is missing or the user is not a member
        """
        queryset = (
            Message.objects.filter(chat=_chat)
            .select_related("author")
            .order_by("-created_at", "-id")
        )
        newest_first, window = paginate_queryset(queryset, page_index, page_size)
        return MessagePage(
            chat=_chat, messages=list(reversed(newest_first)), window=window
        )

    @classmethod
    @require_chat_member()
    def send_message(
        cls, *, user: User, chat_id: int, content: str, _chat: Chat | None = None
    ) -> Message:
        """
        Post a message to a chat the user belongs to.

        Raises:
            NotFoundError: If the chat is missing or the user is not a member
            ValidationError: If the content is blank or too long
        """
        content = cls._clean_content(content)

        with cls.atomic():
            message = Message.objects.create(chat=_chat, author=user, content=content)
            _chat.touch()

        cls.get_logger().debug(
            f"User {user.pk} sent message {message.pk} to chat {_chat.pk}"
        )
        return message

    @classmethod
    def edit_message(cls, *, user: User, message_id: int, content: str) -> Message:
        """
        Replace the content of a message the user wrote.

        Raises:
            NotFoundError: If the message does not exist
            PermissionDeniedError: If the user is not the author
            ValidationError: If the content is blank or too long
        """
        message = ChatAuthorizationService.get_authored_message(user, message_id)
        message.content = cls._clean_content(content)
        message.save(update_fields=["content", "updated_at"])

        cls.get_logger().info(
            f"User {user.pk} edited message {message.pk}",
            extra={"user_id": user.pk, "message_id": message.pk},
        )
        return message

    @classmethod
    def delete_message(cls, *, user: User, message_id: int) -> None:
        """
        Delete a message the user wrote.

        Raises:
            NotFoundError: If the message does not exist
            PermissionDeniedError: If the user is not the author
        """
        message = ChatAuthorizationService.get_authored_message(user, message_id)
        message.delete()

        cls.get_logger().info(
            f"User {user.pk} deleted message {message_id}",
            extra={"user_id": user.pk, "message_id": message_id},
        )
