"""
Serializers for chat API.

This module provides serializers for the chat system:
- Chat serializers (read, create, rename, membership)
- Message serializers (read, create, edit)

Serializer Hierarchy:
    ChatSerializer: Chat with its member summaries
    ChatCreateSerializer: Title and initial usernames
    ChatRenameSerializer: New title for an existing chat
    ChatMembershipSerializer: Add/remove one member by username

    MessageAuthorSerializer: Minimal author info embedded in messages
    MessageSerializer: Message with author info
    MessageCreateSerializer: Post a new message
    MessageUpdateSerializer: Replace message content

Design Decisions:
    - Read and write serializers are separate for clarity
    - Write serializers are closed schemas (StrictFieldsMixin)
    - Keys are camelCase on the wire; sources map them to model fields
"""

from __future__ import annotations

from rest_framework import serializers

from authentication.models import User
from authentication.serializers import UserSummarySerializer
from chat.constants import CHAT_CONFIG, MESSAGE_CONFIG
from chat.models import Chat, Message
from core.serializer_mixins import StrictFieldsMixin


# =============================================================================
# Chat Serializers
# =============================================================================


class ChatSerializer(serializers.ModelSerializer):
    """
    Chat with its members.

    Used by chat list, create, rename and detail responses.
    """

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    users = serializers.SerializerMethodField()

    class Meta:
        model = Chat
        fields = ["id", "title", "createdAt", "updatedAt", "users"]
        read_only_fields = fields

    def get_users(self, obj: Chat) -> list:
        # Sort in Python so a prefetched member list is reused
        members = sorted(obj.members.all(), key=lambda user: user.pk)
        return UserSummarySerializer(members, many=True).data


class ChatCreateSerializer(StrictFieldsMixin, serializers.Serializer):
    """POST /chats/create body."""

    title = serializers.CharField(max_length=CHAT_CONFIG.MAX_TITLE_LENGTH)
    usernames = serializers.ListField(
        child=serializers.CharField(max_length=150),
        min_length=1,
    )


class ChatRenameSerializer(StrictFieldsMixin, serializers.Serializer):
    """PUT /chats/rename body."""

    chatId = serializers.IntegerField(source="chat_id")
    newTitle = serializers.CharField(
        source="new_title", max_length=CHAT_CONFIG.MAX_TITLE_LENGTH
    )


class ChatMembershipSerializer(StrictFieldsMixin, serializers.Serializer):
    """PUT /chats/addUser and PUT /chats/removeUser body."""

    chatId = serializers.IntegerField(source="chat_id")
    username = serializers.CharField(max_length=150)


# =============================================================================
# Message Serializers
# =============================================================================


class MessageAuthorSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username"]
        read_only_fields = fields


class MessageSerializer(serializers.ModelSerializer):
    """
    Serializer for reading messages.

    userId and user both describe the author; user carries the username
    so clients can render history without a member lookup.
    """

    chatId = serializers.IntegerField(source="chat_id", read_only=True)
    userId = serializers.IntegerField(source="author_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    user = MessageAuthorSerializer(source="author", read_only=True)

    class Meta:
        model = Message
        fields = ["id", "content", "chatId", "userId", "createdAt", "updatedAt", "user"]
        read_only_fields = fields


class MessageCreateSerializer(StrictFieldsMixin, serializers.Serializer):
    """POST /messages/create body."""

    chatId = serializers.IntegerField(source="chat_id")
    content = serializers.CharField(
        max_length=MESSAGE_CONFIG.MAX_CONTENT_LENGTH, trim_whitespace=False
    )


class MessageUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """PUT /messages/<id> body."""

    content = serializers.CharField(
        max_length=MESSAGE_CONFIG.MAX_CONTENT_LENGTH, trim_whitespace=False
    )
