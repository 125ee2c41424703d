"""
Chat system models.

This module defines the data models for the chat system:
- Chat: Titled conversation with a flat member set
- Message: A post in a chat, owned by its author

Design Decisions:
    - Membership is a plain many-to-many; every member has equal rights
    - Any member may rename the chat or add/remove any other member
    - Only the author may edit or delete a message, even after leaving the chat
    - Deleting a user deletes their memberships and their messages
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from chat.constants import CHAT_CONFIG
from core.models import BaseModel


class Chat(BaseModel):
    """
    A conversation between one or more users.

    The creator is always a member at creation time. Chats are never deleted
    through the API.

    Fields:
        title: Display title, never empty
        members: Users who can read and post in this chat
        updated_at: Bumped on rename, membership change and new message,
            so listings ordered by it show the most active chats first

    Relationships:
        messages: All Message records for this chat
    """

    title = models.CharField(
        max_length=CHAT_CONFIG.MAX_TITLE_LENGTH,
        help_text="Chat title",
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="chats",
        help_text="Users who belong to this chat",
    )

    class Meta:
        ordering = ["-updated_at", "-id"]

    def __str__(self):
        return f"Chat {self.pk}: {self.title}"


class Message(BaseModel):
    """
    Individual message within a chat.

    Fields:
        chat: Chat the message was posted in
        author: User who wrote the message
        content: Message text, never empty
    """

    chat = models.ForeignKey(
        Chat,
        on_delete=models.CASCADE,
        related_name="messages",
        help_text="Chat this message belongs to",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="messages",
        help_text="User who wrote this message",
    )
    content = models.TextField(help_text="Message text")

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(
                fields=["chat", "-created_at"],
                name="chat_message_chat_created_idx",
            ),
        ]

    def __str__(self):
        return f"Message {self.pk} in chat {self.chat_id}"
