"""
Chat application configuration.

This app provides the chat system with:
- Titled chats with a flat member set
- Paginated message history
- Author-only message editing and deletion
"""

from django.apps import AppConfig


class ChatConfig(AppConfig):
    """Configuration for the chat application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "chat"
    verbose_name = "Chat"
