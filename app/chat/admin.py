"""
Django admin configuration for chat models.

Provides admin interfaces for:
- Chat management
- Message moderation
"""

from django.contrib import admin

from chat.models import Chat, Message


class MessageInline(admin.TabularInline):
    """Inline display of messages in chat admin."""

    model = Message
    extra = 0
    readonly_fields = ["author", "created_at", "updated_at"]
    raw_id_fields = ["author"]


@admin.register(Chat)
class ChatAdmin(admin.ModelAdmin):
    """Admin interface for Chat model."""

    list_display = ["id", "title", "created_at", "updated_at"]
    search_fields = ["title"]
    filter_horizontal = ["members"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [MessageInline]


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    """Admin interface for Message model."""

    list_display = ["id", "chat", "author", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["content", "author__username"]
    raw_id_fields = ["chat", "author"]
    readonly_fields = ["created_at", "updated_at"]
