"""
URL configuration for chat API.

URL Structure:
    Chats:
        /chats/page/{pageIndex}          GET
        /chats/create                    POST
        /chats/rename                    PUT
        /chats/addUser                   PUT
        /chats/removeUser                PUT
        /chats/{chatId}/users            GET
        /chats/{chatId}                  GET

    Messages:
        /messages/chat/{chatId}/{page}   GET
        /messages/create                 POST
        /messages/{messageId}            PUT, DELETE

Mounted at the site root in the main URL configuration. Page indices use
the signed page_index converter registered in config/urls.py.
"""

from django.urls import include, path

from chat.views import (
    ChatAddUserView,
    ChatCreateView,
    ChatDetailView,
    ChatListView,
    ChatMembersView,
    ChatRemoveUserView,
    ChatRenameView,
    MessageCreateView,
    MessageDetailView,
    MessageListView,
)

app_name = "chat"

chat_patterns = [
    path("page/<page_index:page_index>", ChatListView.as_view(), name="chat-list"),
    path("create", ChatCreateView.as_view(), name="chat-create"),
    path("rename", ChatRenameView.as_view(), name="chat-rename"),
    path("addUser", ChatAddUserView.as_view(), name="chat-add-user"),
    path("removeUser", ChatRemoveUserView.as_view(), name="chat-remove-user"),
    path("<int:chat_id>/users", ChatMembersView.as_view(), name="chat-members"),
    path("<int:chat_id>", ChatDetailView.as_view(), name="chat-detail"),
]

message_patterns = [
    path(
        "chat/<int:chat_id>/<page_index:page>",
        MessageListView.as_view(),
        name="message-list",
    ),
    path("create", MessageCreateView.as_view(), name="message-create"),
    path("<int:message_id>", MessageDetailView.as_view(), name="message-detail"),
]

urlpatterns = [
    path("chats/", include(chat_patterns)),
    path("messages/", include(message_patterns)),
]
