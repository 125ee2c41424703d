"""
URL configuration for the chat service.

The `urlpatterns` list routes URLs to views. This is the root URL configuration
that includes all app-specific routes.

URL Structure:
    /                              - ReDoc API documentation
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (for load balancers, Docker)
    /schema/                       - OpenAPI schema (YAML)
    /users/                        - Account endpoints (authentication app)
        register                   - Create account (public)
        login                      - Log in (public)
        profile                    - Current user
        update                     - Update profile
        changePassword             - Change password
        delete                     - Delete account
        list/{page}                - User directory
        search/{query}             - User search
    /chats/                        - Chat endpoints (chat app)
        page/{pageIndex}           - Chat list
        create                     - Create chat
        rename                     - Rename chat
        addUser                    - Add member
        removeUser                 - Remove member
        {chatId}/users             - Member list
        {chatId}                   - Chat detail
    /messages/                     - Message endpoints (chat app)
        chat/{chatId}/{page}       - Message history
        create                     - Send message
        {messageId}                - Edit (PUT) / delete (DELETE)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path, register_converter
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.converters import PageIndexConverter
from core.views import health_check, not_found

# Must be registered before the app URLconfs below are imported
register_converter(PageIndexConverter, "page_index")

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # API
    path("users/", include("authentication.urls")),
    path("", include("chat.urls")),
]

handler404 = not_found

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "Chat Admin"
admin.site.site_title = "Chat Admin Portal"
admin.site.index_title = "Welcome to the Chat Admin Portal"
