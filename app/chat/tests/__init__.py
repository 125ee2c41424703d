"""
Tests for chat app.

This package contains test modules for:
- test_authorization.py: Membership and authorship rules
- test_services.py: ChatService and MessageService tests
- test_views.py: /chats/ and /messages/ API endpoint tests
- test_integration.py: Full user journeys over HTTP

Usage:
    pytest chat/tests/
    pytest chat/tests/test_views.py
"""
