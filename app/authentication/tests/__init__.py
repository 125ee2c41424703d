"""
Tests for authentication app.

This package contains test modules for:
- test_services.py: AuthService tests (registration, login, tokens, profile)
- test_views.py: /users/ API endpoint tests

Usage:
    pytest authentication/tests/
    pytest authentication/tests/test_views.py
"""
