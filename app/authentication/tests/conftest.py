"""
Test configuration and fixtures for authentication tests.

This module provides:
- Reusable user fixtures
- API client helpers for authenticated requests

Usage:
    def test_example(user, authenticated_client):
        response = authenticated_client.get("/users/profile")
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient

from authentication.models import User
from authentication.services import AuthService
from authentication.tests.factories import UserFactory


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def user(db):
    """Create a basic active user."""
    return UserFactory()


@pytest.fixture
def alice(db):
    """Alice with a known email, username and password."""
    return UserFactory(
        email="a@x.com", username="alice", name="Alice", password="secret1"
    )


@pytest.fixture
def bob(db):
    """Bob with a known email, username and password."""
    return UserFactory(email="b@x.com", username="bob", name="Bob", password="secret2")


@pytest.fixture
def superuser(db):
    """Create a superuser with admin privileges."""
    return User.objects.create_superuser(
        username="admin", email="admin@example.com", password="AdminPass123!"
    )


@pytest.fixture
def deactivated_user(db):
    """Create a deactivated user (is_active=False)."""
    return UserFactory(is_active=False)


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client for public endpoints."""
    return APIClient()


@pytest.fixture
def authenticated_client(user):
    """
    API client authenticated with a bearer token for the default user fixture.

    Use this for tests that need a logged-in user.
    """
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {AuthService.issue_token(user)}")
    return client


@pytest.fixture
def authenticated_client_factory(db):
    """
    Factory to create authenticated clients for any user.

    Usage:
        def test_example(authenticated_client_factory, some_user):
            client = authenticated_client_factory(some_user)
            response = client.get("/users/profile")
    """

    def _make_client(user):
        client = APIClient()
        client.credentials(
            HTTP_AUTHORIZATION=f"Bearer {AuthService.issue_token(user)}"
        )
        return client

    return _make_client
