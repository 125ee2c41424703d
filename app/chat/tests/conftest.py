"""
Test configuration and fixtures for chat tests.

This module provides:
- User fixtures (alice, bob, carol, outsider)
- A chat shared by alice and bob
- API client helpers for authenticated requests

Usage:
    def test_example(team_chat, alice_client):
        response = alice_client.get(f"/chats/{team_chat.id}")
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient

from authentication.services import AuthService
from authentication.tests.factories import UserFactory
from chat.tests.factories import ChatFactory


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def alice(db):
    return UserFactory(email="a@x.com", username="alice", name="Alice")


@pytest.fixture
def bob(db):
    return UserFactory(email="b@x.com", username="bob", name="Bob")


@pytest.fixture
def carol(db):
    return UserFactory(email="c@x.com", username="carol", name="Carol")


@pytest.fixture
def outsider(db):
    """A user who is not a member of any test chat."""
    return UserFactory(username="outsider")


# =============================================================================
# Chat Fixtures
# =============================================================================


@pytest.fixture
def team_chat(alice, bob):
    """Chat titled "Team" with alice and bob as members."""
    return ChatFactory(title="Team", members=[alice, bob])


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def client_for(db):
    """
    Factory to create a bearer-authenticated client for any user.

    Usage:
        def test_example(client_for, bob):
            response = client_for(bob).get("/chats/page/0")
    """

    def _make_client(user):
        client = APIClient()
        client.credentials(
            HTTP_AUTHORIZATION=f"Bearer {AuthService.issue_token(user)}"
        )
        return client

    return _make_client


@pytest.fixture
def alice_client(client_for, alice):
    return client_for(alice)


@pytest.fixture
def bob_client(client_for, bob):
    return client_for(bob)


@pytest.fixture
def outsider_client(client_for, outsider):
    return client_for(outsider)


@pytest.fixture
def anonymous_client():
    """Client without credentials."""
    return APIClient()
