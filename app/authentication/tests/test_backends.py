"""
Tests for BearerTokenAuthentication.
"""

import pytest
from rest_framework import exceptions
from rest_framework.test import APIRequestFactory

from authentication.backends import BearerTokenAuthentication
from authentication.services import AuthService


def request_with(authorization=None):
    headers = {}
    if authorization is not None:
        headers["HTTP_AUTHORIZATION"] = authorization
    return APIRequestFactory().get("/users/profile", **headers)


class TestBearerTokenAuthentication:
    """Tests for BearerTokenAuthentication.authenticate()."""

    def test_valid_token_authenticates_user(self, alice):
        token = AuthService.issue_token(alice)

        user, raw = BearerTokenAuthentication().authenticate(
            request_with(f"Bearer {token}")
        )

        assert user == alice
        assert raw.decode() == token

    def test_missing_header_is_anonymous(self, db):
        assert BearerTokenAuthentication().authenticate(request_with()) is None

    def test_other_scheme_is_ignored(self, db):
        assert BearerTokenAuthentication().authenticate(request_with("Basic abc")) is None

    def test_invalid_token_fails(self, db):
        with pytest.raises(exceptions.AuthenticationFailed) as exc_info:
            BearerTokenAuthentication().authenticate(request_with("Bearer garbage"))

        assert exc_info.value.detail == "Token is invalid or expired"

    def test_authenticate_header_advertises_bearer(self):
        header = BearerTokenAuthentication().authenticate_header(request_with())

        assert header.startswith("Bearer")
