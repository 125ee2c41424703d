"""
Tests for AuthSession.

Covers the client-side session lifecycle:
- load: startup from the persisted copy, discarding expired tokens
- login: store and persist a token
- check_expiry: liveness poll clearing an expired session
- clear: logout from memory and disk

Dependencies:
    - freezegun for expiry checks
    - PyJWT to mint tokens with a chosen exp claim
"""

import json
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from freezegun import freeze_time

from client.session import AuthSession


def make_token(expires_at: datetime, user_id: int = 1) -> str:
    """Mint an HS256 token; the client never checks the signature."""
    return jwt.encode(
        {"id": user_id, "username": "alice", "exp": int(expires_at.timestamp())},
        "client-test-key",
        algorithm="HS256",
    )


NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_path(tmp_path):
    return tmp_path / "chat" / "session.json"


# =============================================================================
# TestLoad
# =============================================================================


class TestLoad:
    """Tests for AuthSession.load()."""

    def test_missing_file_gives_empty_session(self, session_path):
        """
        No persisted session means logged out.

        Why it matters: First start of a client must not fail.
        """
        session = AuthSession.load(session_path)

        assert session.token is None
        assert session.user_id is None
        assert session.path == session_path

    @freeze_time(NOW)
    def test_valid_token_is_restored(self, session_path):
        token = make_token(NOW + timedelta(hours=1))
        session_path.parent.mkdir(parents=True)
        session_path.write_text(json.dumps({"token": token, "userId": 7}))

        session = AuthSession.load(session_path)

        assert session.token == token
        assert session.user_id == 7
        assert session.is_authenticated

    @freeze_time(NOW)
    def test_expired_token_is_discarded_with_its_file(self, session_path):
        """
        An expired persisted token is cleared at startup.

        Why it matters: The client must not send a token the server will reject.
        """
        session_path.parent.mkdir(parents=True)
        session_path.write_text(
            json.dumps({"token": make_token(NOW - timedelta(seconds=1)), "userId": 7})
        )

        session = AuthSession.load(session_path)

        assert session.token is None
        assert session.user_id is None
        assert not session_path.exists()

    def test_unreadable_file_gives_empty_session(self, session_path):
        session_path.parent.mkdir(parents=True)
        session_path.write_text("{not json")

        session = AuthSession.load(session_path)

        assert not session.is_authenticated


# =============================================================================
# TestLoginAndClear
# =============================================================================


class TestLoginAndClear:
    """Tests for AuthSession.login() and AuthSession.clear()."""

    @freeze_time(NOW)
    def test_login_persists_token_and_user_id(self, session_path):
        token = make_token(NOW + timedelta(hours=24))
        session = AuthSession(path=session_path)

        session.login(token, 3)

        assert json.loads(session_path.read_text()) == {"token": token, "userId": 3}
        assert AuthSession.load(session_path).user_id == 3

    def test_login_without_path_stays_in_memory(self):
        session = AuthSession()

        session.login(make_token(datetime.now(tz=timezone.utc) + timedelta(hours=1)), 3)

        assert session.is_authenticated

    @freeze_time(NOW)
    def test_clear_removes_memory_and_file(self, session_path):
        """
        Logout forgets the token everywhere.

        Why it matters: A shared machine must not keep a usable token on disk.
        """
        session = AuthSession(path=session_path)
        session.login(make_token(NOW + timedelta(hours=1)), 3)

        session.clear()

        assert session.token is None
        assert session.user_id is None
        assert not session_path.exists()

    def test_clear_without_file_is_noop(self, session_path):
        session = AuthSession(path=session_path)

        session.clear()

        assert not session.is_authenticated


# =============================================================================
# TestExpiry
# =============================================================================


class TestExpiry:
    """Tests for expiry reading and the liveness poll."""

    def test_expires_at_reads_exp_claim(self):
        expires = NOW + timedelta(hours=24)
        session = AuthSession(token=make_token(expires))

        assert session.expires_at == expires

    def test_garbage_token_counts_as_expired(self):
        session = AuthSession(token="not-a-jwt")

        assert session.expires_at is None
        assert session.is_expired()

    def test_check_expiry_keeps_live_session(self):
        session = AuthSession(token=make_token(NOW + timedelta(hours=1)), user_id=1)

        with freeze_time(NOW):
            assert session.check_expiry() is True

        assert session.user_id == 1

    def test_check_expiry_clears_session_after_24_hours(self, session_path):
        """
        The poll logs the user out once the token's exp has passed.

        Why it matters: Tokens have no refresh; the client must re-authenticate.
        """
        session = AuthSession(path=session_path)
        with freeze_time(NOW):
            session.login(make_token(NOW + timedelta(hours=24)), 1)

        with freeze_time(NOW + timedelta(hours=24, seconds=1)):
            assert session.check_expiry() is False

        assert session.token is None
        assert not session_path.exists()

    def test_check_expiry_on_empty_session(self):
        assert AuthSession().check_expiry() is False
