"""
Client-side authentication state.

AuthSession holds the bearer token and user id of the logged-in user and
optionally mirrors them to a JSON file, so a restarted client resumes its
session. It is passed explicitly to the code that issues requests.

Lifecycle:
    load(path)       Startup: read the persisted copy, or start empty.
                     An expired token is discarded on load.
    login(...)       Store a fresh token and user id (memory and file).
    check_expiry()   Liveness poll: clear the session once the token expires.
    clear()          Logout: forget the token in memory and on disk.

The token signature is not verified here (the client does not hold the
signing key); only the exp claim is read.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import jwt

logger = logging.getLogger(__name__)


class AuthSession:
    """
    Token and user id of the current user.

    Attributes:
        token: Encoded bearer token, or None when logged out
        user_id: Id of the logged-in user, or None when logged out
        path: JSON file the session is mirrored to (None keeps it in memory)
    """

    def __init__(
        self,
        token: str | None = None,
        user_id: int | None = None,
        path: Path | None = None,
    ):
        self.token = token
        self.user_id = user_id
        self.path = path

    def __repr__(self) -> str:
        return f"AuthSession(user_id={self.user_id!r}, path={self.path!r})"

    @classmethod
    def load(cls, path: Path) -> "AuthSession":
        """
        Load the persisted session, or return an empty one bound to path.

        A missing or unreadable file yields an empty session. A stored token
        that has already expired is cleared, including its file.
        """
        session = cls(path=path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return session
        except (OSError, ValueError):
            logger.warning(f"Ignoring unreadable session file {path}")
            return session

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed session file {path}")
            return session

        session.token = data.get("token")
        session.user_id = data.get("userId")
        session.check_expiry()
        return session

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def expires_at(self) -> datetime | None:
        """Expiry read from the token's exp claim, or None if unreadable."""
        if self.token is None:
            return None
        try:
            claims = jwt.decode(self.token, options={"verify_signature": False})
        except jwt.InvalidTokenError:
            return None
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)):
            return None
        return datetime.fromtimestamp(exp, tz=timezone.utc)

    def is_expired(self, now: datetime | None = None) -> bool:
        """
        True when there is no token, it cannot be decoded, or it has expired.
        """
        expires_at = self.expires_at
        if expires_at is None:
            return True
        now = now or datetime.now(tz=timezone.utc)
        return now >= expires_at

    def login(self, token: str, user_id: int) -> None:
        """Store a freshly issued token and persist it."""
        self.token = token
        self.user_id = user_id
        self._save()

    def check_expiry(self, now: datetime | None = None) -> bool:
        """
        Clear the session if its token has expired.

        Returns:
            True if the session is still authenticated afterwards
        """
        if self.token is not None and self.is_expired(now):
            logger.info("Session token expired, logging out")
            self.clear()
        return self.is_authenticated

    def clear(self) -> None:
        """Forget the token and user id, in memory and on disk."""
        self.token = None
        self.user_id = None
        if self.path is not None:
            self.path.unlink(missing_ok=True)

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"token": self.token, "userId": self.user_id}),
            encoding="utf-8",
        )
