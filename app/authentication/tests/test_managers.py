"""
Tests for UserManager.
"""

import pytest

from authentication.models import User


class TestCreateUser:
    """Tests for UserManager.create_user()."""

    def test_creates_regular_user(self, db):
        user = User.objects.create_user(
            username="alice", email="a@X.COM", password="secret1", name="Alice"
        )

        assert user.email == "a@x.com"
        assert user.check_password("secret1")
        assert not user.is_staff
        assert not user.is_superuser

    def test_without_password_is_unusable(self, db):
        user = User.objects.create_user(username="alice", email="a@x.com")

        assert not user.has_usable_password()

    @pytest.mark.parametrize(
        "username,email", [("", "a@x.com"), ("alice", "")]
    )
    def test_username_and_email_required(self, db, username, email):
        with pytest.raises(ValueError):
            User.objects.create_user(username=username, email=email)


class TestCreateSuperuser:
    """Tests for UserManager.create_superuser()."""

    def test_creates_superuser(self, db):
        user = User.objects.create_superuser(
            username="admin", email="admin@x.com", password="AdminPass123!"
        )

        assert user.is_staff
        assert user.is_superuser

    def test_rejects_non_staff_superuser(self, db):
        with pytest.raises(ValueError):
            User.objects.create_superuser(
                username="admin", email="admin@x.com", is_staff=False
            )
