"""
Unit tests for UserService and OrganiserService.

Tests sign-in provisioning, role changes, search and the organiser roster.
"""

import pytest

from hackhub.config.settings import get_settings
from hackhub.models import User
from hackhub.services.exceptions import UserNotFoundError, ValidationError
from hackhub.services.organiser_service import OrganiserService
from hackhub.services.user_service import UserService


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def user_service(test_db_session, app_logger):
    """Create a UserService instance for testing."""
    return UserService(test_db_session, app_logger)


@pytest.fixture
def organiser_service(test_db_session, app_logger):
    """Create an OrganiserService instance for testing."""
    return OrganiserService(test_db_session, app_logger)


@pytest.fixture
def admin_emails(monkeypatch):
    """Configure ADMIN_EMAILS for the duration of a test."""
    def _set(value):
        monkeypatch.setenv("ADMIN_EMAILS", value)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


# ============================================================================
# Sign-in Tests
# ============================================================================


class TestUserServiceSignIn:
    """Tests for sign-in provisioning."""

    def test_first_sign_in_creates_user(self, user_service, ctx, test_db_session):
        """Test a new email creates a user without roles."""
        user = user_service.sign_in(
            ctx, email="Ada@Example.com", name="Ada", image="https://img/ada.png",
            oauth_subject="sub-1", email_verified=True,
        )

        assert user.email == "ada@example.com"
        assert user.name == "Ada"
        assert user.oauth_subject == "sub-1"
        assert user.email_verified is not None
        assert user.last_login_at is not None
        assert user.is_admin is False
        assert user.is_judge is False
        assert test_db_session.query(User).count() == 1

    def test_second_sign_in_refreshes_profile(self, user_service, ctx, test_db_session):
        """Test a returning user keeps the id and gets a new name."""
        first = user_service.sign_in(ctx, email="ada@example.com", name="Ada")

        second = user_service.sign_in(ctx, email="ADA@example.com", name="Ada Lovelace")

        assert second.id == first.id
        assert second.name == "Ada Lovelace"
        assert test_db_session.query(User).count() == 1

    def test_sign_in_keeps_name_when_claim_missing(self, user_service, ctx):
        """Test an empty name claim does not erase the stored name."""
        user_service.sign_in(ctx, email="ada@example.com", name="Ada")

        user = user_service.sign_in(ctx, email="ada@example.com", name=None)

        assert user.name == "Ada"

    def test_sign_in_requires_email(self, user_service, ctx):
        """Test a blank email is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            user_service.sign_in(ctx, email="  ")

        assert exc_info.value.field == "email"

    def test_admin_email_granted_on_sign_in(self, user_service, ctx, admin_emails):
        """Test listed emails become admins on first sign-in."""
        admin_emails("root@example.com, boss@example.com")

        admin = user_service.sign_in(ctx, email="Boss@example.com")
        regular = user_service.sign_in(ctx, email="someone@example.com")

        assert admin.is_admin is True
        assert regular.is_admin is False

    def test_admin_email_promotes_existing_user(self, user_service, ctx, sample_user,
                                                admin_emails):
        """Test an existing user is promoted once their email is listed."""
        existing = sample_user(email="late@example.com")
        admin_emails("late@example.com")

        user = user_service.sign_in(ctx, email="late@example.com")

        assert user.id == existing.id
        assert user.is_admin is True


# ============================================================================
# Profile and Search Tests
# ============================================================================


class TestUserServiceLookup:
    """Tests for profile lookup and search."""

    def test_get_user_profile(self, user_service, ctx, sample_user):
        """Test the profile of an existing user."""
        user = sample_user(name="Grace")

        assert user_service.get_user_profile(ctx, user.id).name == "Grace"

    def test_get_user_profile_unknown(self, user_service, ctx, app_logger):
        """Test an unknown user raises not found and logs a warning."""
        with pytest.raises(UserNotFoundError):
            user_service.get_user_profile(ctx, "missing")

        assert app_logger.levels() == ["warn"]

    def test_search_by_name_and_email(self, user_service, sample_user):
        """Test search matches names and emails, ignoring case."""
        sample_user(email="grace@navy.mil", name="Grace Hopper")
        sample_user(email="ada@example.com", name="Ada Lovelace")
        sample_user(email="linus@example.com", name="Linus")

        assert [u.name for u in user_service.search_users("HOPPER")] == ["Grace Hopper"]
        assert [u.name for u in user_service.search_users("example.com")] == [
            "Ada Lovelace", "Linus",
        ]

    def test_search_limit(self, user_service, sample_user):
        """Test search honours the limit."""
        for i in range(5):
            sample_user(name=f"Tester {i}")

        assert len(user_service.search_users("tester", limit=3)) == 3

    def test_search_empty_query(self, user_service, sample_user):
        """Test a blank query returns nothing."""
        sample_user()

        assert user_service.search_users("   ") == []


# ============================================================================
# Role Tests
# ============================================================================


class TestUserServiceRoles:
    """Tests for judge, admin and organiser role changes."""

    def test_set_judge_status(self, user_service, ctx, sample_user):
        """Test granting and revoking the judge role."""
        user = sample_user()

        assert user_service.set_judge_status(ctx, user.id, True).is_judge is True
        assert user_service.set_judge_status(ctx, user.id, False).is_judge is False

    def test_set_admin_status(self, user_service, ctx, sample_user):
        """Test granting the admin role."""
        user = sample_user()

        assert user_service.set_admin_status(ctx, user.id, True).is_admin is True

    def test_set_role_unknown_user(self, user_service, ctx, app_logger):
        """Test a role change for an unknown user raises not found."""
        with pytest.raises(UserNotFoundError):
            user_service.set_judge_status(ctx, "missing", True)

        assert app_logger.levels() == ["info", "warn"]


class TestOrganiserService:
    """Tests for the organiser roster."""

    def test_organiser_roster(self, organiser_service, ctx, sample_user):
        """Test the roster lists only organisers, by name."""
        sample_user(name="Zed", is_organiser=True)
        amy = sample_user(name="Amy")
        sample_user(name="Bob")

        organiser_service.set_organiser_status(ctx, amy.id, True)

        assert [u.name for u in organiser_service.get_all_organisers()] == ["Amy", "Zed"]

    def test_revoke_organiser(self, organiser_service, ctx, sample_user):
        """Test revoking removes the user from the roster."""
        user = sample_user(is_organiser=True)

        organiser_service.set_organiser_status(ctx, user.id, False)

        assert organiser_service.get_all_organisers() == []

    def test_set_organiser_unknown_user(self, organiser_service, ctx):
        """Test an unknown user raises not found."""
        with pytest.raises(UserNotFoundError):
            organiser_service.set_organiser_status(ctx, "missing", True)
