"""
Unit tests for AuthService.

Tests OAuth callback handling, user provisioning on sign-in and session
management.
"""

import asyncio
import pytest
from unittest.mock import AsyncMock, Mock, patch

from hackhub.models import User
from hackhub.services.auth_service import AuthService
from hackhub.services.exceptions import ValidationError


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def auth_service(test_db_session, app_logger):
    """Create an AuthService instance for testing."""
    return AuthService(test_db_session, app_logger)


@pytest.fixture
def mock_request():
    """Create a mock Starlette request with session."""
    request = Mock()
    request.session = {}
    # Simulate session middleware being installed
    request.scope = {"session": request.session}
    return request


def run_callback(auth_service, request, ctx, token=None, user_info=None, error=None):
    """Run handle_callback with the provider calls patched."""
    fetch = AsyncMock(return_value=token or {"access_token": "t"}, side_effect=error)
    info = AsyncMock(return_value=user_info or {})
    with patch("hackhub.services.auth_service.fetch_token", fetch), \
            patch("hackhub.services.auth_service.get_user_info", info):
        return asyncio.run(auth_service.handle_callback(request, ctx))


# ============================================================================
# Callback Tests
# ============================================================================


class TestAuthServiceCallback:
    """Tests for the OAuth callback."""

    def test_callback_creates_user(self, auth_service, mock_request, ctx, test_db_session):
        """Test a first sign-in provisions the user from the claims."""
        result = run_callback(
            auth_service, mock_request, ctx,
            user_info={
                "email": "ada@example.com",
                "name": "Ada",
                "picture": "https://img/ada.png",
                "sub": "google-123",
                "email_verified": True,
            },
        )

        assert result.success is True
        assert result.user.email == "ada@example.com"
        assert result.user.oauth_subject == "google-123"
        assert test_db_session.query(User).count() == 1

    def test_callback_existing_user(self, auth_service, mock_request, ctx, sample_user):
        """Test a returning user is matched by email."""
        existing = sample_user(email="ada@example.com")

        result = run_callback(
            auth_service, mock_request, ctx, user_info={"email": "ADA@example.com"}
        )

        assert result.success is True
        assert result.user.id == existing.id

    def test_callback_without_email(self, auth_service, mock_request, ctx, app_logger):
        """Test claims without an email are rejected and audited."""
        result = run_callback(auth_service, mock_request, ctx, user_info={"name": "Anon"})

        assert result.success is False
        assert result.error_code == "no_email"
        assert app_logger.messages("warn") == ["Sign-in failed"]
        assert app_logger.entries[-1]["meta"] == {"reason": "no_email"}

    def test_callback_provider_error(self, auth_service, mock_request, ctx):
        """Test a failed token exchange is reported, not raised."""
        result = run_callback(
            auth_service, mock_request, ctx, error=RuntimeError("invalid_grant")
        )

        assert result.success is False
        assert result.error_code == "callback_error"
        assert "invalid_grant" not in result.error


# ============================================================================
# Session Tests
# ============================================================================


class TestAuthServiceSession:
    """Tests for session management."""

    def test_create_session(self, auth_service, sample_user, mock_request):
        """Test session stores the user id and email."""
        user = sample_user(email="ada@example.com")

        auth_service.create_session(mock_request, user)

        assert mock_request.session["user_id"] == user.id
        assert mock_request.session["email"] == "ada@example.com"
        assert "authenticated_at" in mock_request.session

    def test_create_session_without_middleware(self, auth_service, sample_user):
        """Test a request without session support raises."""
        request = Mock()
        request.scope = {}

        with pytest.raises(RuntimeError):
            auth_service.create_session(request, sample_user())

    def test_clear_session(self, auth_service, mock_request):
        """Test logout empties the session."""
        mock_request.session.update({"user_id": "u1", "email": "a@example.com"})

        auth_service.clear_session(mock_request)

        assert mock_request.session == {}

    def test_get_session_user(self, auth_service, sample_user, mock_request):
        """Test the session user is loaded from the database."""
        user = sample_user()
        mock_request.session["user_id"] = user.id

        assert auth_service.get_session_user(mock_request).id == user.id

    def test_get_session_user_deleted(self, auth_service, mock_request):
        """Test a session pointing at a missing user is cleared."""
        mock_request.session["user_id"] = "gone"

        assert auth_service.get_session_user(mock_request) is None
        assert mock_request.session == {}


class TestAuthServiceLogin:
    """Tests for starting the login flow."""

    def test_login_requires_configured_provider(self, auth_service, mock_request):
        """Test login is refused when Google sign-in is disabled."""
        with patch("hackhub.services.auth_service.is_provider_configured", return_value=False):
            with pytest.raises(ValidationError) as exc_info:
                asyncio.run(auth_service.initiate_login(mock_request))

        assert exc_info.value.field == "provider"

    def test_login_returns_authorization_url(self, auth_service, mock_request):
        """Test the consent URL is built for the callback route."""
        create = AsyncMock(return_value=("https://accounts.google.com/o/oauth2/auth?x=1", "st"))
        with patch("hackhub.services.auth_service.is_provider_configured", return_value=True), \
                patch("hackhub.services.auth_service.create_authorization_url", create):
            url, state = asyncio.run(auth_service.initiate_login(mock_request))

        assert state == "st"
        assert url.startswith("https://accounts.google.com/")
        assert create.call_args.kwargs["redirect_uri"].endswith("/api/auth/callback")
