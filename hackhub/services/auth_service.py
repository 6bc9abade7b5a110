"""
Authentication service for the OAuth login flow.

Handles the business logic for:
- Initiating the Google login flow
- Processing the OAuth callback and provisioning the user
- Managing session data

Security:
- Any verified Google account may sign in; the user row is created on
  first sign-in with no roles (admin emails excepted)
- OAuth subject stored for identity verification
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.orm import Session
from starlette.requests import Request

from hackhub.auth.oauth_client import (
    create_authorization_url,
    fetch_token,
    get_user_info,
    is_provider_configured,
)
from hackhub.config.oauth import get_oauth_settings
from hackhub.models import User
from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.exceptions import ServiceError, ValidationError
from hackhub.services.user_service import UserService
from hackhub.utils.logging_config import get_logger


logger = get_logger("auth")


@dataclass
class AuthResult:
    """
    Result of an authentication attempt.

    Attributes:
        success: Whether authentication succeeded
        user: Authenticated user (if success)
        error: Error message (if failed)
        error_code: Error code for frontend handling
    """
    success: bool
    user: Optional[User] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class AuthService:
    """
    Service for managing OAuth authentication.

    Usage:
        >>> service = AuthService(db_session, app_logger)
        >>> url, state = await service.initiate_login(request)
        >>> # User redirected to Google...
        >>> result = await service.handle_callback(request, ctx)
        >>> if result.success:
        ...     service.create_session(request, result.user)
    """

    def __init__(self, db: Session, app_logger: AppLogger):
        """
        Initialize auth service.

        Args:
            db: SQLAlchemy database session
            app_logger: Application log facade
        """
        self.db = db
        self.app_logger = app_logger
        self.user_service = UserService(db, app_logger)
        self.settings = get_oauth_settings()

    async def initiate_login(self, request: Request) -> Tuple[str, str]:
        """
        Generate the authorization URL for the login redirect.

        Returns:
            Tuple of (authorization_url, state)

        Raises:
            ValidationError: If Google OAuth is not configured
        """
        if not is_provider_configured():
            raise ValidationError("Google sign-in is not configured", field="provider")

        logger.info("OAuth login initiated", extra={"event": "auth.login.initiated"})

        return await create_authorization_url(
            request=request,
            redirect_uri=self.settings.google_redirect_uri,
        )

    async def handle_callback(self, request: Request, ctx: LogContext) -> AuthResult:
        """
        Exchange the authorization code, read the user's claims and
        create or refresh the user.

        Returns:
            AuthResult with success status and user or error
        """
        try:
            token = await fetch_token(request)
            user_info = await get_user_info(token)
        except Exception as e:
            logger.error(f"OAuth callback error: {e}", exc_info=True)
            self._log_failure(ctx, "callback_error")
            return AuthResult(
                success=False,
                error="Authentication with the identity provider failed",
                error_code="callback_error",
            )

        email = user_info.get("email")
        if not email:
            logger.warning(
                "No email in user info from provider",
                extra={"event": "auth.login.failed", "reason": "no_email"},
            )
            self._log_failure(ctx, "no_email")
            return AuthResult(
                success=False,
                error="Email not provided by identity provider",
                error_code="no_email",
            )

        try:
            user = self.user_service.sign_in(
                ctx,
                email=email,
                name=user_info.get("name"),
                image=user_info.get("picture"),
                oauth_subject=user_info.get("sub"),
                email_verified=bool(user_info.get("email_verified")),
            )
        except ServiceError as e:
            logger.warning(
                f"Sign-in rejected: {e.message}",
                extra={"event": "auth.login.failed", "email": email},
            )
            self._log_failure(ctx, "sign_in_failed")
            return AuthResult(success=False, error=e.message, error_code="sign_in_failed")

        logger.info(
            "User authenticated successfully",
            extra={"event": "auth.login.success", "email": email, "user_id": user.id},
        )
        return AuthResult(success=True, user=user)

    def create_session(self, request: Request, user: User) -> None:
        """
        Store the user's identity in the session cookie.

        Raises:
            RuntimeError: If session middleware is not installed
        """
        if not self._has_session(request):
            raise RuntimeError(
                "Cannot create session: SessionMiddleware not installed. "
                "Set SESSION_SECRET_KEY environment variable."
            )

        request.session["user_id"] = user.id
        request.session["email"] = user.email
        request.session["authenticated_at"] = datetime.utcnow().isoformat()

        logger.info(
            "Session created",
            extra={"event": "auth.session.created", "email": user.email, "user_id": user.id},
        )

    def clear_session(self, request: Request) -> None:
        """Clear the user's session (logout)."""
        if not self._has_session(request):
            return

        email = request.session.get("email", "unknown")
        request.session.clear()

        logger.info("User logged out", extra={"event": "auth.logout", "email": email})

    def get_session_user(self, request: Request) -> Optional[User]:
        """
        Get the current user from the session.

        Returns:
            User instance or None if not authenticated. A session pointing
            at a deleted user is cleared.
        """
        if not self._has_session(request):
            return None

        user_id = request.session.get("user_id")
        if not user_id:
            return None

        user = self.user_service.get_by_id(user_id)
        if user is None:
            request.session.clear()
        return user

    def _log_failure(self, ctx: LogContext, reason: str) -> None:
        self.app_logger.warn(
            "Sign-in failed",
            ctx,
            context="AuthService:handle_callback",
            meta={"reason": reason},
        )

    def _has_session(self, request: Request) -> bool:
        return "session" in request.scope
