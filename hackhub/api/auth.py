"""
Authentication API endpoints.

Provides the Google OAuth 2.0 login flow:
- GET /auth/login - Redirect to Google
- GET /auth/callback - Handle the OAuth callback and start a session
- GET /auth/me - Current user, or authenticated=false
- POST /auth/logout - Clear the session

Rate Limiting:
- /auth/login, /auth/callback: 10 requests per minute per IP
- /auth/me: 60 requests per minute per IP
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from hackhub.api.dependencies import get_auth_service, get_log_context
from hackhub.config.oauth import get_oauth_settings
from hackhub.schemas import MessageData, SuccessResponse, UserResponse
from hackhub.services import LogContext
from hackhub.services.auth_service import AuthService
from hackhub.utils.logging_config import get_logger


logger = get_logger("api")

# Rate limiter for auth endpoints
limiter = Limiter(key_func=get_remote_address)


router = APIRouter(prefix="/auth", tags=["Authentication"])


# ============================================================================
# Response Models
# ============================================================================


class AuthStatusResponse(BaseModel):
    """Authentication status."""
    authenticated: bool
    user: Optional[UserResponse] = None


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/login",
    summary="Initiate OAuth login",
    description="Redirects to Google's authorization page.",
    responses={302: {"description": "Redirect to Google"}},
)
@limiter.limit("10/minute")
async def login(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Initiate the OAuth login flow.

    Answers 400 BAD_REQUEST when Google sign-in is not configured.
    """
    url, _state = await auth_service.initiate_login(request)
    logger.info(f"Redirecting to Google OAuth: {url[:50]}...")
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


@router.get(
    "/callback",
    summary="Handle OAuth callback",
    description="Processes the OAuth callback and creates a session on success.",
    responses={302: {"description": "Redirect to the app or the login page"}},
)
@limiter.limit("10/minute")
async def callback(
    request: Request,
    ctx: LogContext = Depends(get_log_context),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Handle the OAuth callback.

    Success: Redirects to OAUTH_POST_LOGIN_REDIRECT
    Failure: Redirects to /login?error={error_code}
    """
    result = await auth_service.handle_callback(request, ctx)

    if result.success and result.user:
        auth_service.create_session(request, result.user)
        return RedirectResponse(
            url=get_oauth_settings().post_login_redirect,
            status_code=status.HTTP_302_FOUND,
        )

    error_code = result.error_code or "unknown"
    logger.warning(f"OAuth login failed: {result.error} ({error_code})")
    return RedirectResponse(
        url=f"/login?error={error_code}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get(
    "/me",
    response_model=SuccessResponse[AuthStatusResponse],
    summary="Get current user info",
)
@limiter.limit("60/minute")
async def get_me(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Does not require authentication; lets the frontend check status.
    """
    user = auth_service.get_session_user(request)
    if user is None:
        return SuccessResponse(data=AuthStatusResponse(authenticated=False))
    return SuccessResponse(
        data=AuthStatusResponse(authenticated=True, user=UserResponse.model_validate(user))
    )


@router.post(
    "/logout",
    response_model=SuccessResponse[MessageData],
    summary="Logout",
)
async def logout(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Safe to call when not authenticated."""
    auth_service.clear_session(request)
    return SuccessResponse(data=MessageData(message="Successfully logged out"))
