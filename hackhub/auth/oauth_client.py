"""
Authlib client for Google sign-in.

The client is registered lazily from OAuthSettings using OpenID Connect
discovery. PKCE (S256), state and nonce are handled by Authlib and kept
in the signed session cookie between /login and /callback.
"""

from typing import Optional

from authlib.integrations.starlette_client import OAuth
from authlib.integrations.starlette_client.apps import StarletteOAuth2App
from starlette.requests import Request

from hackhub.config.oauth import get_oauth_settings
from hackhub.utils.logging_config import get_logger


logger = get_logger("auth")

PROVIDER = "google"

_oauth: Optional[OAuth] = None


def _registry() -> OAuth:
    global _oauth

    if _oauth is None:
        settings = get_oauth_settings()
        _oauth = OAuth()
        if settings.google_enabled:
            _oauth.register(name=PROVIDER, **settings.registration())
            logger.info("Google OAuth client registered")
        else:
            logger.warning("Google sign-in disabled: GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET not set")
    return _oauth


def get_oauth_client() -> Optional[StarletteOAuth2App]:
    """The registered Google client, or None when sign-in is disabled."""
    return getattr(_registry(), PROVIDER, None)


def _require_client() -> StarletteOAuth2App:
    client = get_oauth_client()
    if client is None:
        raise ValueError("Google OAuth is not configured")
    return client


def is_provider_configured() -> bool:
    return get_oauth_settings().google_enabled


async def create_authorization_url(request: Request, redirect_uri: str) -> tuple[str, str]:
    """
    Build the Google consent URL and remember the PKCE verifier and state.

    Returns:
        Tuple of (authorization_url, state)

    Raises:
        ValueError: If sign-in is disabled
    """
    client = _require_client()
    url = await client.create_authorization_url(redirect_uri=redirect_uri)
    await client.save_authorize_data(request, redirect_uri=redirect_uri, **url)
    return url["url"], url.get("state", "")


async def fetch_token(request: Request) -> dict:
    """
    Exchange the callback's authorization code for tokens.

    Raises:
        ValueError: If sign-in is disabled
        OAuthError: If state, PKCE or the token exchange fail
    """
    return await _require_client().authorize_access_token(request)


async def get_user_info(token: dict) -> dict:
    """
    Claims for the signed-in account (sub, email, name, picture, ...).

    Uses the ID token claims Authlib already parsed and falls back to the
    userinfo endpoint when the token response carried none.
    """
    claims = token.get("userinfo")
    if claims is None:
        logger.warning("Token response had no ID token claims; calling userinfo endpoint")
        claims = await _require_client().userinfo(token=token)
    return dict(claims) if claims else {}
