"""
Google sign-in settings.

HackHub has a single identity provider. Without GOOGLE_CLIENT_ID and
GOOGLE_CLIENT_SECRET the login route answers 400 and the rest of the API
still works for existing sessions.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class OAuthSettings(BaseSettings):
    """
    OAuth provider configuration loaded from environment variables.

    Environment Variables:
        GOOGLE_CLIENT_ID: Google OAuth client ID
        GOOGLE_CLIENT_SECRET: Google OAuth client secret
        OAUTH_REDIRECT_BASE_URL: Base URL for OAuth callbacks (e.g., http://localhost:8000)
        OAUTH_POST_LOGIN_REDIRECT: Frontend path to send users to after sign-in
    """

    google_client_id: Optional[str] = Field(default=None, validation_alias="GOOGLE_CLIENT_ID")
    google_client_secret: Optional[str] = Field(default=None, validation_alias="GOOGLE_CLIENT_SECRET")

    oauth_redirect_base_url: str = Field(
        default="http://localhost:8000",
        validation_alias="OAUTH_REDIRECT_BASE_URL"
    )

    post_login_redirect: str = Field(
        default="/",
        validation_alias="OAUTH_POST_LOGIN_REDIRECT"
    )

    google_discovery_url: str = "https://accounts.google.com/.well-known/openid-configuration"

    oauth_scopes: list[str] = ["openid", "email", "profile"]

    code_challenge_method: str = "S256"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def google_enabled(self) -> bool:
        """Both client credentials are present."""
        return bool(self.google_client_id and self.google_client_secret)

    @property
    def google_redirect_uri(self) -> str:
        """Callback URL registered with Google, served by api/auth.py."""
        return f"{self.oauth_redirect_base_url.rstrip('/')}/api/auth/callback"

    def registration(self) -> dict:
        """Keyword arguments for ``OAuth.register`` (OIDC discovery, PKCE)."""
        return {
            "client_id": self.google_client_id,
            "client_secret": self.google_client_secret,
            "server_metadata_url": self.google_discovery_url,
            "client_kwargs": {
                "scope": " ".join(self.oauth_scopes),
                "code_challenge_method": self.code_challenge_method,
            },
        }


@lru_cache()
def get_oauth_settings() -> OAuthSettings:
    """
    Get cached OAuth settings instance.

    Returns:
        OAuthSettings: Configured OAuth settings from environment
    """
    return OAuthSettings()
