"""
Signed cookie session settings.

The session holds only the signed-in user id, email and sign-in time,
plus Authlib's transient OAuth state during login.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

ONE_DAY = 24 * 60 * 60


class SessionSettings(BaseSettings):
    """
    Cookie options for Starlette's SessionMiddleware.

    Environment Variables:
        SESSION_SECRET_KEY: Signing key, 32+ characters (required in production)
        SESSION_MAX_AGE: Cookie lifetime in seconds (default: 7 days, max 30)
        SESSION_COOKIE_NAME: Cookie name (default: hackhub_session)
        SESSION_SAME_SITE: lax, strict or none (default: lax)
        SESSION_HTTPS_ONLY: Mark the cookie Secure (default: false)
    """

    session_secret_key: str = Field(default="", validation_alias="SESSION_SECRET_KEY")
    session_max_age: int = Field(
        default=7 * ONE_DAY,
        validation_alias="SESSION_MAX_AGE",
        ge=60,
        le=30 * ONE_DAY,
    )
    session_cookie_name: str = Field(default="hackhub_session", validation_alias="SESSION_COOKIE_NAME")
    session_same_site: Literal["lax", "strict", "none"] = Field(
        default="lax", validation_alias="SESSION_SAME_SITE"
    )
    session_https_only: bool = Field(default=False, validation_alias="SESSION_HTTPS_ONLY")

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("session_secret_key")
    @classmethod
    def check_key_length(cls, v: str) -> str:
        if v and len(v) < 32:
            raise ValueError("SESSION_SECRET_KEY must be at least 32 characters")
        return v

    @property
    def is_configured(self) -> bool:
        """A signing key was provided."""
        return bool(self.session_secret_key)

    def middleware_options(self, secret_key: str) -> dict:
        """Keyword arguments for Starlette's SessionMiddleware."""
        return {
            "secret_key": secret_key,
            "session_cookie": self.session_cookie_name,
            "max_age": self.session_max_age,
            "same_site": self.session_same_site,
            "https_only": self.session_https_only,
        }


@lru_cache()
def get_session_settings() -> SessionSettings:
    return SessionSettings()
