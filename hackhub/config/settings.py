"""
Application settings configuration for HackHub.

Centralized settings loaded from environment variables.
"""

from functools import lru_cache
from typing import List, Literal, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment Variables:
        HACKHUB_ENV: Environment name (development, production, test)
        HACKHUB_DB_URL: SQLAlchemy database URL
        HACKHUB_CORS_ORIGINS: Comma-separated list of allowed frontend origins
        HACKHUB_EVENT_LIST_LIMIT: Default page size for GET /api/events (default: 50)
        HACKHUB_LOG_QUERY_LIMIT: Default page size for GET /api/logs (default: 50)
        HACKHUB_LOG_LEVEL: Process log level (default: INFO)
        HACKHUB_LOG_DIR: Directory for rotating JSON log files in production
        ADMIN_EMAILS: Comma-separated emails granted admin on sign-in
    """

    environment: Literal["development", "production", "test"] = Field(
        default="development",
        validation_alias="HACKHUB_ENV",
    )

    database_url: str = Field(
        default="sqlite:///./hackhub.db",
        validation_alias="HACKHUB_DB_URL",
    )

    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        validation_alias="HACKHUB_CORS_ORIGINS",
        description="Comma-separated list of origins allowed by CORS",
    )

    event_list_limit: int = Field(
        default=50,
        validation_alias="HACKHUB_EVENT_LIST_LIMIT",
        ge=1,
        le=500,
    )

    log_query_limit: int = Field(
        default=50,
        validation_alias="HACKHUB_LOG_QUERY_LIMIT",
        ge=1,
        le=1000,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="HACKHUB_LOG_LEVEL",
    )

    log_dir: str = Field(
        default="logs",
        validation_alias="HACKHUB_LOG_DIR",
    )

    admin_emails: str = Field(
        default="",
        validation_alias="ADMIN_EMAILS",
        description="Comma-separated emails that are granted admin on sign-in",
    )

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """Accept environment names in any case."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse the comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def admin_email_set(self) -> Set[str]:
        """Parse admin emails into a lowercase set."""
        return {e.strip().lower() for e in self.admin_emails.split(",") if e.strip()}


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings instance.

    Returns:
        AppSettings: Configured application settings from environment
    """
    return AppSettings()


def is_admin_email(email: str) -> bool:
    """
    Check whether an email is configured as an administrator.

    Args:
        email: Email address to check

    Returns:
        True if the email is listed in ADMIN_EMAILS (case-insensitive)
    """
    if not email:
        return False
    return email.strip().lower() in get_settings().admin_email_set
