"""
Configuration for HackHub: application, session and OAuth settings.
"""

from hackhub.config.settings import AppSettings, get_settings, is_admin_email
from hackhub.config.session import SessionSettings, get_session_settings
from hackhub.config.oauth import OAuthSettings, get_oauth_settings

__all__ = [
    "AppSettings",
    "get_settings",
    "is_admin_email",
    "SessionSettings",
    "get_session_settings",
    "OAuthSettings",
    "get_oauth_settings",
]
