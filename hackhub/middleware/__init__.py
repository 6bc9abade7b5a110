"""
Request middleware and authentication dependencies.
"""

from hackhub.middleware.auth import (
    get_current_user,
    get_optional_user,
    require_admin,
    require_auth,
    require_judge_or_admin,
    require_organiser_or_admin,
)
from hackhub.middleware.correlation import CorrelationIdMiddleware, CORRELATION_HEADER

__all__ = [
    "get_current_user",
    "get_optional_user",
    "require_admin",
    "require_auth",
    "require_judge_or_admin",
    "require_organiser_or_admin",
    "CorrelationIdMiddleware",
    "CORRELATION_HEADER",
]
