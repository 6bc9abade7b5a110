"""
Shared FastAPI dependencies: application logger, log context and
service factories.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from hackhub.db.database import get_db
from hackhub.services import (
    AnalyticsService,
    AppLogger,
    AppLogService,
    EventService,
    LogContext,
    OrganiserService,
    ProposalService,
    SponsorService,
    UserService,
)
from hackhub.services.auth_service import AuthService
from hackhub.middleware.correlation import new_correlation_id


# ============================================================================
# Logging
# ============================================================================


def get_app_logger(request: Request) -> AppLogger:
    """The application logger created at startup."""
    return request.app.state.app_logger


def get_log_context(request: Request) -> LogContext:
    """Correlation ID from the middleware plus the session user, if any."""
    correlation_id = getattr(request.state, "correlation_id", None) or new_correlation_id()
    user_id = request.session.get("user_id") if "session" in request.scope else None
    return LogContext(correlation_id=correlation_id, user_id=user_id)


# ============================================================================
# Services
# ============================================================================


def get_event_service(
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
) -> EventService:
    return EventService(db, app_logger)


def get_user_service(
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
) -> UserService:
    return UserService(db, app_logger)


def get_organiser_service(
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
) -> OrganiserService:
    return OrganiserService(db, app_logger)


def get_sponsor_service(
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
) -> SponsorService:
    return SponsorService(db, app_logger)


def get_proposal_service(
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
) -> ProposalService:
    return ProposalService(db, app_logger)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db)


def get_app_log_service(db: Session = Depends(get_db)) -> AppLogService:
    return AppLogService(db)


def get_auth_service(
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
) -> AuthService:
    return AuthService(db, app_logger)
