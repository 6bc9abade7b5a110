"""
Service layer for HackHub business logic.
"""

from hackhub.services.app_log_service import (
    AppLogger,
    AppLogService,
    DatabaseAppLogger,
    LogContext,
    LogLevel,
)
from hackhub.services.event_service import EventService
from hackhub.services.user_service import UserService
from hackhub.services.organiser_service import OrganiserService
from hackhub.services.sponsor_service import SponsorService
from hackhub.services.proposal_service import ProposalService
from hackhub.services.analytics_service import AnalyticsService

__all__ = [
    "AppLogger",
    "AppLogService",
    "DatabaseAppLogger",
    "LogContext",
    "LogLevel",
    "EventService",
    "UserService",
    "OrganiserService",
    "SponsorService",
    "ProposalService",
    "AnalyticsService",
]
