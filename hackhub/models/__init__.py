"""
SQLAlchemy models for HackHub.

This module provides the declarative base class and imports all models
to ensure they are registered with SQLAlchemy's metadata.
"""

from sqlalchemy.orm import declarative_base

# All models inherit from this Base class
Base = declarative_base()


# Import all models here so they are registered with Base.metadata
# This is required for Alembic autogenerate to detect models
from hackhub.models.user import User  # noqa: E402
from hackhub.models.event import Event  # noqa: E402
from hackhub.models.event_photo import EventPhoto  # noqa: E402
from hackhub.models.event_team import EventTeam  # noqa: E402
from hackhub.models.event_participant import EventParticipant  # noqa: E402
from hackhub.models.event_judge import EventJudge  # noqa: E402
from hackhub.models.event_organiser import EventOrganiser  # noqa: E402
from hackhub.models.sponsor import Sponsor, EventSponsor  # noqa: E402
from hackhub.models.team_proposal import (  # noqa: E402
    ApprovalStatus,
    TeamProposal,
    ProposalMember,
    MIN_PROPOSAL_MEMBERS,
    MAX_PROPOSAL_MEMBERS,
)
from hackhub.models.app_log import AppLog  # noqa: E402

__all__ = [
    "Base",
    "User",
    "Event",
    "EventPhoto",
    "EventTeam",
    "EventParticipant",
    "EventJudge",
    "EventOrganiser",
    "Sponsor",
    "EventSponsor",
    "ApprovalStatus",
    "TeamProposal",
    "ProposalMember",
    "MIN_PROPOSAL_MEMBERS",
    "MAX_PROPOSAL_MEMBERS",
    "AppLog",
]
