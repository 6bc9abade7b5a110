"""Repository layer for DB access only (CRUD + simple queries).

Repositories operate on the models from hackhub.models and contain no
business rules: they return the affected row, None when nothing matched,
or a list. They flush but never commit; services own the transaction.
"""

from hackhub.repositories.base import BaseRepository
from hackhub.repositories.user_repository import UserRepository
from hackhub.repositories.event_repository import EventRepository
from hackhub.repositories.event_photo_repository import EventPhotoRepository
from hackhub.repositories.event_team_repository import EventTeamRepository
from hackhub.repositories.event_participant_repository import EventParticipantRepository
from hackhub.repositories.event_judge_repository import EventJudgeRepository
from hackhub.repositories.event_organiser_repository import EventOrganiserRepository
from hackhub.repositories.sponsor_repository import SponsorRepository, EventSponsorRepository
from hackhub.repositories.proposal_repository import ProposalRepository
from hackhub.repositories.app_log_repository import AppLogRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "EventRepository",
    "EventPhotoRepository",
    "EventTeamRepository",
    "EventParticipantRepository",
    "EventJudgeRepository",
    "EventOrganiserRepository",
    "SponsorRepository",
    "EventSponsorRepository",
    "ProposalRepository",
    "AppLogRepository",
]
