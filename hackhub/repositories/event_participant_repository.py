"""
Data access for event participant links.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from hackhub.models import EventParticipant
from hackhub.repositories.base import BaseRepository


class EventParticipantRepository(BaseRepository):

    def add_participant_to_event(self, event_id: str, user_id: str) -> EventParticipant:
        """Insert a registration with no team."""
        return self._add(EventParticipant(event_id=event_id, user_id=user_id, team_id=None))

    def remove_participant_from_event(
        self, event_id: str, user_id: str
    ) -> Optional[EventParticipant]:
        return self._remove(self.find_participant(event_id, user_id))

    def find_participant(self, event_id: str, user_id: str) -> Optional[EventParticipant]:
        return self.db.get(EventParticipant, (event_id, user_id))

    def find_participants_by_event(self, event_id: str) -> List[EventParticipant]:
        return (
            self.db.query(EventParticipant)
            .options(selectinload(EventParticipant.user))
            .filter(EventParticipant.event_id == event_id)
            .order_by(EventParticipant.created_at)
            .all()
        )

    def assign_participant_to_team(
        self, event_id: str, user_id: str, team_id: str
    ) -> Optional[EventParticipant]:
        return self._apply(self.find_participant(event_id, user_id), {"team_id": team_id})

    def remove_participant_from_team(
        self, event_id: str, user_id: str
    ) -> Optional[EventParticipant]:
        return self._apply(self.find_participant(event_id, user_id), {"team_id": None})

    def count(self) -> int:
        return self.db.query(func.count(EventParticipant.user_id)).scalar() or 0
