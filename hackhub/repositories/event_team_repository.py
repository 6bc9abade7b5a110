"""
Data access for event-scoped teams.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from hackhub.models import EventTeam, EventParticipant
from hackhub.repositories.base import BaseRepository


class EventTeamRepository(BaseRepository):

    def create(self, event_id: str, name: str) -> EventTeam:
        return self._add(EventTeam(event_id=event_id, name=name))

    def find_by_id(self, team_id: str) -> Optional[EventTeam]:
        return self._get(EventTeam, team_id)

    def find_by_event_id(self, event_id: str) -> List[EventTeam]:
        return (
            self.db.query(EventTeam)
            .options(selectinload(EventTeam.members).selectinload(EventParticipant.user))
            .filter(EventTeam.event_id == event_id)
            .order_by(EventTeam.name)
            .all()
        )

    def find_by_name(self, event_id: str, name: str) -> Optional[EventTeam]:
        """Find a team in an event by name, ignoring case."""
        return (
            self.db.query(EventTeam)
            .filter(
                EventTeam.event_id == event_id,
                func.lower(EventTeam.name) == name.strip().lower(),
            )
            .first()
        )

    def update(self, team_id: str, **fields) -> Optional[EventTeam]:
        return self._apply(self.find_by_id(team_id), fields)

    def delete(self, team_id: str) -> Optional[str]:
        team = self._remove(self.find_by_id(team_id))
        return team.id if team else None

    def count(self) -> int:
        return self.db.query(func.count(EventTeam.id)).scalar() or 0
