"""
Data access for events.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from hackhub.models import (
    Event,
    EventParticipant,
    EventJudge,
    EventOrganiser,
    EventSponsor,
    EventTeam,
)
from hackhub.repositories.base import BaseRepository


class EventRepository(BaseRepository):
    """Queries and writes for the events table."""

    def create(self, **fields) -> Event:
        return self._add(Event(**fields))

    def update(self, event_id: str, **fields) -> Optional[Event]:
        return self._apply(self.find_by_id(event_id), fields)

    def delete(self, event_id: str) -> Optional[str]:
        """
        Delete an event.

        Teams, photos and all participant, judge, organiser and sponsor
        links go with it through ON DELETE CASCADE.

        Returns:
            The deleted event id, or None if no such event
        """
        event = self._remove(self.find_by_id(event_id))
        return event.id if event else None

    def find_by_id(self, event_id: str) -> Optional[Event]:
        return self._get(Event, event_id)

    def find_with_details(self, event_id: str) -> Optional[Event]:
        """Load an event with photos, teams, sponsors and user links."""
        return (
            self.db.query(Event)
            .options(
                selectinload(Event.photos),
                selectinload(Event.teams).selectinload(EventTeam.members),
                selectinload(Event.participants).selectinload(EventParticipant.user),
                selectinload(Event.judges).selectinload(EventJudge.user),
                selectinload(Event.organisers).selectinload(EventOrganiser.user),
                selectinload(Event.sponsors).selectinload(EventSponsor.sponsor),
            )
            .filter(Event.id == event_id)
            .first()
        )

    def find_many(
        self,
        limit: int = 10,
        offset: int = 0,
        is_active: Optional[bool] = None,
    ) -> List[Event]:
        """List events, most recent start date first."""
        query = self.db.query(Event)
        if is_active is not None:
            query = query.filter(Event.is_active.is_(is_active))
        return (
            query.order_by(Event.start_date.desc(), Event.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count(self, is_active: Optional[bool] = None) -> int:
        query = self.db.query(func.count(Event.id))
        if is_active is not None:
            query = query.filter(Event.is_active.is_(is_active))
        return query.scalar() or 0
