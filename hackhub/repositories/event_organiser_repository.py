"""
Data access for event organiser links.
"""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from hackhub.models import EventOrganiser
from hackhub.repositories.base import BaseRepository


class EventOrganiserRepository(BaseRepository):

    def add_organiser_to_event(self, event_id: str, user_id: str) -> EventOrganiser:
        return self._add(EventOrganiser(event_id=event_id, user_id=user_id))

    def remove_organiser_from_event(
        self, event_id: str, user_id: str
    ) -> Optional[EventOrganiser]:
        return self._remove(self.find_organiser(event_id, user_id))

    def find_organiser(self, event_id: str, user_id: str) -> Optional[EventOrganiser]:
        return self.db.get(EventOrganiser, (event_id, user_id))

    def find_organisers_by_event(self, event_id: str) -> List[EventOrganiser]:
        return (
            self.db.query(EventOrganiser)
            .options(selectinload(EventOrganiser.user))
            .filter(EventOrganiser.event_id == event_id)
            .order_by(EventOrganiser.created_at)
            .all()
        )
