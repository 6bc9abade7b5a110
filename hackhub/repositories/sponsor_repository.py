"""
Data access for sponsors and their event links.
"""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from hackhub.models import Sponsor, EventSponsor
from hackhub.repositories.base import BaseRepository


class SponsorRepository(BaseRepository):

    def create(self, **fields) -> Sponsor:
        return self._add(Sponsor(**fields))

    def find_by_id(self, sponsor_id: str) -> Optional[Sponsor]:
        return self._get(Sponsor, sponsor_id)

    def find_all(self) -> List[Sponsor]:
        return self.db.query(Sponsor).order_by(Sponsor.name).all()

    def delete(self, sponsor_id: str) -> Optional[str]:
        sponsor = self._remove(self.find_by_id(sponsor_id))
        return sponsor.id if sponsor else None


class EventSponsorRepository(BaseRepository):

    def add_sponsor_to_event(self, event_id: str, sponsor_id: str) -> EventSponsor:
        return self._add(EventSponsor(event_id=event_id, sponsor_id=sponsor_id))

    def remove_sponsor_from_event(
        self, event_id: str, sponsor_id: str
    ) -> Optional[EventSponsor]:
        return self._remove(self.find_event_sponsor(event_id, sponsor_id))

    def find_event_sponsor(self, event_id: str, sponsor_id: str) -> Optional[EventSponsor]:
        return self.db.get(EventSponsor, (event_id, sponsor_id))

    def find_sponsors_by_event(self, event_id: str) -> List[EventSponsor]:
        return (
            self.db.query(EventSponsor)
            .options(selectinload(EventSponsor.sponsor))
            .filter(EventSponsor.event_id == event_id)
            .all()
        )
