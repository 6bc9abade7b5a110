"""
Data access for event photos.
"""

from typing import Iterable, List, Optional

from hackhub.models import EventPhoto
from hackhub.repositories.base import BaseRepository


class EventPhotoRepository(BaseRepository):

    def create(self, event_id: str, url: str, caption: Optional[str] = None) -> EventPhoto:
        return self._add(EventPhoto(event_id=event_id, url=url, caption=caption))

    def create_many(self, event_id: str, photos: Iterable[dict]) -> List[EventPhoto]:
        rows = [
            EventPhoto(event_id=event_id, url=p["url"], caption=p.get("caption"))
            for p in photos
        ]
        self.db.add_all(rows)
        self.db.flush()
        return rows

    def find_by_id(self, photo_id: str) -> Optional[EventPhoto]:
        return self._get(EventPhoto, photo_id)

    def find_by_event_id(self, event_id: str) -> List[EventPhoto]:
        return (
            self.db.query(EventPhoto)
            .filter(EventPhoto.event_id == event_id)
            .order_by(EventPhoto.created_at, EventPhoto.id)
            .all()
        )

    def delete(self, photo_id: str) -> Optional[EventPhoto]:
        return self._remove(self.find_by_id(photo_id))
