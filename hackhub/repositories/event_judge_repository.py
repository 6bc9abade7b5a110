"""
Data access for event judge links.
"""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from hackhub.models import EventJudge
from hackhub.repositories.base import BaseRepository


class EventJudgeRepository(BaseRepository):

    def add_judge_to_event(self, event_id: str, user_id: str) -> EventJudge:
        return self._add(EventJudge(event_id=event_id, user_id=user_id))

    def remove_judge_from_event(self, event_id: str, user_id: str) -> Optional[EventJudge]:
        return self._remove(self.find_judge(event_id, user_id))

    def find_judge(self, event_id: str, user_id: str) -> Optional[EventJudge]:
        return self.db.get(EventJudge, (event_id, user_id))

    def find_judges_by_event(self, event_id: str) -> List[EventJudge]:
        return (
            self.db.query(EventJudge)
            .options(selectinload(EventJudge.user))
            .filter(EventJudge.event_id == event_id)
            .order_by(EventJudge.created_at)
            .all()
        )
