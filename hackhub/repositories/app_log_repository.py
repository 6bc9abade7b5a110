"""
Data access for persisted application logs.
"""

from typing import List, Optional

from hackhub.models import AppLog
from hackhub.repositories.base import BaseRepository


class AppLogRepository(BaseRepository):

    def create(self, **fields) -> AppLog:
        return self._add(AppLog(**fields))

    def find(
        self,
        user_id: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[AppLog]:
        """Filter logs by user and level, newest first."""
        query = self.db.query(AppLog)
        if user_id:
            query = query.filter(AppLog.user_id == user_id)
        if level:
            query = query.filter(AppLog.level == level)
        return (
            query.order_by(AppLog.timestamp.desc(), AppLog.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def find_by_correlation_id(self, correlation_id: str) -> List[AppLog]:
        """All entries of one request, in the order they were written."""
        return (
            self.db.query(AppLog)
            .filter(AppLog.correlation_id == correlation_id)
            .order_by(AppLog.timestamp.asc(), AppLog.id.asc())
            .all()
        )
