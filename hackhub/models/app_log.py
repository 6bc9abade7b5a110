"""
AppLog model for persisted application log entries.

Every entry carries the correlation ID of the request that produced it,
so all log lines for one request can be pulled back in order.
"""

from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, ID_LENGTH


class AppLog(Base, IdMixin):
    """
    Application log entry.

    Attributes:
        id: Primary key (UUIDv7 hex)
        timestamp: When the entry was written (UTC)
        level: info, warn, error or debug
        message: Log message
        correlation_id: Request correlation ID
        context: Emitting component, e.g. "EventService:create_event"
        meta: JSON-serialized structured metadata
        user_id: FK to users (SET NULL on delete), the acting user

    Indexes:
        - correlation_id (request traces)
        - (user_id, timestamp) (per-user queries)
    """

    __tablename__ = "app_logs"

    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    level = Column(String(10), nullable=False)
    message = Column(Text, nullable=False)
    correlation_id = Column(String(64), nullable=True, index=True)
    context = Column(String(255), nullable=True)
    meta = Column(Text, nullable=True)
    user_id = Column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True
    )

    __table_args__ = (
        Index("ix_app_logs_user_timestamp", "user_id", "timestamp"),
    )

    def __repr__(self) -> str:
        return f"<AppLog(id={self.id}, level={self.level}, context='{self.context}')>"
