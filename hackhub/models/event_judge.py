"""
EventJudge model for judge assignments.
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import TimestampMixin, ID_LENGTH


class EventJudge(Base, TimestampMixin):
    """
    Event-User judge link.

    Attributes:
        event_id: FK to events (CASCADE on delete), part of primary key
        user_id: FK to users (CASCADE on delete), part of primary key
        created_at: When the judge was assigned

    Constraints:
        - Composite primary key: a user judges an event at most once
    """

    __tablename__ = "event_judges"

    event_id = Column(
        String(ID_LENGTH),
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True
    )
    user_id = Column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )

    event = relationship("Event", back_populates="judges")
    user = relationship("User")

    def __repr__(self) -> str:
        return f"<EventJudge(event_id={self.event_id}, user_id={self.user_id})>"
