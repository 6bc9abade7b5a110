"""
EventOrganiser model for organiser assignments.

Organisers are ordinary users linked to the events they run.
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import TimestampMixin, ID_LENGTH


class EventOrganiser(Base, TimestampMixin):
    """
    Event-User organiser link.

    Attributes:
        event_id: FK to events (CASCADE on delete), part of primary key
        user_id: FK to users (CASCADE on delete), part of primary key
        created_at: When the organiser was assigned
    """

    __tablename__ = "event_organisers"

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

    event = relationship("Event", back_populates="organisers")
    user = relationship("User")

    def __repr__(self) -> str:
        return f"<EventOrganiser(event_id={self.event_id}, user_id={self.user_id})>"
