"""
EventPhoto model for event gallery images.
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, TimestampMixin, ID_LENGTH


class EventPhoto(Base, IdMixin, TimestampMixin):
    """
    Photo attached to an event.

    Attributes:
        id: Primary key (UUIDv7 hex)
        event_id: FK to events (CASCADE on delete)
        url: Image URL (opaque reference)
        caption: Optional caption
    """

    __tablename__ = "event_photos"

    event_id = Column(
        String(ID_LENGTH),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    url = Column(String(1024), nullable=False)
    caption = Column(String(500), nullable=True)

    event = relationship("Event", back_populates="photos")

    def __repr__(self) -> str:
        return f"<EventPhoto(id={self.id}, event_id={self.event_id})>"
