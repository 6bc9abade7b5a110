"""
Sponsor and EventSponsor models.

Sponsors are shared across events; EventSponsor links a sponsor to each
event it supports.
"""

from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, TimestampMixin, ID_LENGTH


class Sponsor(Base, IdMixin, TimestampMixin):
    """
    Sponsor model.

    Attributes:
        id: Primary key (UUIDv7 hex)
        name: Sponsor name
        description: Optional description
        logo: Logo URL (opaque reference)
        created_at: Creation timestamp

    Relationships:
        events: Event links (one-to-many, CASCADE)
    """

    __tablename__ = "sponsors"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    logo = Column(String(1024), nullable=True)

    events = relationship(
        "EventSponsor",
        back_populates="sponsor",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Sponsor(id={self.id}, name='{self.name}')>"


class EventSponsor(Base, TimestampMixin):
    """
    Event-Sponsor link.

    Attributes:
        event_id: FK to events (CASCADE on delete), part of primary key
        sponsor_id: FK to sponsors (CASCADE on delete), part of primary key
    """

    __tablename__ = "event_sponsors"

    event_id = Column(
        String(ID_LENGTH),
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True
    )
    sponsor_id = Column(
        String(ID_LENGTH),
        ForeignKey("sponsors.id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )

    event = relationship("Event", back_populates="sponsors")
    sponsor = relationship("Sponsor", back_populates="events")

    def __repr__(self) -> str:
        return f"<EventSponsor(event_id={self.event_id}, sponsor_id={self.sponsor_id})>"
