"""
Event model for hackathons and club events.

An event owns its photos, teams, and the links that attach users to it
as participants, judges or organisers. Deleting an event removes all of
them; users and sponsors themselves are untouched.
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, Index
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, TimestampMixin


class Event(Base, IdMixin, TimestampMixin):
    """
    Event model.

    Attributes:
        id: Primary key (UUIDv7 hex)
        name: Event name
        description: Event description
        start_date: When the event starts
        end_date: When the event ends (not before start_date)
        location: Venue or "online"
        poster: Poster image URL (opaque reference)
        is_active: Whether the event is listed as active
        created_at: Creation timestamp

    Relationships:
        photos: Event photos (one-to-many, CASCADE)
        teams: Event-scoped teams (one-to-many, CASCADE)
        participants: Participant links (one-to-many, CASCADE)
        judges: Judge links (one-to-many, CASCADE)
        organisers: Organiser links (one-to-many, CASCADE)
        sponsors: Sponsor links (one-to-many, CASCADE)

    Indexes:
        - start_date (event listing order)
    """

    __tablename__ = "events"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    location = Column(String(255), nullable=False)
    poster = Column(String(1024), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    photos = relationship(
        "EventPhoto",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    teams = relationship(
        "EventTeam",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EventTeam.name",
    )
    participants = relationship(
        "EventParticipant",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    judges = relationship(
        "EventJudge",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    organisers = relationship(
        "EventOrganiser",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    sponsors = relationship(
        "EventSponsor",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_events_start_date", "start_date"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name='{self.name}', start_date={self.start_date})>"
