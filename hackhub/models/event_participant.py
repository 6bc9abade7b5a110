"""
EventParticipant model for event registrations.

Junction table linking users to the events they registered for. A
participant may optionally belong to one of the event's teams.

Design Rationale:
- Composite primary key (event_id, user_id): a user registers once per event
- CASCADE on event or user delete
- SET NULL on team delete: the registration outlives the team
"""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import TimestampMixin, ID_LENGTH


class EventParticipant(Base, TimestampMixin):
    """
    Event-User registration link.

    Attributes:
        event_id: FK to events (CASCADE on delete), part of primary key
        user_id: FK to users (CASCADE on delete), part of primary key
        team_id: FK to event_teams (SET NULL on delete), nullable
        created_at: When the user registered

    Relationships:
        event: Parent event
        user: Registered user
        team: Assigned team, if any
    """

    __tablename__ = "event_participants"

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
    team_id = Column(
        String(ID_LENGTH),
        ForeignKey("event_teams.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    event = relationship("Event", back_populates="participants")
    user = relationship("User")
    team = relationship("EventTeam", back_populates="members")

    def __repr__(self) -> str:
        return (
            f"<EventParticipant("
            f"event_id={self.event_id}, "
            f"user_id={self.user_id}, "
            f"team_id={self.team_id}"
            f")>"
        )
