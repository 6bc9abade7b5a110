"""
EventTeam model for teams formed inside an event.

Team names are unique per event regardless of case: "Alpha" and "alpha"
cannot both exist in the same event. The rule is enforced by a functional
unique index so concurrent creates cannot slip past the service check.
"""

from sqlalchemy import Column, String, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, TimestampMixin, ID_LENGTH


class EventTeam(Base, IdMixin, TimestampMixin):
    """
    Event-scoped team.

    Attributes:
        id: Primary key (UUIDv7 hex)
        event_id: FK to events (CASCADE on delete)
        name: Team name
        created_at: Creation timestamp

    Relationships:
        event: Parent event (many-to-one)
        members: Participant links assigned to this team. Deleting the
            team clears their team reference (SET NULL).

    Constraints:
        - Unique (event_id, lower(name))
    """

    __tablename__ = "event_teams"

    event_id = Column(
        String(ID_LENGTH),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    name = Column(String(255), nullable=False)

    event = relationship("Event", back_populates="teams")
    members = relationship(
        "EventParticipant",
        back_populates="team",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<EventTeam(id={self.id}, event_id={self.event_id}, name='{self.name}')>"


Index(
    "uq_event_teams_event_lower_name",
    EventTeam.event_id,
    func.lower(EventTeam.name),
    unique=True,
)
