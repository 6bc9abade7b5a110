"""
TeamProposal and ProposalMember models for the proposal registration flow.

A user registers one team (the proposal) with 1 to 5 members and a
reference to an uploaded project file. Judges and admins move the
proposal through an approval workflow.

Design Rationale:
- One proposal per owner (unique user_id): resubmitting updates it
- Members are plain contact records; user_id is optional
- File contents live in external storage; only the reference is kept
"""

import enum

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, TimestampMixin, ID_LENGTH


class ApprovalStatus(str, enum.Enum):
    """Review state of a team proposal."""
    PENDING = "pending"     # Default - awaiting review
    APPROVED = "approved"
    REJECTED = "rejected"


MIN_PROPOSAL_MEMBERS = 1
MAX_PROPOSAL_MEMBERS = 5


class TeamProposal(Base, IdMixin, TimestampMixin):
    """
    Team registration header.

    Attributes:
        id: Primary key (UUIDv7 hex)
        team_name: Team name
        project_file: Uploaded proposal reference (URL or storage key)
        project_file_name: Original file name of the proposal
        approval_status: pending, approved or rejected
        user_id: FK to users, the owner (unique, CASCADE on delete)
        created_at: Submission timestamp

    Relationships:
        owner: Submitting user (one-to-one)
        members: Team members (one-to-many, CASCADE)
    """

    __tablename__ = "team_details"

    team_name = Column(String(255), nullable=False)
    project_file = Column(String(2048), nullable=True)
    project_file_name = Column(String(255), nullable=True)
    approval_status = Column(
        String(20),
        default=ApprovalStatus.PENDING.value,
        nullable=False,
        index=True
    )
    user_id = Column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False
    )

    owner = relationship("User", back_populates="proposal")
    members = relationship(
        "ProposalMember",
        back_populates="team",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProposalMember.id",
    )

    def __repr__(self) -> str:
        return (
            f"<TeamProposal(id={self.id}, team_name='{self.team_name}', "
            f"status={self.approval_status})>"
        )


class ProposalMember(Base, IdMixin):
    """
    Member of a proposal team.

    Attributes:
        id: Primary key (UUIDv7 hex)
        team_id: FK to team_details (CASCADE on delete)
        user_id: Optional FK to users (CASCADE on delete)
        role: Role within the team (e.g. "leader", "member")
        full_name: Member full name
        email: Member email
        contact_number: Phone number
        food_preference: Catering preference
        tshirt_size: T-shirt size
        allergies: Known allergies
    """

    __tablename__ = "team_members"

    team_id = Column(
        String(ID_LENGTH),
        ForeignKey("team_details.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True
    )
    role = Column(String(50), nullable=False, default="member")
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    contact_number = Column(String(50), nullable=True)
    food_preference = Column(String(50), nullable=True)
    tshirt_size = Column(String(10), nullable=True)
    allergies = Column(String(500), nullable=True)

    team = relationship("TeamProposal", back_populates="members")

    def __repr__(self) -> str:
        return f"<ProposalMember(id={self.id}, team_id={self.team_id}, email='{self.email}')>"
