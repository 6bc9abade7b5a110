"""
User model for people signing in through the identity provider.

Users are created on first sign-in. Role flags decide what a user may do:
admins manage everything, organisers run events, judges review team
proposals. Everyone else is a regular participant.
"""

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship

from hackhub.models import Base
from hackhub.models.mixins import IdMixin, TimestampMixin


class User(Base, IdMixin, TimestampMixin):
    """
    User model.

    Attributes:
        id: Primary key (UUIDv7 hex)
        name: Display name from the identity provider
        email: Email address (unique)
        image: Avatar URL
        is_admin: Administrator role
        is_judge: Judge role (reviews proposals)
        is_organiser: Organiser role (manages events)
        email_verified: When the provider verified the email
        oauth_subject: Provider "sub" claim
        last_login_at: Last successful sign-in
        created_at: Creation timestamp

    Relationships:
        proposal: Team proposal owned by this user (one-to-one)

    Constraints:
        - email must be unique
    """

    __tablename__ = "users"

    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    image = Column(String(1024), nullable=True)

    # Roles
    is_admin = Column(Boolean, default=False, nullable=False)
    is_judge = Column(Boolean, default=False, nullable=False)
    is_organiser = Column(Boolean, default=False, nullable=False)

    # Identity provider data
    email_verified = Column(DateTime, nullable=True)
    oauth_subject = Column(String(255), nullable=True)
    last_login_at = Column(DateTime, nullable=True)

    proposal = relationship(
        "TeamProposal",
        back_populates="owner",
        uselist=False,
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
