"""
Identifier and timestamp mixins for SQLAlchemy models.

Primary keys are UUIDv7 values (time-ordered) rendered as 32-character
lowercase hex strings. The same format is used on the wire, so ids are
never translated between the API and the database.

Example id: 0190f5c2a7b87c1e9a3f4b2d6e8c0a15
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, String
from uuid_extensions import uuid7


ID_LENGTH = 32


def generate_id() -> str:
    """
    Generate a new primary key value.

    Returns:
        32-character hex string of a fresh UUIDv7
    """
    return uuid7().hex


class IdMixin:
    """
    Mixin providing a string primary key.

    Adds:
    - id: UUIDv7 hex string, generated on insert when not supplied

    Usage:
        class MyEntity(Base, IdMixin):
            __tablename__ = "my_entities"
    """

    id = Column(String(ID_LENGTH), primary_key=True, default=generate_id)


class TimestampMixin:
    """
    Mixin providing a creation timestamp.

    Adds:
    - created_at: UTC timestamp set on insert
    """

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
