"""
Pydantic schemas for user role changes.
"""

from pydantic import Field

from hackhub.schemas.common import CamelModel


class JudgeStatusUpdate(CamelModel):
    """Body of PATCH /admin/users/{userId}/judge."""

    is_judge: bool


class AdminStatusUpdate(CamelModel):
    """Body of PATCH /admin/users/{userId}/admin."""

    is_admin: bool


class OrganiserStatusUpdate(CamelModel):
    """Body of POST /organisers."""

    user_id: str = Field(..., min_length=1)
    is_organiser: bool
