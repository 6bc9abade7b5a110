"""
Pydantic schemas for sponsor API request validation.

The response shape lives with the event schemas since sponsors are
mostly read as part of an event.
"""

from typing import Optional

from pydantic import Field, field_validator

from hackhub.schemas.common import CamelModel
from hackhub.schemas.event import SponsorResponse


class SponsorCreate(CamelModel):
    """
    Schema for creating a sponsor.

    Fields:
        name: Display name (required)
        description: Short blurb
        logo: Logo image URL
    """

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    logo: Optional[str] = Field(default=None, max_length=1024)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Sponsor name must not be empty")
        return v.strip()


__all__ = ["SponsorCreate", "SponsorResponse"]
