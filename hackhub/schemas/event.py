"""
Pydantic schemas for event API request/response validation.

Provides data validation and serialization for:
- Event creation and partial update requests
- Team, photo and sponsor assignment requests
- Event list, detail and team responses

Design:
- Wire format is camelCase (startDate, isActive, teamId)
- Dates are stored as naive UTC; aware input is converted
- end_date must not be before start_date
- Users embedded in responses use the sanitized UserSummary projection
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from hackhub.schemas.common import CamelModel, UserSummary, to_naive_utc


# ============================================================================
# Request Schemas
# ============================================================================


class EventCreate(CamelModel):
    """
    Schema for creating a new event.

    Required:
        name, description, start_date, end_date, location

    Optional:
        poster: Poster image URL
        is_active: Listed as active (default: true)
    """

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    location: str = Field(..., min_length=1, max_length=255)
    poster: Optional[str] = Field(default=None, max_length=1024)
    is_active: bool = True

    @field_validator("name", "description", "location")
    @classmethod
    def validate_not_whitespace(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Must not be empty or whitespace")
        return v.strip()

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime) -> datetime:
        return to_naive_utc(v)

    @model_validator(mode="after")
    def validate_date_range(self) -> "EventCreate":
        if self.end_date < self.start_date:
            raise ValueError("End date must be on or after start date")
        return self

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Spring Hack 2025",
                "description": "48 hour student hackathon",
                "startDate": "2025-04-01T09:00:00Z",
                "endDate": "2025-04-03T09:00:00Z",
                "location": "Main Hall",
                "poster": "https://cdn.example.com/posters/spring.png",
            }
        }
    }


class EventUpdate(CamelModel):
    """
    Schema for updating an event.

    All fields are optional - only provided fields will be updated.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    poster: Optional[str] = Field(default=None, max_length=1024)
    is_active: Optional[bool] = None

    @field_validator("name", "description", "location")
    @classmethod
    def validate_not_whitespace(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Must not be empty or whitespace")
        return v.strip() if v is not None else v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)

    @model_validator(mode="after")
    def validate_date_range(self) -> "EventUpdate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date must be on or after start date")
        return self


class TeamCreate(CamelModel):
    """Request body for creating an event team: {"name": "..."}."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_not_whitespace(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Team name must not be empty or whitespace")
        return v.strip()


class SponsorIdRequest(CamelModel):
    """Request body naming a sponsor: {"sponsorId": "..."}."""

    sponsor_id: str = Field(..., min_length=1)


class PhotoCreate(CamelModel):
    url: str = Field(..., min_length=1, max_length=1024)
    caption: Optional[str] = Field(default=None, max_length=500)


class PhotosCreate(CamelModel):
    """Request body for attaching photos to an event."""

    photos: List[PhotoCreate] = Field(..., min_length=1)


# ============================================================================
# Response Schemas
# ============================================================================


class EventResponse(CamelModel):
    """Event as listed and returned after writes."""

    id: str
    name: str
    description: str
    start_date: datetime
    end_date: datetime
    location: str
    poster: Optional[str] = None
    is_active: bool
    created_at: datetime


class PhotoResponse(CamelModel):
    id: str
    event_id: str
    url: str
    caption: Optional[str] = None


class SponsorResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None


class ParticipantResponse(CamelModel):
    """A registration: the sanitized user and their team, if any."""

    user: UserSummary
    team_id: Optional[str] = None
    created_at: datetime


class TeamResponse(CamelModel):
    """Event team with the users assigned to it."""

    id: str
    event_id: str
    name: str
    created_at: datetime
    members: List[UserSummary] = []

    @classmethod
    def from_team(cls, team) -> "TeamResponse":
        return cls(
            id=team.id,
            event_id=team.event_id,
            name=team.name,
            created_at=team.created_at,
            members=[UserSummary.model_validate(m.user) for m in team.members],
        )


class EventDetailResponse(EventResponse):
    """Event with everything attached to it."""

    photos: List[PhotoResponse] = []
    teams: List[TeamResponse] = []
    sponsors: List[SponsorResponse] = []
    participants: List[ParticipantResponse] = []
    judges: List[UserSummary] = []
    organisers: List[UserSummary] = []

    @classmethod
    def from_event(cls, event) -> "EventDetailResponse":
        base = EventResponse.model_validate(event).model_dump()
        return cls(
            **base,
            photos=[PhotoResponse.model_validate(p) for p in event.photos],
            teams=[TeamResponse.from_team(t) for t in event.teams],
            sponsors=[SponsorResponse.model_validate(s.sponsor) for s in event.sponsors],
            participants=[ParticipantResponse.model_validate(p) for p in event.participants],
            judges=[UserSummary.model_validate(j.user) for j in event.judges],
            organisers=[UserSummary.model_validate(o.user) for o in event.organisers],
        )


class ParticipantLinkResponse(CamelModel):
    """Result of registering or moving a participant."""

    event_id: str
    user_id: str
    team_id: Optional[str] = None
