"""
Pydantic schemas for team proposal API request/response validation.

Provides data validation and serialization for:
- Team submission with 1 to 5 members
- Owner edits of the proposal file and members
- Reviewer status changes, file retrieval and stats
"""

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from hackhub.models import MAX_PROPOSAL_MEMBERS, MIN_PROPOSAL_MEMBERS
from hackhub.schemas.common import CamelModel, UserSummary


# ============================================================================
# Members
# ============================================================================


class MemberCreate(CamelModel):
    """
    A team member as submitted by the team owner.

    Required:
        full_name, email, contact_number, food_preference, tshirt_size

    Optional:
        role: "leader" or "member" (default: member)
        allergies: Free text
        user_id: Linked account, if the member has signed in
    """

    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    contact_number: str = Field(..., min_length=1, max_length=20)
    food_preference: str = Field(..., min_length=1, max_length=50)
    tshirt_size: str = Field(..., min_length=1, max_length=10)
    allergies: Optional[str] = Field(default=None, max_length=500)
    role: str = Field(default="member", max_length=20)
    user_id: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Full name must not be empty")
        return v.strip()

    @field_validator("contact_number")
    @classmethod
    def validate_contact_number(cls, v: str) -> str:
        v = v.strip()
        if not v.isdigit():
            raise ValueError("Contact number must contain digits only")
        return v


class MemberUpdate(CamelModel):
    """Partial member update; only provided fields are changed."""

    full_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    contact_number: Optional[str] = Field(default=None, min_length=1, max_length=20)
    food_preference: Optional[str] = Field(default=None, min_length=1, max_length=50)
    tshirt_size: Optional[str] = Field(default=None, min_length=1, max_length=10)
    allergies: Optional[str] = Field(default=None, max_length=500)
    role: Optional[str] = Field(default=None, max_length=20)

    @field_validator("contact_number")
    @classmethod
    def validate_contact_number(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip().isdigit():
            raise ValueError("Contact number must contain digits only")
        return v.strip() if v is not None else v


class MemberCreateRequest(MemberCreate):
    """Body of POST /team-members: the member plus the team to add it to."""

    team_id: str = Field(..., min_length=1)


class MemberResponse(CamelModel):
    id: str
    team_id: str
    user_id: Optional[str] = None
    role: str
    full_name: str
    email: str
    contact_number: str
    food_preference: str
    tshirt_size: str
    allergies: Optional[str] = None


# ============================================================================
# Proposals
# ============================================================================


class TeamSubmit(CamelModel):
    """
    Schema for submitting (or resubmitting) the caller's team.

    A resubmission replaces the team name, file and the whole member list.
    """

    team_name: str = Field(..., min_length=1, max_length=255)
    members: List[MemberCreate] = Field(
        ..., min_length=MIN_PROPOSAL_MEMBERS, max_length=MAX_PROPOSAL_MEMBERS
    )
    project_file: Optional[str] = Field(default=None, max_length=1024)
    project_file_name: Optional[str] = Field(default=None, max_length=255)

    @field_validator("team_name")
    @classmethod
    def validate_team_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Team name must not be empty")
        return v.strip()


class ProposalFileUpdate(CamelModel):
    project_file: str = Field(..., min_length=1, max_length=1024)
    project_file_name: str = Field(..., min_length=1, max_length=255)


class TeamStatusUpdate(CamelModel):
    """Body of PATCH /admin/teams/{teamId}/status."""

    status: str = Field(..., description="pending, approved or rejected")


class ProposalStatusUpdate(TeamStatusUpdate):
    """Body of POST /proposal."""

    team_id: str = Field(..., min_length=1)


class ProposalResponse(CamelModel):
    """A team proposal with its members and owner."""

    id: str
    team_name: str
    project_file: Optional[str] = None
    project_file_name: Optional[str] = None
    approval_status: str
    user_id: str
    created_at: datetime
    members: List[MemberResponse] = []
    owner: Optional[UserSummary] = None


class ProposalFileResponse(CamelModel):
    project_file: str
    project_file_name: Optional[str] = None


class ProposalStatsResponse(CamelModel):
    total: int
    pending: int
    approved: int
    rejected: int


class RegistrationStatusResponse(CamelModel):
    is_registered: bool
