"""
Shared pydantic schemas: camelCase base model, response envelope and
the sanitized user projection embedded in other responses.

Every API route answers with the same envelope:
- success: {"success": true, "data": ...}
- failure: {"success": false, "error": {"message": "...", "code": "NOT_FOUND"}}
"""

from datetime import datetime, timezone
from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model exchanged as camelCase JSON.

    Fields are declared in snake_case and accepted under either name.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# ============================================================================
# Envelope
# ============================================================================


T = TypeVar("T")

ErrorCode = Literal[
    "BAD_REQUEST",
    "UNAUTHORIZED",
    "FORBIDDEN",
    "NOT_FOUND",
    "CONFLICT",
    "INTERNAL_SERVER_ERROR",
]


class SuccessResponse(BaseModel, Generic[T]):
    """Successful response envelope."""

    success: Literal[True] = True
    data: T


class ErrorDetail(BaseModel):
    message: str
    code: ErrorCode


class ErrorResponse(BaseModel):
    """Failed response envelope."""

    success: Literal[False] = False
    error: ErrorDetail


class MessageData(BaseModel):
    """Payload for operations that only confirm what they did."""

    message: str


# ============================================================================
# Users
# ============================================================================


class UserSummary(CamelModel):
    """
    Sanitized user projection embedded in event and team responses.

    Only public profile fields; roles and provider data are never exposed.
    """

    id: str
    name: Optional[str] = None
    email: str
    image: Optional[str] = None


class UserResponse(UserSummary):
    """Full user view for the user itself and for admins."""

    is_admin: bool = False
    is_judge: bool = False
    is_organiser: bool = False
    created_at: datetime


class UserIdRequest(CamelModel):
    """Request body naming a user: {"userId": "..."}."""

    user_id: str = Field(..., min_length=1, description="User ID")
