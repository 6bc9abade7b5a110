"""
Pydantic schemas for API request/response validation.
"""

from hackhub.schemas.common import (
    CamelModel,
    ErrorDetail,
    ErrorResponse,
    MessageData,
    SuccessResponse,
    UserIdRequest,
    UserResponse,
    UserSummary,
)
from hackhub.schemas.event import (
    EventCreate,
    EventDetailResponse,
    EventResponse,
    EventUpdate,
    ParticipantLinkResponse,
    ParticipantResponse,
    PhotoCreate,
    PhotoResponse,
    PhotosCreate,
    SponsorIdRequest,
    SponsorResponse,
    TeamCreate,
    TeamResponse,
)
from hackhub.schemas.proposal import (
    MemberCreate,
    MemberCreateRequest,
    MemberResponse,
    MemberUpdate,
    ProposalFileResponse,
    ProposalFileUpdate,
    ProposalResponse,
    ProposalStatsResponse,
    ProposalStatusUpdate,
    RegistrationStatusResponse,
    TeamStatusUpdate,
    TeamSubmit,
)
from hackhub.schemas.user import (
    AdminStatusUpdate,
    JudgeStatusUpdate,
    OrganiserStatusUpdate,
)
from hackhub.schemas.sponsor import SponsorCreate
from hackhub.schemas.analytics import DashboardResponse
from hackhub.schemas.app_log import AppLogResponse

__all__ = [
    "CamelModel",
    "ErrorDetail",
    "ErrorResponse",
    "MessageData",
    "SuccessResponse",
    "UserIdRequest",
    "UserResponse",
    "UserSummary",
    "EventCreate",
    "EventDetailResponse",
    "EventResponse",
    "EventUpdate",
    "ParticipantLinkResponse",
    "ParticipantResponse",
    "PhotoCreate",
    "PhotoResponse",
    "PhotosCreate",
    "SponsorIdRequest",
    "SponsorResponse",
    "TeamCreate",
    "TeamResponse",
    "MemberCreate",
    "MemberCreateRequest",
    "MemberResponse",
    "MemberUpdate",
    "ProposalFileResponse",
    "ProposalFileUpdate",
    "ProposalResponse",
    "ProposalStatsResponse",
    "ProposalStatusUpdate",
    "RegistrationStatusResponse",
    "TeamStatusUpdate",
    "TeamSubmit",
    "AdminStatusUpdate",
    "JudgeStatusUpdate",
    "OrganiserStatusUpdate",
    "SponsorCreate",
    "DashboardResponse",
    "AppLogResponse",
]
