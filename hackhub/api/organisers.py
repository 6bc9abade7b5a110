"""
Organiser role endpoints.

- GET /organisers - Users holding the organiser role
- POST /organisers - Grant or revoke the role {userId, isOrganiser} (admin)
"""

from typing import List

from fastapi import APIRouter, Depends

from hackhub.api.dependencies import get_log_context, get_organiser_service
from hackhub.middleware.auth import require_admin
from hackhub.models import User
from hackhub.schemas import (
    OrganiserStatusUpdate,
    SuccessResponse,
    UserResponse,
    UserSummary,
)
from hackhub.services import LogContext, OrganiserService


router = APIRouter(prefix="/organisers", tags=["Organisers"])


@router.get(
    "",
    response_model=SuccessResponse[List[UserSummary]],
    summary="List organisers",
)
async def list_organisers(service: OrganiserService = Depends(get_organiser_service)):
    organisers = service.get_all_organisers()
    return SuccessResponse(data=[UserSummary.model_validate(u) for u in organisers])


@router.post(
    "",
    response_model=SuccessResponse[UserResponse],
    summary="Set organiser role",
)
async def set_organiser_status(
    body: OrganiserStatusUpdate,
    user: User = Depends(require_admin),
    ctx: LogContext = Depends(get_log_context),
    service: OrganiserService = Depends(get_organiser_service),
):
    updated = service.set_organiser_status(ctx, body.user_id, body.is_organiser)
    return SuccessResponse(data=UserResponse.model_validate(updated))
