"""
Sponsor catalogue endpoints.

- GET /sponsors - All sponsors
- POST /sponsors - Create a sponsor (admin)
- DELETE /sponsors/{sponsor_id} - Delete a sponsor and its event links (admin)
"""

from typing import List

from fastapi import APIRouter, Depends, status

from hackhub.api.dependencies import get_log_context, get_sponsor_service
from hackhub.middleware.auth import require_admin
from hackhub.models import User
from hackhub.schemas import MessageData, SponsorCreate, SponsorResponse, SuccessResponse
from hackhub.services import LogContext, SponsorService


router = APIRouter(prefix="/sponsors", tags=["Sponsors"])


@router.get(
    "",
    response_model=SuccessResponse[List[SponsorResponse]],
    summary="List sponsors",
)
async def list_sponsors(service: SponsorService = Depends(get_sponsor_service)):
    sponsors = service.get_all_sponsors()
    return SuccessResponse(data=[SponsorResponse.model_validate(s) for s in sponsors])


@router.post(
    "",
    response_model=SuccessResponse[SponsorResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create sponsor",
)
async def create_sponsor(
    body: SponsorCreate,
    user: User = Depends(require_admin),
    ctx: LogContext = Depends(get_log_context),
    service: SponsorService = Depends(get_sponsor_service),
):
    sponsor = service.create_sponsor(ctx, **body.model_dump())
    return SuccessResponse(data=SponsorResponse.model_validate(sponsor))


@router.delete(
    "/{sponsor_id}",
    response_model=SuccessResponse[MessageData],
    summary="Delete sponsor",
)
async def delete_sponsor(
    sponsor_id: str,
    user: User = Depends(require_admin),
    ctx: LogContext = Depends(get_log_context),
    service: SponsorService = Depends(get_sponsor_service),
):
    service.delete_sponsor(ctx, sponsor_id)
    return SuccessResponse(data=MessageData(message="Sponsor deleted"))
