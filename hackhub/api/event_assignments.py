"""
Event assignment endpoints: who and what is attached to an event.

- POST/DELETE /events/{event_id}/judges        {userId}     (organiser/admin)
- POST/DELETE /events/{event_id}/organisers    {userId}     (admin)
- POST/DELETE /events/{event_id}/participants  {userId}     (organiser/admin)
- POST/DELETE /events/{event_id}/register                   (signed-in user, self)
- POST/DELETE /events/{event_id}/sponsors      {sponsorId}  (organiser/admin)
- POST /events/{event_id}/photos, DELETE /events/{event_id}/photos/{photo_id}
"""

from typing import List

from fastapi import APIRouter, Depends, status

from hackhub.api.dependencies import get_event_service, get_log_context
from hackhub.middleware.auth import require_admin, require_auth, require_organiser_or_admin
from hackhub.models import User
from hackhub.schemas import (
    MessageData,
    ParticipantLinkResponse,
    PhotoResponse,
    PhotosCreate,
    SponsorIdRequest,
    SuccessResponse,
    UserIdRequest,
)
from hackhub.services import EventService, LogContext


router = APIRouter(prefix="/events/{event_id}", tags=["Event Assignments"])


def _message(text: str) -> SuccessResponse[MessageData]:
    return SuccessResponse(data=MessageData(message=text))


# ============================================================================
# Judges
# ============================================================================


@router.post(
    "/judges",
    response_model=SuccessResponse[MessageData],
    status_code=status.HTTP_201_CREATED,
    summary="Assign judge",
)
async def add_judge(
    event_id: str,
    body: UserIdRequest,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.add_judge_to_event(ctx, event_id, body.user_id)
    return _message("Judge added to event")


@router.delete(
    "/judges",
    response_model=SuccessResponse[MessageData],
    summary="Remove judge",
)
async def remove_judge(
    event_id: str,
    body: UserIdRequest,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.remove_judge_from_event(ctx, event_id, body.user_id)
    return _message("Judge removed from event")


# ============================================================================
# Organisers
# ============================================================================


@router.post(
    "/organisers",
    response_model=SuccessResponse[MessageData],
    status_code=status.HTTP_201_CREATED,
    summary="Assign organiser",
)
async def add_organiser(
    event_id: str,
    body: UserIdRequest,
    user: User = Depends(require_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.add_organiser_to_event(ctx, event_id, body.user_id)
    return _message("Organiser added to event")


@router.delete(
    "/organisers",
    response_model=SuccessResponse[MessageData],
    summary="Remove organiser",
)
async def remove_organiser(
    event_id: str,
    body: UserIdRequest,
    user: User = Depends(require_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.remove_organiser_from_event(ctx, event_id, body.user_id)
    return _message("Organiser removed from event")


# ============================================================================
# Participants
# ============================================================================


@router.post(
    "/participants",
    response_model=SuccessResponse[ParticipantLinkResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register participant",
)
async def add_participant(
    event_id: str,
    body: UserIdRequest,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    participant = service.register_participant_for_event(ctx, event_id, body.user_id)
    return SuccessResponse(data=ParticipantLinkResponse.model_validate(participant))


@router.delete(
    "/participants",
    response_model=SuccessResponse[MessageData],
    summary="Unregister participant",
)
async def remove_participant(
    event_id: str,
    body: UserIdRequest,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.unregister_participant_from_event(ctx, event_id, body.user_id)
    return _message("Participant removed from event")


@router.post(
    "/register",
    response_model=SuccessResponse[ParticipantLinkResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register yourself",
)
async def register_self(
    event_id: str,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    participant = service.register_participant_for_event(ctx, event_id, user.id)
    return SuccessResponse(data=ParticipantLinkResponse.model_validate(participant))


@router.delete(
    "/register",
    response_model=SuccessResponse[MessageData],
    summary="Unregister yourself",
)
async def unregister_self(
    event_id: str,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.unregister_participant_from_event(ctx, event_id, user.id)
    return _message("Registration cancelled")


# ============================================================================
# Sponsors
# ============================================================================


@router.post(
    "/sponsors",
    response_model=SuccessResponse[MessageData],
    status_code=status.HTTP_201_CREATED,
    summary="Attach sponsor",
)
async def add_sponsor(
    event_id: str,
    body: SponsorIdRequest,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.add_sponsor_to_event(ctx, event_id, body.sponsor_id)
    return _message("Sponsor added to event")


@router.delete(
    "/sponsors",
    response_model=SuccessResponse[MessageData],
    summary="Detach sponsor",
)
async def remove_sponsor(
    event_id: str,
    body: SponsorIdRequest,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.remove_sponsor_from_event(ctx, event_id, body.sponsor_id)
    return _message("Sponsor removed from event")


# ============================================================================
# Photos
# ============================================================================


@router.post(
    "/photos",
    response_model=SuccessResponse[List[PhotoResponse]],
    status_code=status.HTTP_201_CREATED,
    summary="Add photos",
)
async def add_photos(
    event_id: str,
    body: PhotosCreate,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    photos = service.add_event_photos(ctx, event_id, [p.model_dump() for p in body.photos])
    return SuccessResponse(data=[PhotoResponse.model_validate(p) for p in photos])


@router.delete(
    "/photos/{photo_id}",
    response_model=SuccessResponse[MessageData],
    summary="Remove photo",
)
async def remove_photo(
    event_id: str,
    photo_id: str,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.remove_event_photo(ctx, event_id, photo_id)
    return _message("Photo removed")
