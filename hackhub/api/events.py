"""
Events API endpoints.

Provides event CRUD:
- GET /events - List events, most recent start date first
- POST /events - Create an event (organiser/admin)
- GET /events/{event_id} - Event with photos, teams, sponsors and people
- PUT /events/{event_id} - Partial update (organiser/admin)
- DELETE /events/{event_id} - Delete with everything attached (organiser/admin)

Judges, organisers, participants, sponsors and photos are managed in
event_assignments.py; event teams in event_teams.py.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hackhub.api.dependencies import get_event_service, get_log_context
from hackhub.config.settings import get_settings
from hackhub.middleware.auth import require_organiser_or_admin
from hackhub.models import User
from hackhub.schemas import (
    EventCreate,
    EventDetailResponse,
    EventResponse,
    EventUpdate,
    MessageData,
    SuccessResponse,
)
from hackhub.services import EventService, LogContext
from hackhub.utils.logging_config import get_logger


logger = get_logger("api")

router = APIRouter(prefix="/events", tags=["Events"])


# ============================================================================
# API Endpoints
# ============================================================================


@router.get(
    "",
    response_model=SuccessResponse[List[EventResponse]],
    summary="List events",
)
async def list_events(
    limit: int = Query(10, ge=1, description="Page size"),
    offset: int = Query(0, ge=0, description="Rows to skip"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    """
    List events ordered by start date, newest first.

    Query Parameters:
        limit: Page size, capped by HACKHUB_EVENT_LIST_LIMIT
        offset: Rows to skip
        isActive: Only active (true) or inactive (false) events
    """
    limit = min(limit, get_settings().event_list_limit)
    events = service.get_event_list(ctx, limit=limit, offset=offset, is_active=is_active)
    return SuccessResponse(data=[EventResponse.model_validate(e) for e in events])


@router.post(
    "",
    response_model=SuccessResponse[EventResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create event",
)
async def create_event(
    body: EventCreate,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    event = service.create_event(ctx, **body.model_dump())
    logger.info("Created event", extra={"event_id": event.id, "user_id": user.id})
    return SuccessResponse(data=EventResponse.model_validate(event))


@router.get(
    "/{event_id}",
    response_model=SuccessResponse[EventDetailResponse],
    summary="Get event details",
)
async def get_event(
    event_id: str,
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    event = service.get_event_details(ctx, event_id)
    return SuccessResponse(data=EventDetailResponse.from_event(event))


@router.put(
    "/{event_id}",
    response_model=SuccessResponse[EventResponse],
    summary="Update event",
)
async def update_event(
    event_id: str,
    body: EventUpdate,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    """
    Update an event. Only fields present in the body change; the
    resulting date range must stay ordered.
    """
    changes = {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "poster"
    }
    event = service.update_event(ctx, event_id, **changes)
    return SuccessResponse(data=EventResponse.model_validate(event))


@router.delete(
    "/{event_id}",
    response_model=SuccessResponse[MessageData],
    summary="Delete event",
)
async def delete_event(
    event_id: str,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    deleted_id = service.delete_event(ctx, event_id)
    return SuccessResponse(data=MessageData(message=f"Event {deleted_id} deleted"))
