"""
Event team endpoints.

- GET /events/{event_id}/teams - Teams with their members
- POST /events/{event_id}/teams - Create a team (signed-in users)
- DELETE /events/{event_id}/teams/{team_id} - Delete a team (organiser/admin)
- POST /events/{event_id}/teams/{team_id}/join - Join a team (registered participant)
- DELETE /events/{event_id}/teams/{team_id}/leave - Leave a team

Team names are unique per event, case-insensitively. Joining requires
an existing registration for the event; leaving keeps it.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from hackhub.api.dependencies import get_event_service, get_log_context
from hackhub.middleware.auth import require_auth, require_organiser_or_admin
from hackhub.models import User
from hackhub.schemas import (
    MessageData,
    ParticipantLinkResponse,
    SuccessResponse,
    TeamCreate,
    TeamResponse,
)
from hackhub.services import EventService, LogContext


router = APIRouter(prefix="/events/{event_id}/teams", tags=["Event Teams"])


@router.get(
    "",
    response_model=SuccessResponse[List[TeamResponse]],
    summary="List event teams",
)
async def list_teams(
    event_id: str,
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    teams = service.list_teams_for_event(ctx, event_id)
    return SuccessResponse(data=[TeamResponse.from_team(t) for t in teams])


@router.post(
    "",
    response_model=SuccessResponse[TeamResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create event team",
)
async def create_team(
    event_id: str,
    body: TeamCreate,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    team = service.create_team_for_event(ctx, event_id, body.name)
    return SuccessResponse(data=TeamResponse.from_team(team))


@router.delete(
    "/{team_id}",
    response_model=SuccessResponse[MessageData],
    summary="Delete event team",
)
async def delete_team(
    event_id: str,
    team_id: str,
    user: User = Depends(require_organiser_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    service.delete_team(ctx, event_id, team_id)
    return SuccessResponse(data=MessageData(message="Team deleted"))


@router.post(
    "/{team_id}/join",
    response_model=SuccessResponse[ParticipantLinkResponse],
    summary="Join team",
)
async def join_team(
    event_id: str,
    team_id: str,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    participant = service.assign_participant_to_team(ctx, event_id, user.id, team_id)
    return SuccessResponse(data=ParticipantLinkResponse.model_validate(participant))


@router.delete(
    "/{team_id}/leave",
    response_model=SuccessResponse[ParticipantLinkResponse],
    summary="Leave team",
)
async def leave_team(
    event_id: str,
    team_id: str,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: EventService = Depends(get_event_service),
):
    """Leave the given team; answers 404 if the caller is not in it."""
    participant = service.remove_participant_from_team(ctx, event_id, user.id, team_id=team_id)
    return SuccessResponse(data=ParticipantLinkResponse.model_validate(participant))
