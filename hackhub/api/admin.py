"""
Admin endpoints.

- GET /admin/users - All users with role flags
- PATCH /admin/users/{user_id}/judge - {isJudge}
- PATCH /admin/users/{user_id}/admin - {isAdmin}
- GET /admin/teams?status= - Team proposals with members
- GET /admin/teams/{team_id} - One proposal
- PATCH /admin/teams/{team_id}/status - {status}
- GET /admin/analytics - Dashboard counters

Every route requires the admin role.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hackhub.api.dependencies import (
    get_analytics_service,
    get_log_context,
    get_proposal_service,
    get_user_service,
)
from hackhub.middleware.auth import require_admin
from hackhub.schemas import (
    AdminStatusUpdate,
    DashboardResponse,
    JudgeStatusUpdate,
    ProposalResponse,
    SuccessResponse,
    TeamStatusUpdate,
    UserResponse,
)
from hackhub.services import AnalyticsService, LogContext, ProposalService, UserService


router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


# ============================================================================
# Users
# ============================================================================


@router.get(
    "/users",
    response_model=SuccessResponse[List[UserResponse]],
    summary="List users",
)
async def list_users(service: UserService = Depends(get_user_service)):
    users = service.get_all_users()
    return SuccessResponse(data=[UserResponse.model_validate(u) for u in users])


@router.patch(
    "/users/{user_id}/judge",
    response_model=SuccessResponse[UserResponse],
    summary="Set judge role",
)
async def set_judge_status(
    user_id: str,
    body: JudgeStatusUpdate,
    ctx: LogContext = Depends(get_log_context),
    service: UserService = Depends(get_user_service),
):
    user = service.set_judge_status(ctx, user_id, body.is_judge)
    return SuccessResponse(data=UserResponse.model_validate(user))


@router.patch(
    "/users/{user_id}/admin",
    response_model=SuccessResponse[UserResponse],
    summary="Set admin role",
)
async def set_admin_status(
    user_id: str,
    body: AdminStatusUpdate,
    ctx: LogContext = Depends(get_log_context),
    service: UserService = Depends(get_user_service),
):
    user = service.set_admin_status(ctx, user_id, body.is_admin)
    return SuccessResponse(data=UserResponse.model_validate(user))


# ============================================================================
# Teams
# ============================================================================


@router.get(
    "/teams",
    response_model=SuccessResponse[List[ProposalResponse]],
    summary="List team proposals",
)
async def list_teams(
    status_filter: Optional[str] = Query(None, alias="status"),
    service: ProposalService = Depends(get_proposal_service),
):
    teams = service.list_proposals(status_filter)
    return SuccessResponse(data=[ProposalResponse.model_validate(t) for t in teams])


@router.get(
    "/teams/{team_id}",
    response_model=SuccessResponse[ProposalResponse],
    summary="Get team proposal",
)
async def get_team(
    team_id: str,
    service: ProposalService = Depends(get_proposal_service),
):
    team = service.get_team_details(team_id)
    return SuccessResponse(data=ProposalResponse.model_validate(team))


@router.patch(
    "/teams/{team_id}/status",
    response_model=SuccessResponse[ProposalResponse],
    summary="Set team approval status",
)
async def set_team_status(
    team_id: str,
    body: TeamStatusUpdate,
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    team = service.set_approval_status(ctx, team_id, body.status)
    return SuccessResponse(data=ProposalResponse.model_validate(team))


# ============================================================================
# Analytics
# ============================================================================


@router.get(
    "/analytics",
    response_model=SuccessResponse[DashboardResponse],
    summary="Dashboard counters",
)
async def get_analytics(service: AnalyticsService = Depends(get_analytics_service)):
    return SuccessResponse(data=DashboardResponse(**service.get_dashboard()))
