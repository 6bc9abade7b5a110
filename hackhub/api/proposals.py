"""
Team proposal endpoints.

Owner flow (signed-in user):
- POST /teams - Submit or resubmit the caller's team (1 to 5 members)
- GET /teams/mine - The caller's team
- PUT /teams/{team_id}/proposal - Replace the proposal file
- POST /team-members, PUT/DELETE /team-members/{member_id} - Edit members
- GET /registration-status - Whether the caller has submitted a team

Review flow (judge/admin):
- GET /proposal?status= - List proposals
- POST /proposal - Set approval status {teamId, status}
- GET /proposal/stats - Totals per status
- GET /proposal/{team_id} - Proposal file reference
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hackhub.api.dependencies import get_log_context, get_proposal_service
from hackhub.middleware.auth import get_optional_user, require_auth, require_judge_or_admin
from hackhub.models import User
from hackhub.schemas import (
    MemberCreateRequest,
    MemberResponse,
    MemberUpdate,
    MessageData,
    ProposalFileResponse,
    ProposalFileUpdate,
    ProposalResponse,
    ProposalStatsResponse,
    ProposalStatusUpdate,
    RegistrationStatusResponse,
    SuccessResponse,
    TeamSubmit,
)
from hackhub.services import LogContext, ProposalService


router = APIRouter(tags=["Proposals"])


# ============================================================================
# Owner flow
# ============================================================================


@router.post(
    "/teams",
    response_model=SuccessResponse[ProposalResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Submit team",
)
async def submit_team(
    body: TeamSubmit,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    """
    Submit the caller's team. A second submission replaces the first:
    same team id and status, new name, file and member list.
    """
    team = service.submit_team(
        ctx,
        owner_id=user.id,
        team_name=body.team_name,
        members=[m.model_dump() for m in body.members],
        project_file=body.project_file,
        project_file_name=body.project_file_name,
    )
    return SuccessResponse(data=ProposalResponse.model_validate(team))


@router.get(
    "/teams/mine",
    response_model=SuccessResponse[ProposalResponse],
    summary="Get own team",
)
async def get_my_team(
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    team = service.get_team_for_owner(ctx, user.id)
    return SuccessResponse(data=ProposalResponse.model_validate(team))


@router.put(
    "/teams/{team_id}/proposal",
    response_model=SuccessResponse[ProposalResponse],
    summary="Replace proposal file",
)
async def update_proposal_file(
    team_id: str,
    body: ProposalFileUpdate,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    team = service.update_proposal_file(
        ctx, team_id, user.id, body.project_file, body.project_file_name
    )
    return SuccessResponse(data=ProposalResponse.model_validate(team))


@router.post(
    "/team-members",
    response_model=SuccessResponse[MemberResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add team member",
)
async def add_member(
    body: MemberCreateRequest,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    member = service.add_member(ctx, body.team_id, user.id, body.model_dump(exclude={"team_id"}))
    return SuccessResponse(data=MemberResponse.model_validate(member))


@router.put(
    "/team-members/{member_id}",
    response_model=SuccessResponse[MemberResponse],
    summary="Update team member",
)
async def update_member(
    member_id: str,
    body: MemberUpdate,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    changes = {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "allergies"
    }
    member = service.update_member(ctx, member_id, user.id, changes)
    return SuccessResponse(data=MemberResponse.model_validate(member))


@router.delete(
    "/team-members/{member_id}",
    response_model=SuccessResponse[MessageData],
    summary="Remove team member",
)
async def remove_member(
    member_id: str,
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    service.remove_member(ctx, member_id, user.id)
    return SuccessResponse(data=MessageData(message="Team member removed"))


@router.get(
    "/registration-status",
    response_model=SuccessResponse[RegistrationStatusResponse],
    summary="Check team registration",
)
async def registration_status(
    user: Optional[User] = Depends(get_optional_user),
    service: ProposalService = Depends(get_proposal_service),
):
    """Anonymous callers are reported as not registered."""
    is_registered = service.get_registration_status(user.id if user else None)
    return SuccessResponse(data=RegistrationStatusResponse(is_registered=is_registered))


# ============================================================================
# Review flow
# ============================================================================


@router.get(
    "/proposal",
    response_model=SuccessResponse[List[ProposalResponse]],
    summary="List proposals",
)
async def list_proposals(
    status_filter: Optional[str] = Query(
        None, alias="status", description="all, pending, approved or rejected"
    ),
    user: User = Depends(require_judge_or_admin),
    service: ProposalService = Depends(get_proposal_service),
):
    teams = service.list_proposals(status_filter)
    return SuccessResponse(data=[ProposalResponse.model_validate(t) for t in teams])


@router.post(
    "/proposal",
    response_model=SuccessResponse[ProposalResponse],
    summary="Set approval status",
)
async def set_proposal_status(
    body: ProposalStatusUpdate,
    user: User = Depends(require_judge_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    team = service.set_approval_status(ctx, body.team_id, body.status)
    return SuccessResponse(data=ProposalResponse.model_validate(team))


@router.get(
    "/proposal/stats",
    response_model=SuccessResponse[ProposalStatsResponse],
    summary="Proposal statistics",
)
async def proposal_stats(
    user: User = Depends(require_judge_or_admin),
    service: ProposalService = Depends(get_proposal_service),
):
    return SuccessResponse(data=ProposalStatsResponse(**service.get_stats()))


@router.get(
    "/proposal/{team_id}",
    response_model=SuccessResponse[ProposalFileResponse],
    summary="Get proposal file",
)
async def get_proposal_file(
    team_id: str,
    user: User = Depends(require_judge_or_admin),
    ctx: LogContext = Depends(get_log_context),
    service: ProposalService = Depends(get_proposal_service),
):
    return SuccessResponse(data=ProposalFileResponse(**service.get_proposal_file(ctx, team_id)))
