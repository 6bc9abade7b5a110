"""
User endpoints for signed-in users.

- GET /users?search= - Find users by name or email (for picking judges,
  organisers and participants)
- GET /users/me - The caller's own profile with role flags
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from hackhub.api.dependencies import get_log_context, get_user_service
from hackhub.middleware.auth import require_auth
from hackhub.models import User
from hackhub.schemas import SuccessResponse, UserResponse, UserSummary
from hackhub.services import LogContext, UserService


router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=SuccessResponse[List[UserSummary]],
    summary="Search users",
)
async def search_users(
    search: str = Query("", description="Name or email fragment"),
    limit: int = Query(20, ge=1, le=100),
    user: User = Depends(require_auth),
    service: UserService = Depends(get_user_service),
):
    """An empty search returns an empty list."""
    users = service.search_users(search, limit=limit)
    return SuccessResponse(data=[UserSummary.model_validate(u) for u in users])


@router.get(
    "/me",
    response_model=SuccessResponse[UserResponse],
    summary="Get own profile",
)
async def get_me(
    user: User = Depends(require_auth),
    ctx: LogContext = Depends(get_log_context),
    service: UserService = Depends(get_user_service),
):
    profile = service.get_user_profile(ctx, user.id)
    return SuccessResponse(data=UserResponse.model_validate(profile))
