"""
Application log endpoints (admin).

- GET /logs?userId=&level=&limit=&offset= - Newest entries first
- GET /logs/trace/{correlation_id} - Every entry of one request, in order
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hackhub.api.dependencies import get_app_log_service
from hackhub.config.settings import get_settings
from hackhub.middleware.auth import require_admin
from hackhub.models import User
from hackhub.schemas import AppLogResponse, SuccessResponse
from hackhub.services import AppLogService


router = APIRouter(prefix="/logs", tags=["Logs"])


@router.get(
    "",
    response_model=SuccessResponse[List[AppLogResponse]],
    summary="Query application logs",
)
async def get_logs(
    user_id: Optional[str] = Query(None, alias="userId"),
    level: Optional[str] = Query(None, description="info, warn, error or debug"),
    limit: Optional[int] = Query(None, description="Page size (1-1000)"),
    offset: int = Query(0),
    user: User = Depends(require_admin),
    service: AppLogService = Depends(get_app_log_service),
):
    """Out-of-range level, limit or offset answers 400 BAD_REQUEST."""
    if limit is None:
        limit = get_settings().log_query_limit
    logs = service.get_logs(user_id=user_id, level=level, limit=limit, offset=offset)
    return SuccessResponse(data=[AppLogResponse.model_validate(entry) for entry in logs])


@router.get(
    "/trace/{correlation_id}",
    response_model=SuccessResponse[List[AppLogResponse]],
    summary="Trace one request",
)
async def get_trace(
    correlation_id: str,
    user: User = Depends(require_admin),
    service: AppLogService = Depends(get_app_log_service),
):
    logs = service.get_trace(correlation_id)
    return SuccessResponse(data=[AppLogResponse.model_validate(entry) for entry in logs])
