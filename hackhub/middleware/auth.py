"""
Authentication and role dependencies for API routes.

Provides:
- get_current_user: Resolve the signed-in user from the session cookie
- get_optional_user: Same, but None for anonymous requests
- require_auth: Semantic alias of get_current_user
- require_admin / require_organiser_or_admin / require_judge_or_admin:
  role gates answering 403 when the role is missing

Role checks read the flags on the freshly loaded user row, so a role
change takes effect on the next request without signing in again.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from hackhub.db.database import get_db
from hackhub.models import User
from hackhub.repositories import UserRepository


def _session_user_id(request: Request) -> Optional[str]:
    # SessionMiddleware may be absent when no secret is configured
    if "session" not in request.scope:
        return None
    return request.session.get("user_id")


async def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    """
    FastAPI dependency returning the authenticated user.

    Raises:
        HTTPException 401: If there is no session or its user no longer exists
    """
    user_id = _session_user_id(request)
    user = UserRepository(db).find_by_id(user_id) if user_id else None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


async def get_optional_user(
    request: Request,
    db: Session = Depends(get_db),
) -> Optional[User]:
    """
    FastAPI dependency for optional authentication.

    Returns the user if signed in, None otherwise.
    """
    user_id = _session_user_id(request)
    if not user_id:
        return None
    return UserRepository(db).find_by_id(user_id)


async def require_auth(user: User = Depends(get_current_user)) -> User:
    """
    FastAPI dependency that requires authentication.

    Example:
        @router.get("/users/me")
        async def me(user: User = Depends(require_auth)):
            return user
    """
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Raises:
        HTTPException 403: If the user is not an admin
    """
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


async def require_organiser_or_admin(user: User = Depends(get_current_user)) -> User:
    """
    Raises:
        HTTPException 403: If the user is neither organiser nor admin
    """
    if not (user.is_admin or user.is_organiser):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Organiser or admin access required",
        )
    return user


async def require_judge_or_admin(user: User = Depends(get_current_user)) -> User:
    """
    Raises:
        HTTPException 403: If the user is neither judge nor admin
    """
    if not (user.is_admin or user.is_judge):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Judge or admin access required",
        )
    return user
