"""
User service for managing signed-in users and their roles.

Provides business logic for:
- First sign-in provisioning and profile refresh from the identity provider
- Profile lookup, listing and search
- Judge and admin role changes

Design:
- Users are created on first sign-in; email is globally unique
- Emails listed in ADMIN_EMAILS are granted admin on sign-in
- Role flags are the only authorization data stored on the user
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from hackhub.config.settings import is_admin_email
from hackhub.models import User
from hackhub.repositories import UserRepository
from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from hackhub.services.transaction import unit_of_work


class UserService:
    """
    Service for managing users.

    Usage:
        >>> service = UserService(db_session, app_logger)
        >>> user = service.sign_in(ctx, email="ada@example.com", name="Ada")
        >>> service.set_judge_status(ctx, user.id, True)
    """

    def __init__(self, db: Session, app_logger: AppLogger):
        """
        Initialize user service.

        Args:
            db: SQLAlchemy database session
            app_logger: Application log facade
        """
        self.db = db
        self.app_logger = app_logger
        self.users = UserRepository(db)

    def sign_in(
        self,
        ctx: LogContext,
        email: str,
        name: Optional[str] = None,
        image: Optional[str] = None,
        oauth_subject: Optional[str] = None,
        email_verified: bool = False,
    ) -> User:
        """
        Create or refresh a user from identity provider claims.

        The first sign-in creates the user. Later sign-ins refresh name,
        image and subject, and record the login time.

        Raises:
            ValidationError: If email is missing
        """
        log_ctx = ctx.with_context("UserService:sign_in")
        if not email or not email.strip():
            raise ValidationError("Email is required", field="email")
        email = email.strip().lower()
        meta = {"email": email}

        now = datetime.utcnow()
        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: UserAlreadyExistsError(email),
        ):
            user = self.users.find_by_email(email)
            if user is None:
                user = self.users.create(
                    email=email,
                    name=name,
                    image=image,
                    oauth_subject=oauth_subject,
                    email_verified=now if email_verified else None,
                    is_admin=is_admin_email(email),
                    last_login_at=now,
                )
                created = True
            else:
                changes = {"last_login_at": now}
                if name:
                    changes["name"] = name
                if image:
                    changes["image"] = image
                if oauth_subject:
                    changes["oauth_subject"] = oauth_subject
                if email_verified and user.email_verified is None:
                    changes["email_verified"] = now
                if is_admin_email(email) and not user.is_admin:
                    changes["is_admin"] = True
                user = self.users.update(user.id, **changes)
                created = False

        self.app_logger.info(
            "User created on first sign-in" if created else "User signed in",
            log_ctx,
            meta={**meta, "userId": user.id},
        )
        return user

    def get_user_profile(self, ctx: LogContext, user_id: str) -> User:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self.users.find_by_id(user_id)
        if user is None:
            self.app_logger.warn(
                "User not found",
                ctx.with_context("UserService:get_user_profile"),
                meta={"userId": user_id},
            )
            raise UserNotFoundError(user_id)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users.find_by_id(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.users.find_by_email(email)

    def get_all_users(self) -> List[User]:
        return self.users.find_all()

    def search_users(self, query: str, limit: int = 20) -> List[User]:
        """Search users by name or email; an empty query returns nothing."""
        if not query or not query.strip():
            return []
        return self.users.search(query, limit=limit)

    def set_judge_status(self, ctx: LogContext, user_id: str, is_judge: bool) -> User:
        """
        Grant or revoke the judge role.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self._set_role(ctx, "set_judge_status", user_id, is_judge=is_judge)

    def set_admin_status(self, ctx: LogContext, user_id: str, is_admin: bool) -> User:
        """
        Grant or revoke the admin role.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self._set_role(ctx, "set_admin_status", user_id, is_admin=is_admin)

    def set_organiser_status(self, ctx: LogContext, user_id: str, is_organiser: bool) -> User:
        """
        Grant or revoke the organiser role.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self._set_role(ctx, "set_organiser_status", user_id, is_organiser=is_organiser)

    def _set_role(self, ctx: LogContext, operation: str, user_id: str, **role) -> User:
        log_ctx = ctx.with_context(f"UserService:{operation}")
        meta = {"userId": user_id, **role}
        self.app_logger.info("Attempting to change user role", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            user = self.users.update(user_id, **role)
            if user is None:
                raise UserNotFoundError(user_id)

        self.app_logger.info("User role changed successfully", log_ctx, meta=meta)
        return user
