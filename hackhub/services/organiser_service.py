"""
Organiser service for the organiser roster.

Organisers are users carrying the is_organiser role. The roster is the
list admins pick from when assigning organisers to events.
"""

from typing import List

from sqlalchemy.orm import Session

from hackhub.models import User
from hackhub.repositories import UserRepository
from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.user_service import UserService


class OrganiserService:
    """
    Service for managing the organiser role.

    Usage:
        >>> service = OrganiserService(db_session, app_logger)
        >>> service.set_organiser_status(ctx, user.id, True)
        >>> [u.email for u in service.get_all_organisers()]
    """

    def __init__(self, db: Session, app_logger: AppLogger):
        self.db = db
        self.users = UserRepository(db)
        self.user_service = UserService(db, app_logger)

    def get_all_organisers(self) -> List[User]:
        """List users holding the organiser role, by name."""
        return self.users.find_organisers()

    def set_organiser_status(self, ctx: LogContext, user_id: str, is_organiser: bool) -> User:
        """
        Grant or revoke the organiser role.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self.user_service.set_organiser_status(ctx, user_id, is_organiser)
