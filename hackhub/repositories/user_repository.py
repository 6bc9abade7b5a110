"""
Data access for users.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, or_

from hackhub.models import User
from hackhub.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Queries and writes for the users table."""

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Look up a user by email, ignoring case."""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.strip().lower())
            .first()
        )

    def find_all(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def find_organisers(self) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.is_organiser.is_(True))
            .order_by(User.name)
            .all()
        )

    def search(self, query: str, limit: int = 20) -> List[User]:
        """Case-insensitive substring match on name or email."""
        term = f"%{query.strip().lower()}%"
        return (
            self.db.query(User)
            .filter(
                or_(
                    func.lower(User.name).like(term),
                    func.lower(User.email).like(term),
                )
            )
            .order_by(User.name)
            .limit(limit)
            .all()
        )

    def create(self, **fields) -> User:
        return self._add(User(**fields))

    def update(self, user_id: str, **fields) -> Optional[User]:
        return self._apply(self.find_by_id(user_id), fields)

    def delete(self, user_id: str) -> Optional[str]:
        user = self._remove(self.find_by_id(user_id))
        return user.id if user else None

    # ------------------------------------------------------------------
    # Counts for the admin dashboard
    # ------------------------------------------------------------------

    def count(self) -> int:
        return self.db.query(func.count(User.id)).scalar() or 0

    def count_created_since(self, since: datetime) -> int:
        return (
            self.db.query(func.count(User.id))
            .filter(User.created_at >= since)
            .scalar()
        ) or 0

    def count_admins(self) -> int:
        return (
            self.db.query(func.count(User.id))
            .filter(User.is_admin.is_(True))
            .scalar()
        ) or 0

    def count_judges(self) -> int:
        return (
            self.db.query(func.count(User.id))
            .filter(User.is_judge.is_(True))
            .scalar()
        ) or 0

    def count_regular(self) -> int:
        """Users holding neither the admin nor the judge role."""
        return (
            self.db.query(func.count(User.id))
            .filter(User.is_admin.is_(False), User.is_judge.is_(False))
            .scalar()
        ) or 0
