"""
Analytics service for the admin dashboard.

Aggregates user, proposal and event counts in a single read.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional

from sqlalchemy.orm import Session

from hackhub.repositories import (
    EventRepository,
    EventParticipantRepository,
    ProposalRepository,
    UserRepository,
)


class AnalyticsService:
    """
    Read-only dashboard statistics.

    Usage:
        >>> AnalyticsService(db_session).get_dashboard()["totalUsers"]
        42
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.proposals = ProposalRepository(db)
        self.events = EventRepository(db)
        self.participants = EventParticipantRepository(db)

    def get_dashboard(self, now: Optional[datetime] = None) -> Dict[str, int]:
        """
        Compute dashboard totals.

        Args:
            now: Reference time for the 7 and 30 day windows (default: utcnow)

        Returns:
            Dict keyed by camelCase metric name
        """
        now = now or datetime.utcnow()
        week_ago = now - timedelta(days=7)
        month_ago = now - timedelta(days=30)
        by_status = self.proposals.count_by_status()

        return {
            "totalUsers": self.users.count(),
            "totalTeams": self.proposals.count(),
            "totalMembers": self.proposals.count_members(),
            "pendingProposals": by_status["pending"],
            "approvedProposals": by_status["approved"],
            "rejectedProposals": by_status["rejected"],
            "newUsers7Days": self.users.count_created_since(week_ago),
            "newUsers30Days": self.users.count_created_since(month_ago),
            "newTeams7Days": self.proposals.count_created_since(week_ago),
            "newTeams30Days": self.proposals.count_created_since(month_ago),
            "adminUsers": self.users.count_admins(),
            "judgeUsers": self.users.count_judges(),
            "regularUsers": self.users.count_regular(),
            "totalEvents": self.events.count(),
            "activeEvents": self.events.count(is_active=True),
            "totalParticipants": self.participants.count(),
        }
