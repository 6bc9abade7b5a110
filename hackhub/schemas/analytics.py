"""
Pydantic schema for the admin dashboard counters.
"""

from hackhub.schemas.common import CamelModel


class DashboardResponse(CamelModel):
    """Point-in-time counters; the 7/30 day windows are rolling."""

    total_users: int
    total_teams: int
    total_members: int
    pending_proposals: int
    approved_proposals: int
    rejected_proposals: int
    new_users_7_days: int
    new_users_30_days: int
    new_teams_7_days: int
    new_teams_30_days: int
    admin_users: int
    judge_users: int
    regular_users: int
    total_events: int
    active_events: int
    total_participants: int
