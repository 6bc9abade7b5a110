"""
API routers for HackHub; every router is mounted under /api.
"""

from hackhub.api import (
    admin,
    auth,
    event_assignments,
    event_teams,
    events,
    logs,
    organisers,
    proposals,
    sponsors,
    users,
)

routers = [
    auth.router,
    events.router,
    event_assignments.router,
    event_teams.router,
    users.router,
    organisers.router,
    sponsors.router,
    proposals.router,
    admin.router,
    logs.router,
]

__all__ = ["routers"]
