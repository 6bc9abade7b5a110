"""
Unit tests for AnalyticsService and SponsorService.
"""

import pytest
from datetime import datetime, timedelta
from freezegun import freeze_time

from hackhub.models import EventSponsor
from hackhub.services.analytics_service import AnalyticsService
from hackhub.services.exceptions import SponsorNotFoundError
from hackhub.services.sponsor_service import SponsorService


NOW = datetime(2025, 6, 30, 12, 0)


# ============================================================================
# Analytics Tests
# ============================================================================


class TestAnalyticsServiceDashboard:
    """Tests for dashboard totals."""

    def test_empty_dashboard(self, test_db_session):
        """Test every metric is present and zero on an empty database."""
        dashboard = AnalyticsService(test_db_session).get_dashboard(now=NOW)

        assert len(dashboard) == 16
        assert set(dashboard.values()) == {0}

    def test_dashboard_counts(self, test_db_session, sample_user, sample_proposal,
                              sample_event):
        """Test totals, role splits and the 7/30 day windows."""
        admin = sample_user(is_admin=True, created_at=NOW - timedelta(days=2))
        judge = sample_user(is_judge=True, created_at=NOW - timedelta(days=10))
        regular = sample_user(created_at=NOW - timedelta(days=60))
        sample_proposal(admin, members=3, approval_status="approved",
                        created_at=NOW - timedelta(days=1))
        sample_proposal(judge, members=1, created_at=NOW - timedelta(days=20))
        sample_proposal(regular, members=2, approval_status="rejected",
                        created_at=NOW - timedelta(days=90))
        sample_event(name="Live")
        sample_event(name="Past", is_active=False)

        dashboard = AnalyticsService(test_db_session).get_dashboard(now=NOW)

        assert dashboard["totalUsers"] == 3
        assert dashboard["totalTeams"] == 3
        assert dashboard["totalMembers"] == 6
        assert dashboard["pendingProposals"] == 1
        assert dashboard["approvedProposals"] == 1
        assert dashboard["rejectedProposals"] == 1
        assert dashboard["newUsers7Days"] == 1
        assert dashboard["newUsers30Days"] == 2
        assert dashboard["newTeams7Days"] == 1
        assert dashboard["newTeams30Days"] == 2
        assert dashboard["adminUsers"] == 1
        assert dashboard["judgeUsers"] == 1
        assert dashboard["regularUsers"] == 1
        assert dashboard["totalEvents"] == 2
        assert dashboard["activeEvents"] == 1
        assert dashboard["totalParticipants"] == 0

    @freeze_time("2025-06-30 12:00:00")
    def test_windows_default_to_current_time(self, test_db_session, sample_user):
        """Test the 7 day window is measured from now when no time is given."""
        sample_user(created_at=datetime(2025, 6, 25))
        sample_user(created_at=datetime(2025, 6, 1))

        dashboard = AnalyticsService(test_db_session).get_dashboard()

        assert dashboard["newUsers7Days"] == 1
        assert dashboard["newUsers30Days"] == 2


# ============================================================================
# Sponsor Tests
# ============================================================================


@pytest.fixture
def sponsor_service(test_db_session, app_logger):
    """Create a SponsorService instance for testing."""
    return SponsorService(test_db_session, app_logger)


class TestSponsorService:
    """Tests for the sponsor catalogue."""

    def test_create_and_list(self, sponsor_service, ctx):
        """Test sponsors are listed by name."""
        sponsor_service.create_sponsor(ctx, name="Zeta Labs")
        sponsor_service.create_sponsor(ctx, name="Acme", description="Credits",
                                       logo="https://cdn.example.com/acme.png")

        assert [s.name for s in sponsor_service.get_all_sponsors()] == ["Acme", "Zeta Labs"]

    def test_get_unknown_sponsor(self, sponsor_service):
        """Test an unknown sponsor raises not found."""
        with pytest.raises(SponsorNotFoundError):
            sponsor_service.get_sponsor("missing")

    def test_delete_removes_event_links(self, sponsor_service, ctx, test_db_session,
                                        sample_event, sample_sponsor):
        """Test deleting a sponsor detaches it from events."""
        sponsor = sample_sponsor()
        event = sample_event()
        test_db_session.add(EventSponsor(event_id=event.id, sponsor_id=sponsor.id))
        test_db_session.commit()

        sponsor_service.delete_sponsor(ctx, sponsor.id)

        test_db_session.expire_all()
        assert test_db_session.query(EventSponsor).count() == 0
        assert sponsor_service.get_all_sponsors() == []

    def test_delete_unknown_sponsor(self, sponsor_service, ctx):
        """Test deleting an unknown sponsor raises not found."""
        with pytest.raises(SponsorNotFoundError):
            sponsor_service.delete_sponsor(ctx, "missing")
