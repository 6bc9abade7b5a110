"""
Unit tests for ProposalService.

Tests team submission bounds, resubmission, owner-only edits and the
review workflow.
"""

import pytest

from hackhub.models import ApprovalStatus, ProposalMember, TeamProposal
from hackhub.services.exceptions import (
    MemberNotFoundError,
    PermissionDeniedError,
    ProposalNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from hackhub.services.proposal_service import ProposalService


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def proposal_service(test_db_session, app_logger):
    """Create a ProposalService instance for testing."""
    return ProposalService(test_db_session, app_logger)


@pytest.fixture
def members(sample_member_data):
    """Build a list of n member dicts."""
    def _build(n):
        return [
            sample_member_data(full_name=f"Member {i}", email=f"member{i}@example.com")
            for i in range(n)
        ]
    return _build


# ============================================================================
# Submission Tests
# ============================================================================


class TestProposalServiceSubmit:
    """Tests for submit_team."""

    @pytest.mark.parametrize("count", [1, 5])
    def test_submit_within_bounds(self, proposal_service, ctx, sample_user, members, count):
        """Test 1 and 5 members are both accepted."""
        owner = sample_user()

        team = proposal_service.submit_team(
            ctx, owner_id=owner.id, team_name="Byte Me", members=members(count),
            project_file="https://files.example.com/p.pdf", project_file_name="p.pdf",
        )

        assert team.user_id == owner.id
        assert team.approval_status == ApprovalStatus.PENDING.value
        assert len(team.members) == count

    @pytest.mark.parametrize("count", [0, 6])
    def test_submit_outside_bounds(self, proposal_service, ctx, test_db_session,
                                   sample_user, members, count):
        """Test 0 and 6 members are rejected and nothing is stored."""
        owner = sample_user()

        with pytest.raises(ValidationError) as exc_info:
            proposal_service.submit_team(
                ctx, owner_id=owner.id, team_name="Byte Me", members=members(count)
            )

        assert exc_info.value.field == "members"
        assert test_db_session.query(TeamProposal).count() == 0

    def test_submit_unknown_owner(self, proposal_service, ctx, members):
        """Test submitting for an unknown user raises not found."""
        with pytest.raises(UserNotFoundError):
            proposal_service.submit_team(
                ctx, owner_id="missing", team_name="Byte Me", members=members(1)
            )

    def test_resubmit_replaces_team(self, proposal_service, ctx, test_db_session,
                                    sample_user, members):
        """Test a second submission keeps the id and replaces members."""
        owner = sample_user()
        first = proposal_service.submit_team(
            ctx, owner_id=owner.id, team_name="Old Name", members=members(3)
        )

        second = proposal_service.submit_team(
            ctx, owner_id=owner.id, team_name="New Name", members=members(2),
            project_file="https://files.example.com/v2.pdf", project_file_name="v2.pdf",
        )

        assert second.id == first.id
        assert second.team_name == "New Name"
        assert second.project_file_name == "v2.pdf"
        assert test_db_session.query(TeamProposal).count() == 1
        assert test_db_session.query(ProposalMember).count() == 2

    def test_registration_status(self, proposal_service, ctx, sample_user, members):
        """Test registration status flips after submitting."""
        owner = sample_user()
        assert proposal_service.get_registration_status(owner.id) is False
        assert proposal_service.get_registration_status(None) is False

        proposal_service.submit_team(ctx, owner_id=owner.id, team_name="T", members=members(1))

        assert proposal_service.get_registration_status(owner.id) is True

    def test_get_team_for_owner_without_team(self, proposal_service, ctx, sample_user):
        """Test a user with no submission gets not found."""
        with pytest.raises(ProposalNotFoundError):
            proposal_service.get_team_for_owner(ctx, sample_user().id)


# ============================================================================
# Owner Edit Tests
# ============================================================================


class TestProposalServiceOwnerEdits:
    """Tests for owner-only edits."""

    def test_update_file_by_owner(self, proposal_service, ctx, sample_user, sample_proposal):
        """Test the owner can replace the proposal file."""
        owner = sample_user()
        team = sample_proposal(owner)

        updated = proposal_service.update_proposal_file(
            ctx, team.id, owner.id, "https://files.example.com/new.pdf", "new.pdf"
        )

        assert updated.project_file == "https://files.example.com/new.pdf"
        assert updated.project_file_name == "new.pdf"

    def test_update_file_by_other_user(self, proposal_service, ctx, sample_user,
                                       sample_proposal):
        """Test another user cannot change the file and it stays unchanged."""
        owner = sample_user()
        intruder = sample_user()
        team = sample_proposal(owner, project_file_name="original.pdf")

        with pytest.raises(PermissionDeniedError):
            proposal_service.update_proposal_file(
                ctx, team.id, intruder.id, "https://evil.example.com/x.pdf", "x.pdf"
            )

        assert proposal_service.get_team_details(team.id).project_file_name == "original.pdf"

    def test_update_file_unknown_team(self, proposal_service, ctx, sample_user):
        """Test updating an unknown team raises not found."""
        with pytest.raises(ProposalNotFoundError):
            proposal_service.update_proposal_file(
                ctx, "missing", sample_user().id, "https://x/y.pdf", "y.pdf"
            )

    def test_add_member_up_to_limit(self, proposal_service, ctx, sample_user,
                                    sample_proposal, sample_member_data):
        """Test a sixth member is rejected."""
        owner = sample_user()
        team = sample_proposal(owner, members=4)

        member = proposal_service.add_member(
            ctx, team.id, owner.id, sample_member_data(full_name="Fifth", email="5@example.com")
        )
        assert member.team_id == team.id

        with pytest.raises(ValidationError):
            proposal_service.add_member(
                ctx, team.id, owner.id, sample_member_data(email="6@example.com")
            )

    def test_add_member_by_other_user(self, proposal_service, ctx, sample_user,
                                      sample_proposal, sample_member_data):
        """Test only the owner can add members."""
        owner = sample_user()
        team = sample_proposal(owner)

        with pytest.raises(PermissionDeniedError):
            proposal_service.add_member(ctx, team.id, sample_user().id, sample_member_data())

    def test_update_member(self, proposal_service, ctx, sample_user, sample_proposal):
        """Test the owner can edit a member."""
        owner = sample_user()
        team = sample_proposal(owner)
        member_id = team.members[0].id

        member = proposal_service.update_member(
            ctx, member_id, owner.id, {"tshirt_size": "XL", "allergies": "peanuts"}
        )

        assert member.tshirt_size == "XL"
        assert member.allergies == "peanuts"

    def test_update_member_by_other_user(self, proposal_service, ctx, sample_user,
                                         sample_proposal):
        """Test another user cannot edit a member."""
        owner = sample_user()
        team = sample_proposal(owner)

        with pytest.raises(PermissionDeniedError):
            proposal_service.update_member(
                ctx, team.members[0].id, sample_user().id, {"tshirt_size": "S"}
            )

    def test_remove_member(self, proposal_service, ctx, test_db_session,
                           sample_user, sample_proposal):
        """Test removing a member leaves the rest."""
        owner = sample_user()
        team = sample_proposal(owner, members=2)

        proposal_service.remove_member(ctx, team.members[0].id, owner.id)

        assert proposal_service.proposals.count_members(team.id) == 1

    def test_remove_last_member(self, proposal_service, ctx, sample_user, sample_proposal):
        """Test the last member cannot be removed."""
        owner = sample_user()
        team = sample_proposal(owner, members=1)

        with pytest.raises(ValidationError):
            proposal_service.remove_member(ctx, team.members[0].id, owner.id)

    def test_remove_unknown_member(self, proposal_service, ctx, sample_user):
        """Test removing an unknown member raises not found."""
        with pytest.raises(MemberNotFoundError):
            proposal_service.remove_member(ctx, "missing", sample_user().id)


# ============================================================================
# Review Tests
# ============================================================================


class TestProposalServiceReview:
    """Tests for judge and admin review operations."""

    def test_set_approval_status(self, proposal_service, ctx, sample_user, sample_proposal):
        """Test status moves to approved."""
        team = sample_proposal(sample_user())

        updated = proposal_service.set_approval_status(ctx, team.id, "approved")

        assert updated.approval_status == "approved"

    def test_set_invalid_status(self, proposal_service, ctx, sample_user, sample_proposal):
        """Test an unknown status is rejected and the stored one is kept."""
        team = sample_proposal(sample_user())

        with pytest.raises(ValidationError) as exc_info:
            proposal_service.set_approval_status(ctx, team.id, "maybe")

        assert "pending, approved, rejected" in exc_info.value.message
        assert proposal_service.get_team_details(team.id).approval_status == "pending"

    def test_set_status_unknown_team(self, proposal_service, ctx):
        """Test changing status of an unknown team raises not found."""
        with pytest.raises(ProposalNotFoundError):
            proposal_service.set_approval_status(ctx, "missing", ApprovalStatus.REJECTED)

    def test_list_proposals_filtered(self, proposal_service, sample_user, sample_proposal):
        """Test listing by status and "all"."""
        sample_proposal(sample_user(), team_name="A", approval_status="approved")
        sample_proposal(sample_user(), team_name="B")

        assert [t.team_name for t in proposal_service.list_proposals("approved")] == ["A"]
        assert len(proposal_service.list_proposals("all")) == 2
        assert len(proposal_service.list_proposals()) == 2

    def test_list_proposals_invalid_status(self, proposal_service):
        """Test filtering by an unknown status is rejected."""
        with pytest.raises(ValidationError):
            proposal_service.list_proposals("unknown")

    def test_get_proposal_file(self, proposal_service, ctx, sample_user, sample_proposal):
        """Test the file reference is returned."""
        team = sample_proposal(sample_user(), project_file_name="deck.pdf")

        file_ref = proposal_service.get_proposal_file(ctx, team.id)

        assert file_ref == {
            "project_file": "https://files.example.com/p.pdf",
            "project_file_name": "deck.pdf",
        }

    def test_get_proposal_file_missing(self, proposal_service, ctx, sample_user,
                                       sample_proposal):
        """Test a team without a file raises not found."""
        team = sample_proposal(sample_user(), project_file=None, project_file_name=None)

        with pytest.raises(ProposalNotFoundError):
            proposal_service.get_proposal_file(ctx, team.id)

    def test_stats(self, proposal_service, sample_user, sample_proposal):
        """Test counts per status and total."""
        sample_proposal(sample_user(), approval_status="approved")
        sample_proposal(sample_user(), approval_status="approved")
        sample_proposal(sample_user(), approval_status="rejected")
        sample_proposal(sample_user())

        assert proposal_service.get_stats() == {
            "total": 4,
            "pending": 1,
            "approved": 2,
            "rejected": 1,
        }

    def test_stats_empty(self, proposal_service):
        """Test every status is reported even with no proposals."""
        assert proposal_service.get_stats() == {
            "total": 0,
            "pending": 0,
            "approved": 0,
            "rejected": 0,
        }
