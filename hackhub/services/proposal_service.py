"""
Proposal service for the team registration and approval workflow.

Provides business logic for:
- Submitting a team with 1 to 5 members and a proposal file reference
- Owner-only edits of the proposal file and member list
- Judge/admin review: listing, file retrieval, approval status, stats

Design:
- One proposal per owner; resubmitting replaces name, file and members
- Member count is kept within bounds on every add and remove
- Only the owner may change a proposal; reviewers only change its status
"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from hackhub.models import (
    ApprovalStatus,
    ProposalMember,
    TeamProposal,
    MIN_PROPOSAL_MEMBERS,
    MAX_PROPOSAL_MEMBERS,
)
from hackhub.repositories import ProposalRepository, UserRepository
from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.exceptions import (
    ConflictError,
    MemberNotFoundError,
    PermissionDeniedError,
    ProposalNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from hackhub.services.transaction import unit_of_work


MEMBER_FIELDS = (
    "user_id",
    "role",
    "full_name",
    "email",
    "contact_number",
    "food_preference",
    "tshirt_size",
    "allergies",
)


def _member_fields(data: dict) -> dict:
    return {k: v for k, v in data.items() if k in MEMBER_FIELDS}


class ProposalService:
    """
    Service for team proposals and their members.

    Usage:
        >>> service = ProposalService(db_session, app_logger)
        >>> team = service.submit_team(
        ...     ctx,
        ...     owner_id=user.id,
        ...     team_name="Byte Me",
        ...     members=[{"full_name": "Ada", "email": "ada@example.com", ...}],
        ...     project_file="https://files.example.com/p.pdf",
        ...     project_file_name="proposal.pdf",
        ... )
        >>> service.set_approval_status(ctx, team.id, ApprovalStatus.APPROVED)
    """

    def __init__(self, db: Session, app_logger: AppLogger):
        """
        Initialize proposal service.

        Args:
            db: SQLAlchemy database session
            app_logger: Application log facade
        """
        self.db = db
        self.app_logger = app_logger
        self.proposals = ProposalRepository(db)
        self.users = UserRepository(db)

    # ========================================================================
    # Owner operations
    # ========================================================================

    def submit_team(
        self,
        ctx: LogContext,
        owner_id: str,
        team_name: str,
        members: Iterable[dict],
        project_file: Optional[str] = None,
        project_file_name: Optional[str] = None,
    ) -> TeamProposal:
        """
        Create or replace the owner's team proposal.

        A resubmission keeps the proposal id and approval status but
        replaces the name, file and the whole member list.

        Raises:
            UserNotFoundError: If the owner does not exist
            ValidationError: If the member count is outside 1..5
        """
        log_ctx = ctx.with_context("ProposalService:submit_team")
        members = [_member_fields(m) for m in members]
        meta = {"ownerId": owner_id, "teamName": team_name, "memberCount": len(members)}
        self.app_logger.info("Attempting to submit team", log_ctx, meta=meta)

        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: ConflictError("A team was submitted concurrently, retry"),
        ):
            self._validate_member_count(len(members))
            if self.users.find_by_id(owner_id) is None:
                raise UserNotFoundError(owner_id)

            team = self.proposals.find_by_owner(owner_id)
            if team is None:
                team = self.proposals.create(
                    user_id=owner_id,
                    team_name=team_name,
                    project_file=project_file,
                    project_file_name=project_file_name,
                )
            else:
                team = self.proposals.update(
                    team.id,
                    team_name=team_name,
                    project_file=project_file,
                    project_file_name=project_file_name,
                )
            self.proposals.replace_members(team, members)

        self.app_logger.info(
            "Team submitted successfully", log_ctx, meta={**meta, "teamId": team.id}
        )
        return team

    def get_registration_status(self, user_id: Optional[str]) -> bool:
        """Whether the user has submitted a team."""
        if not user_id:
            return False
        return self.proposals.find_by_owner(user_id) is not None

    def get_team_for_owner(self, ctx: LogContext, user_id: str) -> TeamProposal:
        """
        Raises:
            ProposalNotFoundError: If the user has not submitted a team
        """
        team = self.proposals.find_by_owner(user_id)
        if team is None:
            raise ProposalNotFoundError(user_id)
        return team

    def update_proposal_file(
        self,
        ctx: LogContext,
        team_id: str,
        user_id: str,
        project_file: str,
        project_file_name: str,
    ) -> TeamProposal:
        """
        Replace the proposal file of the caller's team.

        Raises:
            ProposalNotFoundError: If the team does not exist
            PermissionDeniedError: If the caller does not own the team
        """
        log_ctx = ctx.with_context("ProposalService:update_proposal_file")
        meta = {"teamId": team_id, "fileName": project_file_name}
        self.app_logger.info("Attempting to update proposal file", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_owned_team(team_id, user_id)
            team = self.proposals.update(
                team_id,
                project_file=project_file,
                project_file_name=project_file_name,
            )

        self.app_logger.info("Proposal file updated successfully", log_ctx, meta=meta)
        return team

    def add_member(
        self, ctx: LogContext, team_id: str, user_id: str, data: dict
    ) -> ProposalMember:
        """
        Add a member to the caller's team.

        Raises:
            ProposalNotFoundError: If the team does not exist
            PermissionDeniedError: If the caller does not own the team
            ValidationError: If the team already has 5 members
        """
        log_ctx = ctx.with_context("ProposalService:add_member")
        meta = {"teamId": team_id}
        self.app_logger.info("Attempting to add team member", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_owned_team(team_id, user_id)
            self._validate_member_count(self.proposals.count_members(team_id) + 1)
            member = self.proposals.add_member(team_id, **_member_fields(data))

        self.app_logger.info(
            "Team member added successfully", log_ctx, meta={**meta, "memberId": member.id}
        )
        return member

    def update_member(
        self, ctx: LogContext, member_id: str, user_id: str, data: dict
    ) -> ProposalMember:
        """
        Raises:
            MemberNotFoundError: If the member does not exist
            PermissionDeniedError: If the caller does not own the member's team
        """
        log_ctx = ctx.with_context("ProposalService:update_member")
        meta = {"memberId": member_id}
        self.app_logger.info("Attempting to update team member", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            member = self._require_owned_member(member_id, user_id)
            member = self.proposals.update_member(member.id, **_member_fields(data))

        self.app_logger.info("Team member updated successfully", log_ctx, meta=meta)
        return member

    def remove_member(self, ctx: LogContext, member_id: str, user_id: str) -> None:
        """
        Raises:
            MemberNotFoundError: If the member does not exist
            PermissionDeniedError: If the caller does not own the member's team
            ValidationError: If the member is the team's last one
        """
        log_ctx = ctx.with_context("ProposalService:remove_member")
        meta = {"memberId": member_id}
        self.app_logger.info("Attempting to remove team member", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            member = self._require_owned_member(member_id, user_id)
            self._validate_member_count(self.proposals.count_members(member.team_id) - 1)
            self.proposals.delete_member(member_id)

        self.app_logger.info("Team member removed successfully", log_ctx, meta=meta)

    # ========================================================================
    # Review operations (judges and admins)
    # ========================================================================

    def list_proposals(self, status: Optional[str] = None) -> List[TeamProposal]:
        """
        List proposals with their members, newest first.

        Args:
            status: "all"/None for every proposal, or an approval status

        Raises:
            ValidationError: If status is not recognized
        """
        if status is None or status == "all":
            return self.proposals.find_all()
        return self.proposals.find_all(status=self._parse_status(status).value)

    def get_team_details(self, team_id: str) -> TeamProposal:
        """
        Raises:
            ProposalNotFoundError: If the team does not exist
        """
        team = self.proposals.find_by_id(team_id)
        if team is None:
            raise ProposalNotFoundError(team_id)
        return team

    def get_proposal_file(self, ctx: LogContext, team_id: str) -> Dict[str, Optional[str]]:
        """
        Get the proposal file reference of a team.

        Raises:
            ProposalNotFoundError: If the team does not exist or has no file
        """
        team = self.proposals.find_by_id(team_id)
        if team is None or not team.project_file:
            self.app_logger.warn(
                "Proposal file not found",
                ctx.with_context("ProposalService:get_proposal_file"),
                meta={"teamId": team_id},
            )
            raise ProposalNotFoundError(team_id)
        return {
            "project_file": team.project_file,
            "project_file_name": team.project_file_name,
        }

    def set_approval_status(self, ctx: LogContext, team_id: str, status) -> TeamProposal:
        """
        Move a proposal to pending, approved or rejected.

        Raises:
            ValidationError: If status is not an approval status
            ProposalNotFoundError: If the team does not exist
        """
        log_ctx = ctx.with_context("ProposalService:set_approval_status")
        status = self._parse_status(status)
        meta = {"teamId": team_id, "status": status.value}
        self.app_logger.info("Attempting to change approval status", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            team = self.proposals.update(team_id, approval_status=status.value)
            if team is None:
                raise ProposalNotFoundError(team_id)

        self.app_logger.info("Approval status changed successfully", log_ctx, meta=meta)
        return team

    def get_stats(self) -> Dict[str, int]:
        """Proposal totals: total, pending, approved, rejected."""
        counts = self.proposals.count_by_status()
        return {"total": sum(counts.values()), **counts}

    # ========================================================================
    # Helpers
    # ========================================================================

    def _require_owned_team(self, team_id: str, user_id: str) -> TeamProposal:
        team = self.proposals.find_by_id(team_id)
        if team is None:
            raise ProposalNotFoundError(team_id)
        if team.user_id != user_id:
            raise PermissionDeniedError("You can only modify your own team")
        return team

    def _require_owned_member(self, member_id: str, user_id: str) -> ProposalMember:
        member = self.proposals.find_member(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        if member.team.user_id != user_id:
            raise PermissionDeniedError("You can only modify members of your own team")
        return member

    @staticmethod
    def _validate_member_count(count: int) -> None:
        if count < MIN_PROPOSAL_MEMBERS or count > MAX_PROPOSAL_MEMBERS:
            raise ValidationError(
                f"A team must have between {MIN_PROPOSAL_MEMBERS} and "
                f"{MAX_PROPOSAL_MEMBERS} members",
                field="members",
            )

    @staticmethod
    def _parse_status(status) -> ApprovalStatus:
        try:
            return ApprovalStatus(status)
        except ValueError:
            raise ValidationError(
                f"Invalid status '{status}'. Must be one of: "
                + ", ".join(s.value for s in ApprovalStatus),
                field="status",
            )
