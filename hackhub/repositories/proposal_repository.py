"""
Data access for team proposals and their members.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from hackhub.models import TeamProposal, ProposalMember, ApprovalStatus
from hackhub.repositories.base import BaseRepository


class ProposalRepository(BaseRepository):
    """Queries and writes for team_details and team_members."""

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------

    def find_by_id(self, team_id: str) -> Optional[TeamProposal]:
        return (
            self.db.query(TeamProposal)
            .options(selectinload(TeamProposal.members), selectinload(TeamProposal.owner))
            .filter(TeamProposal.id == team_id)
            .first()
        )

    def find_by_owner(self, user_id: str) -> Optional[TeamProposal]:
        return (
            self.db.query(TeamProposal)
            .options(selectinload(TeamProposal.members))
            .filter(TeamProposal.user_id == user_id)
            .first()
        )

    def find_all(self, status: Optional[str] = None) -> List[TeamProposal]:
        """List proposals newest first, optionally filtered by approval status."""
        query = self.db.query(TeamProposal).options(
            selectinload(TeamProposal.members),
            selectinload(TeamProposal.owner),
        )
        if status is not None:
            query = query.filter(TeamProposal.approval_status == status)
        return query.order_by(TeamProposal.created_at.desc(), TeamProposal.id.desc()).all()

    def create(self, **fields) -> TeamProposal:
        return self._add(TeamProposal(**fields))

    def update(self, team_id: str, **fields) -> Optional[TeamProposal]:
        return self._apply(self._get(TeamProposal, team_id), fields)

    def replace_members(
        self, team: TeamProposal, members: Iterable[dict]
    ) -> List[ProposalMember]:
        """Drop the team's current members and insert the given ones."""
        team.members.clear()
        self.db.flush()
        rows = [ProposalMember(**m) for m in members]
        team.members.extend(rows)
        self.db.flush()
        return rows

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def find_member(self, member_id: str) -> Optional[ProposalMember]:
        return self._get(ProposalMember, member_id)

    def add_member(self, team_id: str, **fields) -> ProposalMember:
        return self._add(ProposalMember(team_id=team_id, **fields))

    def update_member(self, member_id: str, **fields) -> Optional[ProposalMember]:
        return self._apply(self.find_member(member_id), fields)

    def delete_member(self, member_id: str) -> Optional[ProposalMember]:
        return self._remove(self.find_member(member_id))

    def count_members(self, team_id: Optional[str] = None) -> int:
        query = self.db.query(func.count(ProposalMember.id))
        if team_id is not None:
            query = query.filter(ProposalMember.team_id == team_id)
        return query.scalar() or 0

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------

    def count(self) -> int:
        return self.db.query(func.count(TeamProposal.id)).scalar() or 0

    def count_created_since(self, since: datetime) -> int:
        return (
            self.db.query(func.count(TeamProposal.id))
            .filter(TeamProposal.created_at >= since)
            .scalar()
        ) or 0

    def count_by_status(self) -> Dict[str, int]:
        """Return proposal counts keyed by every approval status."""
        rows = (
            self.db.query(TeamProposal.approval_status, func.count(TeamProposal.id))
            .group_by(TeamProposal.approval_status)
            .all()
        )
        counts = {status.value: 0 for status in ApprovalStatus}
        for status, total in rows:
            counts[status] = total
        return counts
