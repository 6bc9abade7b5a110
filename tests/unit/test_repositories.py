"""
Unit tests for the repository layer.

Repositories flush but never commit, return None for missing rows and
leave cross-entity rules to the services.
"""

import pytest
from datetime import datetime
from sqlalchemy.exc import IntegrityError

from hackhub.models import Event
from hackhub.repositories import (
    EventJudgeRepository,
    EventParticipantRepository,
    EventRepository,
    EventTeamRepository,
    ProposalRepository,
    UserRepository,
)


class TestEventRepository:

    def test_create_flushes_without_commit(self, test_db_session, sample_event_data):
        """Test create assigns an id but a rollback discards the row."""
        repo = EventRepository(test_db_session)

        event = repo.create(**sample_event_data())
        assert len(event.id) == 32

        test_db_session.rollback()
        assert test_db_session.query(Event).count() == 0

    def test_missing_rows_return_none(self, test_db_session):
        """Test update and delete of unknown ids return None."""
        repo = EventRepository(test_db_session)

        assert repo.find_by_id("missing") is None
        assert repo.update("missing", name="X") is None
        assert repo.delete("missing") is None

    def test_find_with_details(self, test_db_session, sample_event, sample_user):
        """Test the detail query loads participants with their users."""
        event = sample_event()
        user = sample_user(name="Pat")
        EventParticipantRepository(test_db_session).add_participant_to_event(event.id, user.id)
        test_db_session.commit()
        test_db_session.expire_all()

        loaded = EventRepository(test_db_session).find_with_details(event.id)

        assert [p.user.name for p in loaded.participants] == ["Pat"]
        assert loaded.teams == []

    def test_count_active(self, test_db_session, sample_event):
        sample_event(name="A")
        sample_event(name="B", is_active=False, start_date=datetime(2024, 1, 1))

        repo = EventRepository(test_db_session)
        assert repo.count() == 2
        assert repo.count(is_active=True) == 1


class TestEventTeamRepository:

    def test_find_by_name_ignores_case(self, test_db_session, sample_event):
        event = sample_event()
        repo = EventTeamRepository(test_db_session)
        team = repo.create(event.id, "Alpha")

        assert repo.find_by_name(event.id, "  aLPHA ").id == team.id
        assert repo.find_by_name(event.id, "Beta") is None

    def test_unique_name_index(self, test_db_session, sample_event):
        """Test the database rejects a case-only duplicate."""
        event = sample_event()
        repo = EventTeamRepository(test_db_session)
        repo.create(event.id, "Alpha")

        with pytest.raises(IntegrityError):
            repo.create(event.id, "ALPHA")

    def test_unicode_case_folding(self, test_db_session, sample_event):
        """Test lookup and unique index both fold accented capitals."""
        event = sample_event()
        repo = EventTeamRepository(test_db_session)
        team = repo.create(event.id, "Équipe")

        assert repo.find_by_name(event.id, "ÉQUIPE").id == team.id
        with pytest.raises(IntegrityError):
            repo.create(event.id, "équipe")


class TestLinkRepositories:

    def test_participant_team_assignment(self, test_db_session, sample_event, sample_user):
        event = sample_event()
        user = sample_user()
        team = EventTeamRepository(test_db_session).create(event.id, "Alpha")
        repo = EventParticipantRepository(test_db_session)
        repo.add_participant_to_event(event.id, user.id)

        assert repo.assign_participant_to_team(event.id, user.id, team.id).team_id == team.id
        assert repo.remove_participant_from_team(event.id, user.id).team_id is None

    def test_remove_missing_judge(self, test_db_session, sample_event, sample_user):
        repo = EventJudgeRepository(test_db_session)

        assert repo.remove_judge_from_event(sample_event().id, sample_user().id) is None

    def test_duplicate_judge_rejected(self, test_db_session, sample_event, sample_user):
        """Test the composite primary key rejects a second link."""
        event = sample_event()
        user = sample_user()
        repo = EventJudgeRepository(test_db_session)
        repo.add_judge_to_event(event.id, user.id)
        test_db_session.commit()
        event_id, user_id = event.id, user.id
        test_db_session.expunge_all()

        with pytest.raises(IntegrityError):
            repo.add_judge_to_event(event_id, user_id)


class TestUserAndProposalRepositories:

    def test_find_by_email_ignores_case(self, test_db_session, sample_user):
        user = sample_user(email="ada@example.com")

        assert UserRepository(test_db_session).find_by_email(" ADA@example.com ").id == user.id

    def test_count_regular(self, test_db_session, sample_user):
        """Test regular users hold neither admin nor judge."""
        sample_user(is_admin=True)
        sample_user(is_judge=True)
        sample_user(is_organiser=True)

        assert UserRepository(test_db_session).count_regular() == 1

    def test_replace_members(self, test_db_session, sample_user, sample_proposal,
                             sample_member_data):
        team = sample_proposal(sample_user(), members=3)
        repo = ProposalRepository(test_db_session)

        repo.replace_members(team, [sample_member_data(full_name="Solo")])
        test_db_session.commit()

        assert repo.count_members(team.id) == 1
        assert [m.full_name for m in repo.find_by_id(team.id).members] == ["Solo"]
