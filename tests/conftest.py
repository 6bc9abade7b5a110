"""
Pytest configuration and fixtures for HackHub tests.

Provides shared fixtures for:
- Test database sessions
- A recording application logger
- Sample data factories
- An API test client with authentication overrides
"""

import os
import pytest
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
os.environ['HACKHUB_ENV'] = 'test'
os.environ['HACKHUB_DB_URL'] = 'sqlite:///:memory:'
os.environ['SESSION_SECRET_KEY'] = 'test-session-secret-key-with-enough-bytes-0123456789'

from hackhub.models import (  # noqa: E402
    Base,
    Event,
    ProposalMember,
    Sponsor,
    TeamProposal,
    User,
)
from hackhub.db.database import set_sqlite_pragma  # noqa: E402
from hackhub.services.app_log_service import LogContext  # noqa: E402


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(scope='function')
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    from sqlalchemy import event

    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )

    # Foreign keys and Unicode lower() on every connection, as in production
    event.listen(engine, 'connect', set_sqlite_pragma)

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope='function')
def test_session_factory(test_db_engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_db_engine)


@pytest.fixture(scope='function')
def test_db_session(test_session_factory):
    """Create a test database session."""
    session = test_session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ============================================================================
# Logging Fixtures
# ============================================================================

class RecordingAppLogger:
    """AppLogger keeping entries in memory for assertions."""

    def __init__(self):
        self.entries = []

    def _record(self, level, message, ctx, context, meta):
        self.entries.append({
            'level': level,
            'message': message,
            'correlation_id': ctx.correlation_id,
            'user_id': ctx.user_id,
            'context': context or ctx.context,
            'meta': meta,
        })

    def info(self, message, ctx, context=None, meta=None):
        self._record('info', message, ctx, context, meta)

    def warn(self, message, ctx, context=None, meta=None):
        self._record('warn', message, ctx, context, meta)

    def error(self, message, ctx, context=None, meta=None):
        self._record('error', message, ctx, context, meta)

    def debug(self, message, ctx, context=None, meta=None):
        self._record('debug', message, ctx, context, meta)

    def levels(self):
        return [e['level'] for e in self.entries]

    def messages(self, level=None):
        return [e['message'] for e in self.entries if level is None or e['level'] == level]


@pytest.fixture
def app_logger():
    """Recording application logger."""
    return RecordingAppLogger()


@pytest.fixture
def ctx():
    """Log context of a test request."""
    return LogContext(correlation_id='test-correlation-id')


# ============================================================================
# Sample Data Factories
# ============================================================================

@pytest.fixture
def sample_user(test_db_session):
    """Factory for creating sample User models in the database."""
    counter = {'n': 0}

    def _create(email=None, name=None, is_admin=False, is_judge=False,
                is_organiser=False, created_at=None):
        counter['n'] += 1
        user = User(
            email=email or f'user{counter["n"]}@example.com',
            name=name or f'User {counter["n"]}',
            is_admin=is_admin,
            is_judge=is_judge,
            is_organiser=is_organiser,
        )
        if created_at is not None:
            user.created_at = created_at
        test_db_session.add(user)
        test_db_session.commit()
        test_db_session.refresh(user)
        return user
    return _create


@pytest.fixture
def sample_event_data():
    """Factory for creating sample event data."""
    def _create(
        name='Spring Hack',
        description='Weekend hackathon',
        start_date=None,
        end_date=None,
        location='Main Hall',
        poster=None,
        is_active=True,
    ):
        start_date = start_date or datetime(2025, 4, 1, 9, 0)
        return {
            'name': name,
            'description': description,
            'start_date': start_date,
            'end_date': end_date or start_date + timedelta(days=2),
            'location': location,
            'poster': poster,
            'is_active': is_active,
        }
    return _create


@pytest.fixture
def sample_event(test_db_session, sample_event_data):
    """Factory for creating sample Event models in the database."""
    def _create(**kwargs):
        event = Event(**sample_event_data(**kwargs))
        test_db_session.add(event)
        test_db_session.commit()
        test_db_session.refresh(event)
        return event
    return _create


@pytest.fixture
def sample_sponsor(test_db_session):
    """Factory for creating sample Sponsor models in the database."""
    def _create(name='Acme Corp', description='Cloud credits', logo=None):
        sponsor = Sponsor(name=name, description=description, logo=logo)
        test_db_session.add(sponsor)
        test_db_session.commit()
        test_db_session.refresh(sponsor)
        return sponsor
    return _create


@pytest.fixture
def sample_member_data():
    """Factory for creating sample proposal member data."""
    def _create(full_name='Ada Lovelace', email='ada@example.com', role='member', **kwargs):
        data = {
            'full_name': full_name,
            'email': email,
            'role': role,
            'contact_number': '0123456789',
            'food_preference': 'veg',
            'tshirt_size': 'M',
            'allergies': None,
        }
        data.update(kwargs)
        return data
    return _create


@pytest.fixture
def sample_proposal(test_db_session, sample_member_data):
    """Factory for creating sample TeamProposal models with members."""
    def _create(owner, team_name='Byte Me', members=2, approval_status='pending',
                project_file='https://files.example.com/p.pdf',
                project_file_name='proposal.pdf', created_at=None):
        team = TeamProposal(
            user_id=owner.id,
            team_name=team_name,
            approval_status=approval_status,
            project_file=project_file,
            project_file_name=project_file_name,
        )
        if created_at is not None:
            team.created_at = created_at
        for i in range(members):
            team.members.append(ProposalMember(
                **sample_member_data(full_name=f'Member {i}', email=f'm{i}@example.com')
            ))
        test_db_session.add(team)
        test_db_session.commit()
        test_db_session.refresh(team)
        return team
    return _create


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def test_client(test_db_session, app_logger):
    """Create a FastAPI test client against the test database."""
    from fastapi.testclient import TestClient

    from hackhub.api.dependencies import get_app_logger
    from hackhub.db.database import get_db
    from hackhub.main import app

    def get_test_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_app_logger] = lambda: app_logger

    with TestClient(app) as client:
        yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(test_client):
    """Authenticate subsequent test_client requests as the given user."""
    from hackhub.main import app
    from hackhub.middleware.auth import get_current_user, get_optional_user

    def _login(user):
        app.dependency_overrides[get_current_user] = lambda: user
        app.dependency_overrides[get_optional_user] = lambda: user
        return user
    return _login
