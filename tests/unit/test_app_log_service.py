"""
Unit tests for the application log facade and AppLogService.

Tests persistence of entries in independent sessions, failure isolation,
production debug suppression, and log queries.
"""

import json
import pytest
from datetime import datetime, timedelta

from hackhub.models import AppLog
from hackhub.services.app_log_service import (
    AppLogService,
    DatabaseAppLogger,
    LogContext,
    serialize_meta,
)
from hackhub.services.exceptions import ValidationError


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def db_logger(test_session_factory):
    """DatabaseAppLogger writing to the test database."""
    return DatabaseAppLogger(test_session_factory, environment="development")


@pytest.fixture
def app_log_service(test_db_session):
    """Create an AppLogService instance for testing."""
    return AppLogService(test_db_session)


@pytest.fixture
def log_entry(test_db_session):
    """Factory for AppLog rows with explicit timestamps."""
    def _create(message="entry", level="info", user_id=None,
                correlation_id="corr-1", timestamp=None):
        row = AppLog(
            message=message,
            level=level,
            user_id=user_id,
            correlation_id=correlation_id,
            timestamp=timestamp or datetime(2025, 1, 1),
        )
        test_db_session.add(row)
        test_db_session.commit()
        return row
    return _create


# ============================================================================
# DatabaseAppLogger Tests
# ============================================================================


class TestDatabaseAppLogger:
    """Tests for persisted log writes."""

    def test_entry_is_persisted(self, db_logger, test_db_session, sample_user):
        """Test an entry is written with its context and metadata."""
        user = sample_user()
        ctx = LogContext(correlation_id="abc123", user_id=user.id)

        db_logger.info("Event created", ctx, context="EventService:create_event",
                       meta={"eventId": "e1"})

        row = test_db_session.query(AppLog).one()
        assert row.level == "info"
        assert row.message == "Event created"
        assert row.correlation_id == "abc123"
        assert row.user_id == user.id
        assert row.context == "EventService:create_event"
        assert json.loads(row.meta) == {"eventId": "e1"}

    def test_context_defaults_to_log_context(self, db_logger, test_db_session):
        """Test the LogContext tag is used when no context is passed."""
        ctx = LogContext(correlation_id="abc", context="UserService:sign_in")

        db_logger.warn("Careful", ctx)

        row = test_db_session.query(AppLog).one()
        assert row.level == "warn"
        assert row.context == "UserService:sign_in"

    def test_entry_survives_business_rollback(self, db_logger, test_db_session, sample_event):
        """Test an entry is kept when the caller's transaction rolls back."""
        event = sample_event()
        event.name = "Changed"
        test_db_session.flush()

        db_logger.error("Something failed", LogContext(correlation_id="abc"))
        test_db_session.rollback()

        assert test_db_session.query(AppLog).count() == 1

    def test_failed_write_does_not_raise(self, mocker):
        """Test a failed write is reported to the db logger, not the caller."""
        logger = DatabaseAppLogger(BrokenSession)
        fallback = mocker.patch.object(logger, "_fallback_logger")

        logger.info("Still fine", LogContext(correlation_id="abc"))

        fallback.error.assert_called_once()
        assert "database unavailable" in fallback.error.call_args[0][0]

    def test_debug_dropped_in_production(self, test_session_factory, test_db_session):
        """Test debug entries are not written in production."""
        logger = DatabaseAppLogger(test_session_factory, environment="production")
        ctx = LogContext(correlation_id="abc")

        logger.debug("noise", ctx)
        logger.info("signal", ctx)

        assert [r.message for r in test_db_session.query(AppLog).all()] == ["signal"]

    def test_debug_written_in_development(self, db_logger, test_db_session):
        """Test debug entries are written outside production."""
        db_logger.debug("details", LogContext(correlation_id="abc"))

        assert test_db_session.query(AppLog).one().level == "debug"


class BrokenSession:
    """Session stand-in whose writes always fail."""

    def add(self, obj):
        raise RuntimeError("database unavailable")

    def flush(self):
        raise RuntimeError("database unavailable")

    def commit(self):
        raise RuntimeError("database unavailable")

    def rollback(self):
        pass

    def close(self):
        pass


class TestLogContext:

    def test_with_context_keeps_request_identity(self):
        ctx = LogContext(correlation_id="abc", user_id="u1")

        tagged = ctx.with_context("EventService:delete_event")

        assert tagged.context == "EventService:delete_event"
        assert (tagged.correlation_id, tagged.user_id) == ("abc", "u1")
        assert ctx.context is None


class TestSerializeMeta:
    """Tests for metadata serialization."""

    def test_none(self):
        assert serialize_meta(None) is None

    def test_non_json_values_stringified(self):
        """Test datetimes and other objects fall back to str()."""
        result = json.loads(serialize_meta({"at": datetime(2025, 1, 2, 3, 4, 5)}))

        assert result == {"at": "2025-01-02 03:04:05"}


# ============================================================================
# AppLogService Tests
# ============================================================================


class TestAppLogServiceQuery:
    """Tests for log queries."""

    def test_get_logs_newest_first(self, app_log_service, log_entry):
        """Test entries are returned newest first."""
        base = datetime(2025, 1, 1)
        for i in range(3):
            log_entry(message=f"m{i}", timestamp=base + timedelta(minutes=i))

        assert [r.message for r in app_log_service.get_logs()] == ["m2", "m1", "m0"]

    def test_get_logs_filters(self, app_log_service, log_entry, sample_user):
        """Test user and level filters."""
        user = sample_user()
        log_entry(message="mine", user_id=user.id, level="error")
        log_entry(message="mine-info", user_id=user.id, level="info")
        log_entry(message="other", level="error")

        logs = app_log_service.get_logs(user_id=user.id, level="error")

        assert [r.message for r in logs] == ["mine"]

    def test_get_logs_pagination(self, app_log_service, log_entry):
        """Test limit and offset."""
        base = datetime(2025, 1, 1)
        for i in range(5):
            log_entry(message=f"m{i}", timestamp=base + timedelta(minutes=i))

        logs = app_log_service.get_logs(limit=2, offset=1)

        assert [r.message for r in logs] == ["m3", "m2"]

    @pytest.mark.parametrize("kwargs,field", [
        ({"level": "fatal"}, "level"),
        ({"limit": 0}, "limit"),
        ({"limit": 1001}, "limit"),
        ({"offset": -1}, "offset"),
    ])
    def test_get_logs_invalid_arguments(self, app_log_service, kwargs, field):
        """Test out-of-range arguments are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            app_log_service.get_logs(**kwargs)

        assert exc_info.value.field == field

    def test_get_trace_oldest_first(self, app_log_service, log_entry):
        """Test a trace holds one request's entries in write order."""
        base = datetime(2025, 1, 1)
        log_entry(message="second", correlation_id="req-1", timestamp=base + timedelta(seconds=1))
        log_entry(message="first", correlation_id="req-1", timestamp=base)
        log_entry(message="unrelated", correlation_id="req-2", timestamp=base)

        trace = app_log_service.get_trace("req-1")

        assert [r.message for r in trace] == ["first", "second"]
