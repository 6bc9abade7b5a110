"""
Application log facade and log query service.

Services report what they do through an AppLogger, passing the LogContext
of the request they are serving. The production implementation persists
every entry to the app_logs table so admins can review activity and pull
back the full trace of a single request by its correlation ID.

Design:
- One DatabaseAppLogger is built at startup and injected into services
- Each entry is written in its own short-lived session, so it is kept
  even when the business transaction rolls back
- A failed write is reported to the "db" process logger and swallowed:
  logging never fails a business operation
- debug entries are dropped in production
"""

import enum
import json
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Protocol

from sqlalchemy.orm import Session

from hackhub.models import AppLog
from hackhub.repositories import AppLogRepository
from hackhub.services.exceptions import ValidationError
from hackhub.utils.logging_config import get_logger


class LogLevel(str, enum.Enum):
    """Severity of an application log entry."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"


# Process logger method used to mirror each level
_MIRROR_METHODS = {
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.DEBUG: "debug",
}


@dataclass(frozen=True)
class LogContext:
    """
    Per-request logging context threaded through service calls.

    Attributes:
        correlation_id: ID shared by every entry of one request
        user_id: Acting user, if authenticated
        context: Default component tag for entries, e.g. "EventService:create_event"
    """
    correlation_id: str
    user_id: Optional[str] = None
    context: Optional[str] = None

    def with_context(self, context: str) -> "LogContext":
        return replace(self, context=context)


class AppLogger(Protocol):
    """Logging port used by the service layer."""

    def info(self, message: str, ctx: LogContext, context: Optional[str] = None,
             meta: Optional[Dict[str, Any]] = None) -> None: ...

    def warn(self, message: str, ctx: LogContext, context: Optional[str] = None,
             meta: Optional[Dict[str, Any]] = None) -> None: ...

    def error(self, message: str, ctx: LogContext, context: Optional[str] = None,
              meta: Optional[Dict[str, Any]] = None) -> None: ...

    def debug(self, message: str, ctx: LogContext, context: Optional[str] = None,
              meta: Optional[Dict[str, Any]] = None) -> None: ...


def serialize_meta(meta: Optional[Dict[str, Any]]) -> Optional[str]:
    """Render metadata as JSON; values JSON cannot encode are stringified."""
    if meta is None:
        return None
    return json.dumps(meta, default=str)


class DatabaseAppLogger:
    """
    AppLogger that persists entries to the app_logs table.

    Usage:
        >>> app_logger = DatabaseAppLogger(SessionLocal, environment="production")
        >>> ctx = LogContext(correlation_id="5f0c...", user_id=user.id)
        >>> app_logger.info("Event created", ctx, context="EventService:create_event",
        ...                 meta={"eventId": event.id})
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        environment: str = "development",
    ):
        """
        Args:
            session_factory: Callable returning a new Session (e.g. SessionLocal)
            environment: Deployment environment; "production" disables debug
        """
        self.session_factory = session_factory
        self.environment = environment
        self._process_logger = get_logger("services")
        self._fallback_logger = get_logger("db")

    def info(self, message, ctx, context=None, meta=None) -> None:
        self._write(LogLevel.INFO, message, ctx, context, meta)

    def warn(self, message, ctx, context=None, meta=None) -> None:
        self._write(LogLevel.WARN, message, ctx, context, meta)

    def error(self, message, ctx, context=None, meta=None) -> None:
        self._write(LogLevel.ERROR, message, ctx, context, meta)

    def debug(self, message, ctx, context=None, meta=None) -> None:
        if self.environment == "production":
            return
        self._write(LogLevel.DEBUG, message, ctx, context, meta)

    def _write(
        self,
        level: LogLevel,
        message: str,
        ctx: LogContext,
        context: Optional[str],
        meta: Optional[Dict[str, Any]],
    ) -> None:
        context = context or ctx.context
        meta_json = serialize_meta(meta)

        getattr(self._process_logger, _MIRROR_METHODS[level])(
            message,
            extra={
                "correlation_id": ctx.correlation_id,
                "user_id": ctx.user_id,
                "context": context,
                "meta": meta_json,
            },
        )

        session = self.session_factory()
        try:
            AppLogRepository(session).create(
                level=level.value,
                message=message,
                correlation_id=ctx.correlation_id,
                context=context,
                meta=meta_json,
                user_id=ctx.user_id,
            )
            session.commit()
        except Exception as e:
            session.rollback()
            self._fallback_logger.error(
                f"Failed to persist application log: {e}",
                extra={
                    "log_level": level.value,
                    "log_message": message,
                    "correlation_id": ctx.correlation_id,
                    "context": context,
                },
            )
        finally:
            session.close()


class AppLogService:
    """
    Read access to persisted application logs.

    Usage:
        >>> service = AppLogService(db_session)
        >>> recent_errors = service.get_logs(level="error", limit=20)
        >>> trace = service.get_trace(correlation_id)
    """

    MAX_LIMIT = 1000

    def __init__(self, db: Session):
        self.db = db
        self.repository = AppLogRepository(db)

    def get_logs(
        self,
        user_id: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[AppLog]:
        """
        Query logs newest first.

        Args:
            user_id: Only entries of this user
            level: Only entries of this level (info, warn, error, debug)
            limit: Page size (1-1000)
            offset: Entries to skip

        Raises:
            ValidationError: If level, limit or offset is invalid
        """
        if level is not None and level not in {lv.value for lv in LogLevel}:
            raise ValidationError(f"Invalid log level: {level}", field="level")
        if limit < 1 or limit > self.MAX_LIMIT:
            raise ValidationError(
                f"Limit must be between 1 and {self.MAX_LIMIT}", field="limit"
            )
        if offset < 0:
            raise ValidationError("Offset must not be negative", field="offset")

        return self.repository.find(user_id=user_id, level=level, limit=limit, offset=offset)

    def get_trace(self, correlation_id: str) -> List[AppLog]:
        """All entries written while handling one request, oldest first."""
        return self.repository.find_by_correlation_id(correlation_id)
