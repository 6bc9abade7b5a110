"""
Transaction helper shared by the domain services.

Every mutating service operation runs its existence checks and writes
inside one unit of work: commit once on success, roll back on any error.
Unique and primary key violations raised by the database are translated into
the domain conflict the caller expects, so a race between two identical
requests still yields "already exists" rather than a server error.
"""

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.exceptions import ServiceError

# SQLSTATE for unique_violation; SQLite reports primary key clashes the same way
UNIQUE_VIOLATION = "23505"


def is_duplicate_key(error: IntegrityError) -> bool:
    """True for unique or primary key violations, not foreign key or NOT NULL ones."""
    sqlstate = getattr(error.orig, "pgcode", None) or getattr(error.orig, "sqlstate", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION
    return "UNIQUE constraint failed" in str(error.orig)


@contextmanager
def unit_of_work(
    db: Session,
    app_logger: AppLogger,
    ctx: LogContext,
    meta: Optional[Dict[str, Any]] = None,
    on_conflict: Optional[Callable[[], ServiceError]] = None,
) -> Iterator[None]:
    """
    Run a block as one transaction and log how it ended.

    Args:
        db: Session owning the transaction
        app_logger: Logger for failure entries
        ctx: Log context (with the operation's context tag)
        meta: Metadata attached to failure entries
        on_conflict: Builds the domain error for a unique or primary key
            violation; other IntegrityErrors are re-raised

    Raises:
        ServiceError: Domain errors from the block, or the translated conflict
        Exception: Anything else, after rollback and an error entry
    """
    try:
        yield
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if on_conflict is None or not is_duplicate_key(e):
            app_logger.error(f"Database constraint violation: {e.orig}", ctx, meta=meta)
            raise
        error = on_conflict()
        app_logger.warn(error.message, ctx, meta=meta)
        raise error from e
    except ServiceError as e:
        db.rollback()
        app_logger.warn(e.message, ctx, meta=meta)
        raise
    except Exception as e:
        db.rollback()
        app_logger.error(f"Unexpected error: {e}", ctx, meta=meta)
        raise
