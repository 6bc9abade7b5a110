"""
Database connection and session management.

This module provides the SQLAlchemy engine and session factory for HackHub.
PostgreSQL is used in deployment; SQLite is supported for development
and tests.
"""

import sqlite3
from pathlib import Path
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool


# Load environment variables from .env in the project root
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

from hackhub.config.settings import get_settings  # noqa: E402


DATABASE_URL = get_settings().database_url


def create_db_engine(url: str) -> Engine:
    """
    Create an engine with pool settings suited to the backend.

    Args:
        url: SQLAlchemy database URL

    Returns:
        Configured Engine
    """
    if url.startswith("sqlite"):
        # SQLite doesn't support pool_size, max_overflow, or pool_recycle.
        # An in-memory database only exists on its single connection.
        if ":memory:" in url:
            return create_engine(
                url,
                connect_args={'check_same_thread': False},
                poolclass=StaticPool,
                echo=False,
            )
        return create_engine(
            url,
            connect_args={'check_same_thread': False},
            echo=False,
        )

    return create_engine(
        url,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=False,
    )


engine = create_db_engine(DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI routes to get a database session.

    Yields:
        Session: SQLAlchemy database session, closed after the request
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key enforcement on SQLite connections and replace the
    ASCII-only built-in lower() with a Unicode-aware one.

    Cascade and SET NULL rules on event links depend on the pragma. The
    case-insensitive team name lookup and its (event_id, lower(name))
    unique index depend on lower() folding the same way str.lower() does.
    """
    if isinstance(dbapi_conn, sqlite3.Connection):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def init_db():
    """
    Initialize database tables.

    Used for local development and tests. Deployments use Alembic migrations.
    """
    from hackhub.models import Base
    Base.metadata.create_all(bind=engine)


def dispose_engine():
    """
    Dispose of the engine and close all connections.
    """
    engine.dispose()
