"""
FastAPI application entry point for the HackHub backend.

This module initializes the FastAPI application with:
- Application state (database-backed application logger)
- Correlation ID, session and CORS middleware
- Rate limiting for the auth endpoints
- Exception handlers producing the response envelope
- Logging configuration

Environment Variables:
    HACKHUB_ENV: Environment (development/production/test, default: development)
    HACKHUB_DB_URL: Database URL (default: sqlite:///./hackhub.db)
    HACKHUB_LOG_LEVEL: Log level (DEBUG/INFO/WARNING/ERROR/CRITICAL, default: INFO)
    SESSION_SECRET_KEY: Session cookie signing key (required in production)
"""

import secrets
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.sessions import SessionMiddleware

from hackhub import __version__
from hackhub.api import routers
from hackhub.api.auth import limiter
from hackhub.api.errors import register_exception_handlers
from hackhub.config.session import get_session_settings
from hackhub.config.settings import get_settings
from hackhub.db.database import SessionLocal, dispose_engine
from hackhub.middleware.correlation import CorrelationIdMiddleware
from hackhub.services.app_log_service import DatabaseAppLogger
from hackhub.utils.logging_config import get_logger, init_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create the application logger
    - Shutdown: Dispose of the database engine

    Args:
        app: FastAPI application instance

    Yields:
        Control to the application
    """
    logger = get_logger("api")
    logger.info("Starting HackHub backend application")

    settings = get_settings()
    app.state.app_logger = DatabaseAppLogger(SessionLocal, settings.environment)

    logger.info("HackHub backend started successfully")

    yield

    logger.info("Shutting down HackHub backend application")
    dispose_engine()


def _session_secret(logger) -> str:
    session_settings = get_session_settings()
    if session_settings.is_configured:
        return session_settings.session_secret_key
    if get_settings().is_production:
        raise RuntimeError("SESSION_SECRET_KEY must be set in production")
    logger.warning("SESSION_SECRET_KEY not set; using a random key, sessions reset on restart")
    return secrets.token_urlsafe(32)


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, handlers and routers."""
    logger = get_logger("api")
    settings = get_settings()
    session_settings = get_session_settings()

    app = FastAPI(
        title="HackHub API",
        description="Backend API for running hackathons and club events: events, "
                    "teams, judges, organisers, sponsors and team proposals.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Middleware added last runs first: correlation ID wraps everything
    app.add_middleware(
        SessionMiddleware,
        **session_settings.middleware_options(_session_secret(logger)),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, Any]:
        """Liveness probe."""
        return {
            "status": "healthy",
            "service": "hackhub-backend",
            "version": __version__,
        }

    for router in routers:
        app.include_router(router, prefix="/api")

    return app


# Initialize logging before creating app
init_logging()

app = create_app()
