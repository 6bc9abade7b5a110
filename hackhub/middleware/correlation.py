"""
Correlation ID middleware.

Assigns every request a correlation ID, exposes it as
request.state.correlation_id for the application log, echoes it back in
the X-Correlation-ID response header and writes one access log line per
request.

A client-supplied X-Correlation-ID is reused when it looks like an ID
(1-64 characters of letters, digits, '-' or '_'); anything else is
replaced with a fresh one.
"""

import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from hackhub.utils.logging_config import get_logger

logger = get_logger("api")

CORRELATION_HEADER = "X-Correlation-ID"

_VALID_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation ID to each request and its response."""

    async def dispatch(self, request: Request, call_next):
        supplied = request.headers.get(CORRELATION_HEADER)
        correlation_id = supplied if supplied and _VALID_ID.match(supplied) else new_correlation_id()
        request.state.correlation_id = correlation_id

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            "%s %s -> %d",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
