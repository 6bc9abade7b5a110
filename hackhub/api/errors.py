"""
Exception handlers translating errors into the response envelope.

Mapping:
- NotFoundError, NotAssignedError  -> 404 NOT_FOUND
- ConflictError                    -> 409 CONFLICT
- ValidationError, request body    -> 400 BAD_REQUEST
- PermissionDeniedError            -> 403 FORBIDDEN
- HTTPException                    -> by status (401 UNAUTHORIZED, 403 FORBIDDEN, ...)
- anything else                    -> 500 INTERNAL_SERVER_ERROR, generic message

Unexpected errors never leak their message to the client; the detail
goes to the api/db loggers with the request's correlation ID.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hackhub.services.exceptions import (
    ConflictError,
    NotAssignedError,
    NotFoundError,
    PermissionDeniedError,
    ServiceError,
    ValidationError,
)
from hackhub.utils.logging_config import get_logger


logger = get_logger("api")

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_409_CONFLICT: "CONFLICT",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "INTERNAL_SERVER_ERROR",
}


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build a failure envelope; unknown statuses fall back to their class."""
    code = STATUS_CODES.get(status_code)
    if code is None:
        code = "BAD_REQUEST" if status_code < 500 else "INTERNAL_SERVER_ERROR"
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"message": message, "code": code}},
        headers=headers,
    )


def service_error_status(exc: ServiceError) -> int:
    if isinstance(exc, (NotFoundError, NotAssignedError)):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, PermissionDeniedError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def first_validation_message(exc: RequestValidationError) -> str:
    """Readable message for the first failing field, e.g. 'endDate: ...'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = str(first.get("msg", "Invalid value"))
    # pydantic prefixes messages raised from validators
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    return f"{'.'.join(loc)}: {message}" if loc else message


def _correlation_id(request: Request):
    return getattr(request.state, "correlation_id", None)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on the application."""

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
        status_code = service_error_status(exc)
        if status_code >= 500:
            logger.error(
                "Unhandled service error",
                extra={
                    "correlation_id": _correlation_id(request),
                    "path": request.url.path,
                    "error_type": type(exc).__name__,
                    "error": exc.message,
                },
            )
            return error_response(status_code, GENERIC_ERROR_MESSAGE)
        return error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = first_validation_message(exc)
        logger.warning(
            "Validation error",
            extra={
                "correlation_id": _correlation_id(request),
                "path": request.url.path,
                "method": request.method,
                "error": message,
            },
        )
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        get_logger("db").error(
            "Database error",
            extra={
                "correlation_id": _correlation_id(request),
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            extra={
                "correlation_id": _correlation_id(request),
                "path": request.url.path,
                "method": request.method,
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
            exc_info=True,
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)
