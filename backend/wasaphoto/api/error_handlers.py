"""Error Handlers — global exception handlers for the WASAPhoto API.

Invariants:
    - WasaPhotoError → its http_status with {"message": ...}
    - RequestValidationError → 400 with {"message": "Bad Request: ..."}
    - Exception (catch-all) → 500, never leaks internal details
    - Client errors logged at WARNING, infrastructure errors at ERROR

Design Decisions:
    - Three-layer handler: domain (WasaPhotoError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from wasaphoto.core.errors import WasaPhotoError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_wasaphoto_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_wasaphoto_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(WasaPhotoError)
    async def wasaphoto_error_handler(request: Request, exc: WasaPhotoError):
        """Handle all WASAPhoto domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the message envelope from the first failing field."""
    errors = exc.errors()
    if not errors:
        return {"message": "Bad Request: The request is not valid"}
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"] if loc != "body")
    return {"message": f"Bad Request: {field or 'body'}: {first['msg']}"}
