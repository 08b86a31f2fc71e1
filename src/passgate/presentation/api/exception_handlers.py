"""Centralized exception handlers for the FastAPI application.

Auth errors raised by the service are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from passgate.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from passgate_auth import (
    AuthError,
    InternalError,
    InvalidApplicationError,
    InvalidCredentialsError,
    InvalidTokenError,
    UnknownUserError,
    UserAlreadyExistsError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error type to HTTP Status Mapping
# =============================================================================

# Checked in order; subclasses must come before their parents.
ERROR_TO_STATUS: tuple[tuple[type[AuthError], int], ...] = (
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (UserAlreadyExistsError, status.HTTP_409_CONFLICT),
    (UnknownUserError, status.HTTP_404_NOT_FOUND),
    (InvalidApplicationError, status.HTTP_400_BAD_REQUEST),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def _get_status_for_exception(exc: AuthError) -> int:
    for error_type, status_code in ERROR_TO_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle auth errors with structured response.

        The service already logged internal failures with full detail, so
        only the outcome is logged here.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Auth error on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=InternalError.code,
        )
