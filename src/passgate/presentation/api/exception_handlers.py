"""Centralized exception handlers for the FastAPI application.

This module is the single place where failures become HTTP responses.
Use cases and validators only raise; they never build responses.

Error Response Format:
    {
        "error": {
            "code": "MACHINE_READABLE_ERROR_CODE",
            "message": "Human-readable error message",
            "status": 401
        }
    }

Validation failures add {"errors": {"field": "message"}} next to "error".

Usage:
    from passgate.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from passgate.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from passgate_auth import AuthError, InvalidCredentialsError

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_JSON: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ARGUMENT: status.HTTP_422_UNPROCESSABLE_CONTENT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DOMAIN_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INTERNAL_SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INVALID_TOKEN_MESSAGE = "Invalid token"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _get_status_for_exception(exc: DomainException) -> int:
    """HTTP status for a domain exception; the table covers every code."""
    return ERROR_CODE_TO_STATUS[exc.code]


def _create_error_response(
    status_code: int,
    message: str,
    code: ErrorCode,
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Create a standardized error response."""
    error: dict[str, Any] = {
        "code": code.value,
        "message": message,
        "status": status_code,
    }
    error.update(extra)
    return JSONResponse(
        status_code=status_code,
        content={"error": error},
        headers=headers,
    )


def _is_debug(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.debug)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Return every field error at once, next to the standard error object."""
        logger.info(
            "Validation failed on %s %s: fields=%s",
            request.method,
            request.url.path,
            sorted(exc.errors),
        )
        status_code = _get_status_for_exception(exc)
        return JSONResponse(
            status_code=status_code,
            content={
                "error": {
                    "code": exc.code.value,
                    "message": exc.message,
                    "status": status_code,
                },
                "errors": exc.errors,
            },
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle credential and token failures.

        Credential failures keep one message regardless of cause. Token
        failures get a generic message; the reason is only logged.
        """
        if isinstance(exc, InvalidCredentialsError):
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=exc.message,
                code=ErrorCode.INVALID_CREDENTIALS,
            )

        logger.warning(
            "Unauthorized request on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=INVALID_TOKEN_MESSAGE,
            code=ErrorCode.UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_body_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Body is missing, not JSON, or not a JSON object."""
        logger.info(
            "Unparsable request body on %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid JSON",
            code=ErrorCode.INVALID_JSON,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        The exception text and traceback are only echoed in debug mode.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )

        if _is_debug(request):
            return _create_error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=str(exc) or exc.__class__.__name__,
                code=ErrorCode.INTERNAL_SERVER_ERROR,
                trace=traceback.format_exception(
                    type(exc),
                    exc,
                    exc.__traceback__,
                ),
            )

        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
            code=ErrorCode.INTERNAL_SERVER_ERROR,
        )
