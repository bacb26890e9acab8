"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
domain and application layers. All domain exceptions inherit from
DomainException so the presentation layer can map them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Request errors
    INVALID_JSON = "INVALID_JSON"  # 400
    INVALID_ARGUMENT = "INVALID_ARGUMENT"  # 422

    # Authentication errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"

    # Not Found Errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Domain rule violations (400)
    DOMAIN_ERROR = "DOMAIN_ERROR"

    # General Errors (500)
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DOMAIN_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when structural input validation fails.

    Carries every field error at once, keyed by field name.
    """

    def __init__(
        self,
        errors: dict[str, str],
        message: str = "Validation failed",
    ) -> None:
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, {"fields": list(errors)})
        self.errors = dict(errors)


class BusinessRuleViolation(DomainException):
    """Raised when a business rule or domain invariant is violated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DOMAIN_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.USER_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
