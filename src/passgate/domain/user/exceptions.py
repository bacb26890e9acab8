"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from passgate.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
)


class InvalidEmailError(ValueError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyRegisteredError(BusinessRuleViolation):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already registered",
            ErrorCode.DOMAIN_ERROR,
            {"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int | None = None) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": user_id},
        )
