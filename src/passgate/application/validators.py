"""Structural validation of authentication input.

Validators are pure functions over the raw request body. They collect
every field error at once and never touch the store or the hasher.
"""

from typing import Any, Mapping

from passgate.domain.shared.exceptions import ValidationError
from passgate.domain.user import Email

ValidationErrorSet = dict[str, str]

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def validate_login(data: Mapping[str, Any]) -> ValidationErrorSet:
    errors: ValidationErrorSet = {}

    if not Email.is_valid(data.get("email")):
        errors["email"] = "Invalid email format"

    password = data.get("password")
    if not isinstance(password, str) or not password:
        errors["password"] = "Password is required"

    return errors


def validate_register(data: Mapping[str, Any]) -> ValidationErrorSet:
    errors: ValidationErrorSet = {}

    if not Email.is_valid(data.get("email")):
        errors["email"] = "Invalid email format"

    password = data.get("password")
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        errors["password"] = (
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
        )

    name = data.get("name")
    if not isinstance(name, str) or not (
        NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH
    ):
        errors["name"] = (
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )

    return errors


def ensure_valid(errors: ValidationErrorSet) -> None:
    """Raise ValidationError if the error set is not empty."""
    if errors:
        raise ValidationError(errors)
