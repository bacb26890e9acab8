"""Email value object.

Provides validated, normalized email addresses for user identification.
Emails are compared case-insensitively: the normalized form is stripped
and lower-cased.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from passgate.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = self.value.strip().lower()

        try:
            validate_email(normalized, check_deliverability=False)
        except EmailNotValidError as e:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg) from e

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    @classmethod
    def is_valid(cls, value: object) -> bool:
        try:
            cls(value)  # type: ignore[arg-type]
        except InvalidEmailError:
            return False
        return True

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
