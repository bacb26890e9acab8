"""User domain - manages user identity and credentials.

This domain handles:
- User aggregate (identity, profile, password hash, timestamps)
- Email value object (validated, normalized)

Design notes:
- User ID is an integer assigned by the store on first save
- Email is unique across all users and normalized to lower case
- The password hash is opaque; plaintext never reaches this layer
"""

from passgate.domain.user.aggregates import User
from passgate.domain.user.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidEmailError,
    UserNotFoundError,
)
from passgate.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyRegisteredError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
]
