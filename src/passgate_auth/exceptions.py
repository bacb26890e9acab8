"""Authentication exceptions.

These exceptions are raised by the passgate_auth package and by the
authentication use cases. They are translated into HTTP responses by the
API exception handlers only.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message is identical for unknown emails and wrong passwords.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
