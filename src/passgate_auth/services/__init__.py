"""Authentication services.

Provides password hashing and JWT token management.
"""

from passgate_auth.services.jwt_service import JWTService
from passgate_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
