"""Passgate Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the application domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    passgate_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from passgate_auth import PasswordHashingService, JWTService
"""

from passgate_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from passgate_auth.schemas import TokenClaims
from passgate_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenClaims",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
]
