"""DTOs for the authentication use cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from passgate.domain.user import User
from passgate_auth.schemas import TokenClaims


@dataclass(frozen=True)
class RegisterRequest:
    """Validated input for registration."""

    email: str
    password: str = field(repr=False)
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RegisterRequest:
        return cls(
            email=str(data.get("email", "")),
            password=str(data.get("password", "")),
            name=str(data.get("name", "")),
        )


@dataclass(frozen=True)
class LoginRequest:
    """Validated input for login."""

    email: str
    password: str = field(repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoginRequest:
        return cls(
            email=str(data.get("email", "")),
            password=str(data.get("password", "")),
        )


@dataclass(frozen=True)
class LoginResult:
    """Authenticated user together with the freshly issued token."""

    user: User
    token: str
    expires_in: int


@dataclass(frozen=True)
class CurrentUserResult:
    """User resolved from a bearer token, with the token's claims."""

    user: User
    claims: TokenClaims
