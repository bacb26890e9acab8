"""Token issuing port."""

from typing import Protocol

from passgate_auth.schemas import TokenClaims


class TokenIssuingCapability(Protocol):
    """What the auth use cases need from a bearer token service."""

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        ...

    def generate(self, user_id: int, email: str) -> str:
        """Issue a signed token for a persisted user."""
        ...

    def decode(self, token: str) -> TokenClaims:
        """Return the claims, raising InvalidTokenError on any failure."""
        ...

    def validate(self, token: str) -> bool:
        """Non-raising variant of decode."""
        ...
