"""Data classes shared by the auth services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Decoded claims of a verified access token."""

    subject: int
    email: str
    issued_at: datetime
    expires_at: datetime
    issuer: str

    @property
    def user_id(self) -> int:
        return self.subject

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
