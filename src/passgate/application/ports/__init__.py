"""Application layer ports (aka capabilities)."""

from passgate.application.ports.password_hashing import PasswordHashingCapability
from passgate.application.ports.token_issuing import TokenIssuingCapability
from passgate.application.ports.user_store import UserStoreCapability

__all__ = [
    "PasswordHashingCapability",
    "TokenIssuingCapability",
    "UserStoreCapability",
]
