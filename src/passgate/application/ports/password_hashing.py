"""Password hashing port."""

from typing import Protocol


class PasswordHashingCapability(Protocol):
    """What the auth use cases need from a password hasher."""

    @property
    def dummy_hash(self) -> str:
        """Hash to verify against when no user was found."""
        ...

    def hash(self, password: str) -> str:
        """Return an opaque, salted hash of the plaintext."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the plaintext matches; False for malformed hashes."""
        ...

    def needs_rehash(self, password_hash: str) -> bool:
        """Return True if the hash was made with a different work factor."""
        ...
