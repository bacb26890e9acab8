"""Register a new user."""

import asyncio
import logging

from passgate.application.dtos import RegisterRequest
from passgate.application.ports import PasswordHashingCapability, UserStoreCapability
from passgate.domain.user import EmailAlreadyRegisteredError, User

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """Command to register a new user with email, password and name."""

    def __init__(
        self,
        user_store: UserStoreCapability,
        password_hasher: PasswordHashingCapability,
    ):
        self._user_store = user_store
        self._password_hasher = password_hasher

    async def execute(self, request: RegisterRequest) -> User:
        existing = await self._user_store.find_by_email(request.email)
        if existing is not None:
            raise EmailAlreadyRegisteredError(existing.email)

        # bcrypt is slow on purpose; keep it off the event loop
        password_hash = await asyncio.to_thread(
            self._password_hasher.hash,
            request.password,
        )
        user = User.create(request.email, password_hash, request.name)

        # The store's unique constraint settles concurrent registrations
        persisted = await self._user_store.save(user)

        logger.info("User registered: %s (id=%s)", persisted.email, persisted.id)
        return persisted
