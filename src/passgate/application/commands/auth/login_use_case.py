"""Authenticate a user and issue a bearer token."""

import asyncio
import logging

from passgate.application.dtos import LoginRequest, LoginResult
from passgate.application.ports import (
    PasswordHashingCapability,
    TokenIssuingCapability,
    UserStoreCapability,
)
from passgate.domain.user import User
from passgate_auth import InvalidCredentialsError

logger = logging.getLogger(__name__)


class LoginUseCase:
    """Command to log in with email and password.

    Unknown emails and wrong passwords fail with the same
    InvalidCredentialsError after the same bcrypt work, so neither the
    response nor its timing reveals which addresses are registered.
    """

    def __init__(
        self,
        user_store: UserStoreCapability,
        password_hasher: PasswordHashingCapability,
        token_issuer: TokenIssuingCapability,
    ):
        self._user_store = user_store
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    async def execute(self, request: LoginRequest) -> LoginResult:
        user = await self._user_store.find_by_email(request.email)
        if user is None:
            await asyncio.to_thread(
                self._password_hasher.verify,
                request.password,
                self._password_hasher.dummy_hash,
            )
            logger.warning("Failed login attempt for unknown email")
            raise InvalidCredentialsError

        password_ok = await asyncio.to_thread(
            self._password_hasher.verify,
            request.password,
            user.password_hash,
        )
        if not password_ok:
            logger.warning("Failed login attempt for user id=%s", user.id)
            raise InvalidCredentialsError

        if self._password_hasher.needs_rehash(user.password_hash):
            await self._upgrade_hash(user, request.password)

        token = self._token_issuer.generate(user.id, user.email)

        logger.info("User logged in: %s", user.email)
        return LoginResult(
            user=user,
            token=token,
            expires_in=self._token_issuer.expires_in,
        )

    async def _upgrade_hash(self, user: User, password: str) -> None:
        """Re-hash with the current work factor while the plaintext is known."""
        new_hash = await asyncio.to_thread(self._password_hasher.hash, password)
        user.change_password(new_hash)
        await self._user_store.update(user)
        logger.info("Upgraded password hash work factor for user id=%s", user.id)
