"""SQLAlchemy implementation of the user store."""

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from passgate.application.ports import UserStoreCapability
from passgate.domain.shared.time import ensure_tz_aware
from passgate.domain.user import Email, EmailAlreadyRegisteredError, User
from passgate.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserStoreCapability):
    """SQLAlchemy implementation of the UserStoreCapability port.

    Writes are flushed but not committed; the request owns the
    transaction boundary.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalize email for lookup
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, user: User) -> User:
        if user.is_persisted:
            await self.update(user)
            return user

        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            # Unique constraint on email: another request registered it first
            if "unique" in str(e).lower():
                raise EmailAlreadyRegisteredError(user.email) from e
            raise

        user.assign_id(model.id)
        logger.debug("Created user: %s (email: %s)", model.id, model.email)
        return self._map_to_domain(model)

    async def update(self, user: User) -> bool:
        if user.id is None:
            return False

        model = await self._find_model_by_id(user.id)
        if model is None:
            return False

        self._update_model(model, user)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise EmailAlreadyRegisteredError(user.email) from e
            raise

        logger.debug("Updated user: %s", user.id)
        return True

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            name=model.name,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=(
                ensure_tz_aware(model.updated_at) if model.updated_at else None
            ),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            email=user.email,
            password_hash=user.password_hash,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # Note: id never changes
        model.email = user.email
        model.password_hash = user.password_hash
        model.name = user.name
        model.updated_at = user.updated_at
