"""User store port. Interface for user persistence."""

from typing import Optional, Protocol, Union

from passgate.domain.user import Email, User


class UserStoreCapability(Protocol):
    """Port for persisting and looking up User aggregates.

    Email uniqueness is enforced by the implementation (a unique
    constraint), not by the callers' check-then-insert.
    """

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by exact (normalized) email.

        Returns
        -------
        User if found, None otherwise
        """
        ...

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by id.

        Returns
        -------
        User if found, None otherwise
        """
        ...

    async def save(self, user: User) -> User:
        """Insert a new user and return the persisted entity.

        Raises
        ------
        EmailAlreadyRegisteredError
            If the email is already in use
        """
        ...

    async def update(self, user: User) -> bool:
        """Update an existing user.

        Returns
        -------
        False if no user with that id exists
        """
        ...
