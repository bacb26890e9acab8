from datetime import datetime
from typing import Optional, Union

from passgate.domain.shared.exceptions import BusinessRuleViolation
from passgate.domain.shared.time import utc_now
from passgate.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds identity, profile and the opaque password hash. A freshly
    created user has no id; the store assigns one when it is saved.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        name: str,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = self._require_hash(password_hash)
        self._name = name
        self._id = id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def name(self) -> str:
        return self._name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, user_id: int) -> None:
        if self._id is not None and self._id != user_id:
            msg = "User id cannot be changed once assigned"
            raise BusinessRuleViolation(msg, details={"user_id": self._id})
        self._id = user_id

    def update_profile(self, name: str) -> None:
        self._name = name
        self._updated_at = utc_now()

    def change_password(self, new_password_hash: str) -> None:
        self._password_hash = self._require_hash(new_password_hash)
        self._updated_at = utc_now()

    @staticmethod
    def _require_hash(password_hash: str) -> str:
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise BusinessRuleViolation(msg)
        return password_hash

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        name: str,
    ) -> "User":
        return cls(
            email=email,
            password_hash=password_hash,
            name=name,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        email: Union[str, Email],
        password_hash: str,
        name: str,
        created_at: datetime,
        updated_at: Optional[datetime],
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
