"""SQLAlchemy model for User aggregate."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from passgate.domain.shared.time import utc_now
from passgate.infrastructure.persistence.sqlalchemy.models.base import Base


class UserModel(Base):
    """
    SQLAlchemy model for persisting User aggregates.

    - id is assigned by the database on insert
    - email is unique; the constraint is the final arbiter for
      concurrent registrations of the same address
    - updated_at stays NULL until the first mutation

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
