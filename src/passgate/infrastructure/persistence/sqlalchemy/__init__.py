"""SQLAlchemy implementation of the user store.

Provides:
- Base: Declarative base for all models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: UserStoreCapability implementation
"""

from passgate.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from passgate.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
