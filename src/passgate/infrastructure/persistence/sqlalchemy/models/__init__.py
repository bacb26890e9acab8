from passgate.infrastructure.persistence.sqlalchemy.models.base import Base
from passgate.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["Base", "UserModel"]
