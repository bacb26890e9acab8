from passgate.domain.user.aggregates.user import User

__all__ = ["User"]
