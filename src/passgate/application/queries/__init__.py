"""Application queries (read-only use cases)."""

from passgate.application.queries.auth import GetCurrentUserQuery

__all__ = ["GetCurrentUserQuery"]
