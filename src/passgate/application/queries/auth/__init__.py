from passgate.application.queries.auth.get_current_user_query import (
    GetCurrentUserQuery,
)

__all__ = ["GetCurrentUserQuery"]
