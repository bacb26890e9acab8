"""Query to resolve the user behind a bearer token."""

from passgate.application.dtos import CurrentUserResult
from passgate.application.ports import TokenIssuingCapability, UserStoreCapability
from passgate.domain.user import UserNotFoundError


class GetCurrentUserQuery:
    """Decode a bearer token and load the user it names."""

    def __init__(
        self,
        user_store: UserStoreCapability,
        token_issuer: TokenIssuingCapability,
    ) -> None:
        self._user_store = user_store
        self._token_issuer = token_issuer

    async def execute(self, token: str) -> CurrentUserResult:
        # Raises InvalidTokenError for tampered or expired tokens
        claims = self._token_issuer.decode(token)

        user = await self._user_store.find_by_id(claims.subject)
        if user is None:
            raise UserNotFoundError(claims.subject)

        return CurrentUserResult(user=user, claims=claims)
