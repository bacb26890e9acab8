"""JWT token service.

Provides signed, time-bounded bearer tokens carrying user identity claims.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt

from passgate_auth.exceptions import InvalidTokenError
from passgate_auth.schemas import TokenClaims

REQUIRED_CLAIMS = ["iss", "iat", "exp", "sub", "email"]


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are signed with a symmetric secret using a single pinned
    algorithm. Expiry is checked against the injected clock, so tests can
    move time forward without sleeping.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key", issuer="http://localhost")
    >>> token = service.generate(42, "user@example.com")
    >>> claims = service.decode(token)
    >>> print(claims.subject)
    42
    """

    DEFAULT_EXPIRES_IN_SECONDS = 3600
    DEFAULT_ISSUER = "localhost"
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS,
        issuer: str = DEFAULT_ISSUER,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expires_in_seconds
            Seconds until a token expires (default 3600)
        issuer
            Value of the ``iss`` claim, usually the public app URL
        clock
            Callable returning the current timezone-aware time
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if expires_in_seconds <= 0:
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expires_in = timedelta(seconds=expires_in_seconds)
        self._issuer = issuer
        self._clock = clock

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self._expires_in.total_seconds())

    @property
    def issuer(self) -> str:
        return self._issuer

    def generate(self, user_id: int, email: str) -> str:
        """Create a signed access token for a persisted user.

        Parameters
        ----------
        user_id
            The user's store-assigned identifier
        email
            The user's email address

        Returns
        -------
        The encoded JWT token string
        """
        if user_id is None:
            msg = "Cannot issue a token for an unpersisted user"
            raise ValueError(msg)

        now = self._clock()
        payload = {
            "iss": self._issuer,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
            # PyJWT requires a string subject
            "sub": str(user_id),
            "email": email,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def decode(self, token: str) -> TokenClaims:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenClaims containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
                options={
                    "require": REQUIRED_CLAIMS,
                    # Time claims are checked below against our own clock
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )

            claims = TokenClaims(
                subject=int(payload["sub"]),
                email=str(payload["email"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                issuer=payload["iss"],
            )

        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        if claims.is_expired(self._clock()):
            msg = "Token has expired"
            raise InvalidTokenError(msg)

        return claims

    def validate(self, token: str) -> bool:
        """Return True if the token verifies and has not expired."""
        try:
            self.decode(token)
        except InvalidTokenError:
            return False
        return True
