"""FastAPI dependency injection for the Passgate API.

Provides dependencies for:
- Settings and process-wide services (built once in the app factory)
- Database sessions
- Use cases wired with their collaborators
- Bearer token extraction and the JSON request body
"""

import logging
from typing import Annotated, Any, AsyncGenerator

from fastapi import Body, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from passgate.application.commands import LoginUseCase, RegisterUseCase
from passgate.application.queries import GetCurrentUserQuery
from passgate.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from passgate_auth import InvalidTokenError, JWTService, PasswordHashingService
from passgate_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Construction helpers (called once by the app factory)
# -----------------------------------------------------------------------------


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine that owns the connection pool."""
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def create_password_service(settings: Settings) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def create_jwt_service(settings: Settings) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expires_in_seconds=settings.jwt_expiration_seconds,
        issuer=settings.app_url,
    )


# -----------------------------------------------------------------------------
# Settings & Services
# -----------------------------------------------------------------------------


def get_api_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request. Routers commit explicitly; anything left
    uncommitted is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------


def get_user_store(session: DBSession) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(session)


UserStoreDep = Annotated[UserRepositorySQLAlchemy, Depends(get_user_store)]


def get_register_use_case(
    user_store: UserStoreDep,
    password_service: PasswordServiceDep,
) -> RegisterUseCase:
    return RegisterUseCase(
        user_store=user_store,
        password_hasher=password_service,
    )


def get_login_use_case(
    user_store: UserStoreDep,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> LoginUseCase:
    return LoginUseCase(
        user_store=user_store,
        password_hasher=password_service,
        token_issuer=jwt_service,
    )


def get_current_user_query(
    user_store: UserStoreDep,
    jwt_service: JWTServiceDep,
) -> GetCurrentUserQuery:
    return GetCurrentUserQuery(user_store=user_store, token_issuer=jwt_service)


RegisterUseCaseDep = Annotated[RegisterUseCase, Depends(get_register_use_case)]
LoginUseCaseDep = Annotated[LoginUseCase, Depends(get_login_use_case)]
CurrentUserQueryDep = Annotated[GetCurrentUserQuery, Depends(get_current_user_query)]


# -----------------------------------------------------------------------------
# Request Input
# -----------------------------------------------------------------------------


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises
    ------
    InvalidTokenError
        If the header is missing or not a Bearer credential
    """
    if credentials is None or not credentials.credentials:
        msg = "No token provided"
        raise InvalidTokenError(msg)
    return credentials.credentials


BearerToken = Annotated[str, Depends(get_bearer_token)]


async def get_json_body(
    payload: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    """
    Raw JSON object body; field rules live in application.validators.

    An empty object is treated like a missing body.

    Raises
    ------
    RequestValidationError
        If the object has no members
    """
    if not payload:
        raise RequestValidationError(
            [
                {
                    "type": "missing",
                    "loc": ("body",),
                    "msg": "Request body is an empty JSON object",
                    "input": payload,
                },
            ],
            body=payload,
        )
    return payload


JSONBody = Annotated[dict[str, Any], Depends(get_json_body)]
