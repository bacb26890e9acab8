"""Authentication router for registration, login and token inspection."""

import logging

from fastapi import APIRouter, status

from passgate.application.dtos import LoginRequest, RegisterRequest
from passgate.application.validators import (
    ensure_valid,
    validate_login,
    validate_register,
)
from passgate.presentation.api.dependencies import (
    BearerToken,
    CurrentUserQueryDep,
    DBSession,
    JSONBody,
    LoginUseCaseDep,
    RegisterUseCaseDep,
)
from passgate.presentation.api.schemas.auth import (
    CurrentUserResponse,
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    TokenInfo,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Email already registered, invalid or empty JSON"},
        422: {"description": "Field validation failed"},
    },
)
async def register(
    payload: JSONBody,
    use_case: RegisterUseCaseDep,
    session: DBSession,
) -> RegisterResponse:
    ensure_valid(validate_register(payload))

    user = await use_case.execute(RegisterRequest.from_dict(payload))
    await session.commit()

    return RegisterResponse(
        message="Registration successful",
        user=UserResponse.from_domain(user),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid or empty JSON"},
        401: {"description": "Invalid credentials"},
        422: {"description": "Field validation failed"},
    },
)
async def login(
    payload: JSONBody,
    use_case: LoginUseCaseDep,
    session: DBSession,
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns a bearer token valid for ``expires_in`` seconds. A stored
    hash with an outdated work factor is upgraded on success.
    """
    ensure_valid(validate_login(payload))

    result = await use_case.execute(LoginRequest.from_dict(payload))
    await session.commit()

    return LoginResponse(
        message="Login successful",
        user=UserResponse.from_domain(result.user),
        token=result.token,
        expires_in=result.expires_in,
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Missing, invalid or expired token"},
        404: {"description": "User no longer exists"},
    },
)
async def get_me(
    token: BearerToken,
    query: CurrentUserQueryDep,
) -> CurrentUserResponse:
    """
    Get the authenticated user's information.

    Requires a valid token in the Authorization header.
    """
    result = await query.execute(token)

    return CurrentUserResponse(
        user=UserResponse.from_domain(result.user),
        token_info=TokenInfo(
            issued_at=result.claims.issued_at,
            expires_at=result.claims.expires_at,
        ),
    )


@router.post(
    "/logout",
    summary="Logout user",
    responses={
        200: {"description": "Logged out"},
    },
)
async def logout() -> MessageResponse:
    """Logout user.

    Tokens are stateless and not revoked server side; the client
    discards its token.
    """
    logger.debug("Logout requested")
    return MessageResponse(message="Logout successful")
