from passgate.presentation.api.schemas.auth import (
    CurrentUserResponse,
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    TokenInfo,
    UserResponse,
)
from passgate.presentation.api.schemas.health import HealthResponse

__all__ = [
    "CurrentUserResponse",
    "HealthResponse",
    "LoginResponse",
    "MessageResponse",
    "RegisterResponse",
    "TokenInfo",
    "UserResponse",
]
