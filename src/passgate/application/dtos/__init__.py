from passgate.application.dtos.auth_dto import (
    CurrentUserResult,
    LoginRequest,
    LoginResult,
    RegisterRequest,
)

__all__ = [
    "CurrentUserResult",
    "LoginRequest",
    "LoginResult",
    "RegisterRequest",
]
