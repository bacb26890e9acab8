"""Authentication schemas for response models.

Request bodies are plain JSON objects checked by the application
validators, so only responses are modelled here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer

from passgate.domain.user import User

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(TIMESTAMP_FORMAT) if value is not None else None


class UserResponse(BaseModel):
    """Response schema for user data. Never includes the password hash."""

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return format_timestamp(value)

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class MessageResponse(BaseModel):
    """Response schema carrying only a message."""

    message: str


class RegisterResponse(BaseModel):
    """Response schema for a successful registration."""

    message: str
    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Registration successful",
                "user": {
                    "id": 1,
                    "email": "user@example.com",
                    "name": "Test User",
                    "created_at": "2024-12-05 10:30:00",
                    "updated_at": None,
                },
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    message: str
    user: UserResponse
    token: str
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful",
                "user": {
                    "id": 1,
                    "email": "user@example.com",
                    "name": "Test User",
                    "created_at": "2024-12-05 10:30:00",
                    "updated_at": None,
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "expires_in": 3600,
            },
        },
    )


class TokenInfo(BaseModel):
    """Issue and expiry time of the presented token."""

    issued_at: datetime
    expires_at: datetime

    @field_serializer("issued_at", "expires_at")
    def _serialize_timestamp(self, value: datetime) -> Optional[str]:
        return format_timestamp(value)


class CurrentUserResponse(BaseModel):
    """Response schema for GET /auth/me."""

    user: UserResponse
    token_info: TokenInfo
