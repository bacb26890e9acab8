"""Health check schema."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: dict[str, str | bool]
    database: dict[str, str]
