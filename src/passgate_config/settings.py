"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. PASSGATE_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_BCRYPT_ROUNDS = 10
MAX_BCRYPT_ROUNDS = 31


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. PASSGATE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("PASSGATE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values

    Settings are read once at startup and never mutated afterwards.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Security (MUST be set - app fails without it)
    jwt_secret_key: SecretStr  # Symmetric secret for signing tokens

    # Application
    app_name: str = "Passgate"
    app_env: str = "production"
    app_url: str = "http://localhost"  # Used as the token issuer
    debug: bool = False

    # Tokens
    jwt_expiration_seconds: int = 3600

    # Password hashing (bcrypt work factor)
    bcrypt_rounds: int = 12

    # Database: DATABASE_URL wins over the POSTGRES_ components
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("database_url_override", "database_url"),
    )
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "passgate"

    # API (API_ prefix)
    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8000
    api_prefix: str = "/api"
    api_cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    @field_validator("bcrypt_rounds")
    @classmethod
    def _validate_bcrypt_rounds(cls, v: int) -> int:
        if not MIN_BCRYPT_ROUNDS <= v <= MAX_BCRYPT_ROUNDS:
            msg = (
                f"bcrypt_rounds must be between {MIN_BCRYPT_ROUNDS} "
                f"and {MAX_BCRYPT_ROUNDS}"
            )
            raise ValueError(msg)
        return v

    @field_validator("jwt_expiration_seconds")
    @classmethod
    def _validate_expiration(cls, v: int) -> int:
        if v <= 0:
            msg = "jwt_expiration_seconds must be positive"
            raise ValueError(msg)
        return v

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("api_prefix")
    @classmethod
    def _validate_api_prefix(cls, v: str) -> str:
        v = v.rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Return the database URL, built from components unless overridden."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    JWT_SECRET_KEY must be provided via environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
