"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers. Process-wide services (password
hasher, token service, database engine) are built here once from the
settings and handed to requests through ``app.state``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from passgate import __version__
from passgate.infrastructure.persistence.sqlalchemy.models import Base
from passgate.presentation.api.dependencies import (
    create_engine,
    create_jwt_service,
    create_password_service,
    create_session_maker,
)
from passgate.presentation.api.exception_handlers import setup_exception_handlers
from passgate.presentation.api.routers import auth_router, health_router
from passgate_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging with:
    - Console output with timestamps and module names
    - Configurable log level for passgate modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("passgate").setLevel(log_level)
    logging.getLogger("passgate_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User registration and bearer token authentication.

**Registration & Login:**
- Register accounts with email, password and name
- Login to obtain a signed bearer token
- Inspect the current user with `GET /auth/me`

**Security:**
- Passwords are hashed with bcrypt
- Tokens are HS256-signed JWTs with a fixed lifetime
- Logout is client side; tokens are not revoked
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting %s API v%s...", app.state.settings.app_name, API_VERSION)
    await _init_database_schema(app)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down %s API...", app.state.settings.app_name)
    await app.state.engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(app: FastAPI) -> None:
    """Create missing tables and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Minimal authentication service: registration, login "
        "and bearer tokens.",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Read-only for the lifetime of the process
    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.password_service = create_password_service(settings)
    app.state.jwt_service = create_jwt_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    prefix = settings.api_prefix
    app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["Authentication"])
    app.include_router(health_router, prefix=prefix, tags=["Health"])

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "status": "running",
            "endpoints": {
                "health": f"{prefix}/health",
                "register": f"{prefix}/auth/register",
                "login": f"{prefix}/auth/login",
                "me": f"{prefix}/auth/me",
                "logout": f"{prefix}/auth/logout",
            },
        }

    return app
