"""Health check router."""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from passgate.domain.shared.time import utc_now
from passgate.presentation.api.dependencies import DBSession, SettingsDep
from passgate.presentation.api.schemas.auth import format_timestamp
from passgate.presentation.api.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Service health")
async def health_check(session: DBSession, settings: SettingsDep) -> HealthResponse:
    """Report service status and database connectivity."""
    try:
        await session.execute(text("SELECT 1"))
        db_status = "connected"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database health check failed: %s", e)
        db_status = "unavailable"

    return HealthResponse(
        status="OK" if db_status == "connected" else "DEGRADED",
        timestamp=format_timestamp(utc_now()) or "",
        environment={
            "app_env": settings.app_env,
            "debug": settings.debug,
        },
        database={
            "status": db_status,
            "dialect": session.bind.dialect.name if session.bind else "unknown",
        },
    )
