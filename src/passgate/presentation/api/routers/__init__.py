from passgate.presentation.api.routers.auth import router as auth_router
from passgate.presentation.api.routers.health import router as health_router

__all__ = [
    "auth_router",
    "health_router",
]
