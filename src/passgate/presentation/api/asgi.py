"""ASGI entry point.

    uvicorn passgate.presentation.api.asgi:app
"""

import uvicorn

from passgate.presentation.api.app import create_app
from passgate_config.settings import get_settings

# Application instance for uvicorn
app = create_app()


def run() -> None:
    """Serve the API with the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "passgate.presentation.api.asgi:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # Keep the app's logging configuration
    )
