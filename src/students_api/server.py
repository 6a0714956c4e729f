"""ASGI server for the FastAPI application."""

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from students_api.config import settings

__all__ = ["run"]


def run() -> None:
    """Run the FastAPI application using Uvicorn.

    On SIGINT or SIGTERM uvicorn stops accepting connections and waits up to
    ``timeout_graceful_shutdown`` seconds for in-flight requests before the
    lifespan closes the database.
    """
    is_production = settings.app_env == "production"

    uvicorn.run(
        "students_api:app",
        host=settings.host_binding,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["src/students_api"],
        timeout_keep_alive=settings.timeout_keep_alive,
        timeout_graceful_shutdown=settings.timeout_graceful_shutdown,
        server_header=False,
        log_config=None if is_production else LOGGING_CONFIG,
        log_level=None if is_production else "info",
    )
