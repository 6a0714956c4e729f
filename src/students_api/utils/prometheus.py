"""Prometheus metrics for the student API."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import Gauge
from prometheus_fastapi_instrumentator import Instrumentator

__all__ = ["add_prometheus_metrics"]

REQUESTS_IN_PROGRESS = Gauge(
    "students_api_requests_in_progress",
    "HTTP requests currently being handled",
    ["method"],
)


def add_prometheus_metrics(app: FastAPI) -> None:
    """Expose ``/metrics`` and track in-flight HTTP requests.

    Args:
        app: The FastAPI application instance to instrument.
    """
    Instrumentator(excluded_handlers=["/metrics", "/health"]).instrument(app).expose(
        app, include_in_schema=False
    )

    @app.middleware("http")
    async def _track_in_flight(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Count requests while they are being processed."""
        gauge = REQUESTS_IN_PROGRESS.labels(request.method)
        gauge.inc()
        try:
            return await call_next(request)
        finally:
            gauge.dec()
