"""Security headers."""

from collections.abc import Awaitable, Callable
from typing import Final

from fastapi import FastAPI, Request, Response

from students_api.config import settings

__all__ = ["add_security_headers"]

_DOCS_PATHS: Final = ("/docs", "/redoc", "/openapi.json")


def add_security_headers(app: FastAPI) -> None:
    """Add hardening headers to every response.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """

    @app.middleware("http")
    async def _security_headers_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        _set_security_headers(response, request.url.path)
        return response


def _set_security_headers(response: Response, path: str) -> None:
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"

    # Swagger UI needs inline scripts and styles
    if settings.app_env == "production" and not path.startswith(_DOCS_PATHS):
        response.headers["Content-Security-Policy"] = (
            "default-src 'none'; frame-ancestors 'none'"
        )
    else:
        response.headers["Content-Security-Policy"] = (
            "default-src * 'unsafe-inline' 'unsafe-eval'; img-src * data:"
        )
