"""Global exception handlers for the application."""

from asyncio import CancelledError
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from students_api.common.app_error import AppError
from students_api.config import settings
from students_api.config.errors import ErrorNames, ResponseStatus

from .error_path import get_error_path

__all__ = ["error_response", "register_exception_handlers"]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI application.

    Every failure leaves the API as the same JSON envelope:
    ``{"error": ..., "status": "Error", "message": ...}``.

    Args:
        app: The FastAPI application instance to register handlers with.
    """

    @app.exception_handler(AppError)
    def _handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        """Handle application-specific errors."""
        log = logger.error if exc.status_code >= 500 else logger.debug  # noqa: PLR2004
        log("{}: {}", exc.error, exc.message, path=get_error_path(exc))
        return error_response(exc.status_code, exc.error, exc.message)

    @app.exception_handler(StarletteHTTPException)
    def _handle_http_error(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors such as unknown paths or methods."""
        title = HTTPStatus(exc.status_code).phrase.lower()
        logger.debug("{}: {}", exc.status_code, exc.detail)
        return error_response(exc.status_code, title, str(exc.detail), exc.headers)

    @app.exception_handler(RequestValidationError)
    def _handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request parameters FastAPI itself could not parse."""
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        logger.debug("Request validation failed", detail=message)
        return error_response(
            status.HTTP_400_BAD_REQUEST, ErrorNames.VALIDATION_ERRORS, message
        )

    @app.exception_handler(Exception)
    def _handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Handle any uncaught exceptions as 500 server errors.

        Raises:
            CancelledError: Re-raised outside development.
        """
        if isinstance(exc, CancelledError) and settings.app_env != "development":
            raise exc

        logger.exception("{}", str(exc), path=get_error_path(exc))
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorNames.INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
        )


def error_response(
    status_code: int,
    error: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a JSON error envelope.

    Args:
        status_code: HTTP status code to return.
        error: Short error title.
        message: Human-readable detail.
        headers: Optional extra response headers.

    Returns:
        JSONResponse: The error envelope.
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "error": str(error),
            "status": ResponseStatus.ERROR.value,
            "message": message,
        },
        headers=headers,
    )
