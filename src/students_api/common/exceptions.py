"""Common exceptions."""

from fastapi import status

from students_api.config.errors import ErrorNames

from .app_error import AppError

__all__ = ["BadRequestError", "InternalServerError", "NotFoundError"]


class BadRequestError(AppError):
    """Exception raised when the request cannot be decoded or parsed."""

    error = ErrorNames.INVALID_REQUEST_BODY
    message = "Bad request"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """Exception raised when something is not found."""

    error = "not found"
    message = "Resource not found"
    status_code = status.HTTP_404_NOT_FOUND


class InternalServerError(AppError):
    """Exception raised for internal server errors."""

    error = ErrorNames.INTERNAL_SERVER_ERROR
    message = "Internal server error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
