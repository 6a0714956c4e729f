"""Generic application errors."""

from fastapi import status

from students_api.config.errors import ErrorNames

__all__ = ["AppError"]


class AppError(Exception):
    """Base exception for errors that are returned to the client.

    ``error`` is the short title of the envelope and ``message`` the detail.
    """

    error: str = ErrorNames.INTERNAL_SERVER_ERROR
    message = "An unexpected error occurred"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None, error: str | None = None) -> None:
        """Initialize with optional custom message and title."""
        if message:
            self.message = message
        if error:
            self.error = error
        super().__init__(self.message)
