"""Shared error types and routes.

Key Components:
- AppError: base for every error rendered as a JSON error envelope
- BadRequestError, NotFoundError, InternalServerError: the 400/404/500 family
- router: root and health endpoints
"""

from .app_error import AppError
from .exceptions import BadRequestError, InternalServerError, NotFoundError

__all__ = [
    "AppError",
    "BadRequestError",
    "InternalServerError",
    "NotFoundError",
]
