"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorNames", "ResponseStatus"]


class ResponseStatus(StrEnum):
    """Value of the ``status`` field in JSON responses."""

    OK = "ok"
    ERROR = "Error"


class ErrorNames(StrEnum):
    """Short error titles placed in the ``error`` field of the envelope."""

    INTERNAL_SERVER_ERROR = "internal server error"
    INVALID_REQUEST_BODY = "invalid request body"
    VALIDATION_ERRORS = "validation errors"
    INVALID_ID = "invalid ID"
    STUDENT_NOT_FOUND = "student not found"
    CREATE_STUDENT_ERROR = "error creating student"
    LIST_STUDENTS_ERROR = "error listing students"

    # Messages
    EMPTY_BODY = "request body is empty"
