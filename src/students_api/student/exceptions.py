"""Student exceptions.

Storage errors are raised by the ``StudentStore`` implementations and never
reach the client directly; the service maps them onto ``AppError`` subclasses.
"""

from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar

from students_api.common.exceptions import BadRequestError, NotFoundError
from students_api.config.errors import ErrorNames

from .validation import Violation, format_violations

__all__ = [
    "DatabaseError",
    "DuplicateRecordError",
    "InvalidDataError",
    "InvalidStudentIdError",
    "RecordNotFoundError",
    "StorageError",
    "StorageErrorKind",
    "StudentNotFoundError",
    "ValidationFailedError",
]


# --------------------------------------------------------
# S T O R A G E
# --------------------------------------------------------


class StorageErrorKind(StrEnum):
    """Closed set of failure kinds a student store can report."""

    NOT_FOUND = "not found"
    DUPLICATE = "duplicate"
    INVALID_DATA = "invalid data"
    DATABASE = "database error"


class StorageError(Exception):
    """Base exception for student store failures."""

    kind: ClassVar[StorageErrorKind] = StorageErrorKind.DATABASE

    def __init__(self, detail: str | None = None) -> None:
        """Initialize with an optional technical detail."""
        self.detail = detail
        super().__init__(f"{self.kind}: {detail}" if detail else str(self.kind))


class RecordNotFoundError(StorageError):
    """No row has the requested identifier."""

    kind = StorageErrorKind.NOT_FOUND


class DuplicateRecordError(StorageError):
    """A uniqueness constraint rejected the row."""

    kind = StorageErrorKind.DUPLICATE


class InvalidDataError(StorageError):
    """The row does not satisfy the table constraints."""

    kind = StorageErrorKind.INVALID_DATA


class DatabaseError(StorageError):
    """Any I/O or driver failure that has no more specific kind."""

    kind = StorageErrorKind.DATABASE


# --------------------------------------------------------
# H T T P
# --------------------------------------------------------


class ValidationFailedError(BadRequestError):
    """Exception raised when a decoded student breaks its field rules."""

    error = ErrorNames.VALIDATION_ERRORS

    def __init__(self, violations: Sequence[Violation]) -> None:
        """Initialize with the collected violations."""
        self.violations = tuple(violations)
        super().__init__(format_violations(self.violations))


class InvalidStudentIdError(BadRequestError):
    """Exception raised when the path id is not a 64-bit integer."""

    error = ErrorNames.INVALID_ID


class StudentNotFoundError(NotFoundError):
    """Exception raised when the student is not found."""

    error = ErrorNames.STUDENT_NOT_FOUND
    message = "student not found"

    def __init__(self, student_id: int) -> None:
        """Initialize with the student ID."""
        self.student_id = student_id
        super().__init__()
