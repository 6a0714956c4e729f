"""Student module."""

from .exceptions import (
    DatabaseError,
    DuplicateRecordError,
    InvalidDataError,
    RecordNotFoundError,
    StorageError,
    StorageErrorKind,
    StudentNotFoundError,
    ValidationFailedError,
)
from .models import Student, StudentCreated, StudentPublic
from .pagination import PaginationParams, resolve_pagination
from .repository import SQLStudentStore, StudentStore, get_student_store
from .schemas import PaginatedResponse, StudentCreate
from .validation import Violation, ViolationKind, validate_student

__all__ = [
    "DatabaseError",
    "DuplicateRecordError",
    "InvalidDataError",
    "PaginatedResponse",
    "PaginationParams",
    "RecordNotFoundError",
    "SQLStudentStore",
    "StorageError",
    "StorageErrorKind",
    "Student",
    "StudentCreate",
    "StudentCreated",
    "StudentNotFoundError",
    "StudentPublic",
    "StudentStore",
    "ValidationFailedError",
    "Violation",
    "ViolationKind",
    "get_student_store",
    "resolve_pagination",
    "validate_student",
]
