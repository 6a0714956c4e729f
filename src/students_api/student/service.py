"""Student service.

Each function is one request pipeline: decode, validate, call the store and
map its result or failure onto a response model or an ``AppError``.
"""

from loguru import logger
from pydantic import ValidationError

from students_api.common.exceptions import BadRequestError, InternalServerError
from students_api.config.errors import ErrorNames
from students_api.utils.parsing import parse_int64

from .exceptions import (
    InvalidStudentIdError,
    RecordNotFoundError,
    StorageError,
    StudentNotFoundError,
    ValidationFailedError,
)
from .models import StudentCreated, StudentPublic
from .pagination import resolve_pagination
from .repository import StudentStore
from .schemas import PaginatedResponse, StudentCreate
from .validation import validate_student

__all__ = ["create_student_svc", "get_student_svc", "get_students_paged_svc"]


def _decode_student(body: bytes) -> StudentCreate:
    if not body.strip():
        raise BadRequestError(ErrorNames.EMPTY_BODY)

    try:
        return StudentCreate.model_validate_json(body)
    except ValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
            for error in exc.errors(include_url=False)
        )
        raise BadRequestError(detail) from exc


async def create_student_svc(store: StudentStore, body: bytes) -> StudentCreated:
    """Create a student from a raw JSON request body.

    Args:
        store: Student store to persist into.
        body: Raw request body.

    Returns:
        StudentCreated: The identifier of the new student.

    Raises:
        BadRequestError: If the body is empty or cannot be decoded.
        ValidationFailedError: If any field breaks its rules.
        InternalServerError: If the store fails.
    """
    student_in = _decode_student(body)

    violations = validate_student(student_in)
    if violations:
        raise ValidationFailedError(violations)

    try:
        student_id = await store.create(
            student_in.name, student_in.email, student_in.age
        )
    except StorageError as exc:
        raise InternalServerError(
            str(exc), error=ErrorNames.CREATE_STUDENT_ERROR
        ) from exc

    logger.info("Student created", student_id=student_id, email=student_in.email)
    return StudentCreated(id=student_id)


async def get_student_svc(store: StudentStore, raw_id: str) -> StudentPublic:
    """Read a single student by the id given in the path.

    Args:
        store: Student store to read from.
        raw_id: Path segment holding the id.

    Returns:
        StudentPublic: The stored student.

    Raises:
        InvalidStudentIdError: If the id is not a base-10 64-bit integer.
        StudentNotFoundError: If no student has that id.
        InternalServerError: If the store fails.
    """
    try:
        student_id = parse_int64(raw_id)
    except ValueError as exc:
        raise InvalidStudentIdError(str(exc)) from exc

    try:
        student = await store.get_by_id(student_id)
    except RecordNotFoundError as exc:
        raise StudentNotFoundError(student_id) from exc
    except StorageError as exc:
        raise InternalServerError(str(exc)) from exc

    return StudentPublic.model_validate(student, from_attributes=True)


async def get_students_paged_svc(
    store: StudentStore, page_raw: str | None, limit_raw: str | None
) -> PaginatedResponse[StudentPublic]:
    """List students one page at a time.

    Args:
        store: Student store to read from.
        page_raw: Raw ``page`` query value.
        limit_raw: Raw ``limit`` query value.

    Returns:
        PaginatedResponse: The requested page and its navigation data.

    Raises:
        InternalServerError: If the store fails.
    """
    params = resolve_pagination(page_raw, limit_raw)

    try:
        students = await store.list(params.offset, params.limit)
        total = await store.count()
    except StorageError as exc:
        raise InternalServerError(
            str(exc), error=ErrorNames.LIST_STUDENTS_ERROR
        ) from exc

    return PaginatedResponse[StudentPublic].from_query(
        data=[
            StudentPublic.model_validate(student, from_attributes=True)
            for student in students
        ],
        page=params.page,
        limit=params.limit,
        total_items=total,
    )
