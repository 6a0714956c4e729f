# ruff: noqa: S101

"""Tests for the student request pipelines with an in-memory store."""

import json

import pytest

from students_api.common.exceptions import BadRequestError, InternalServerError
from students_api.student.exceptions import (
    DatabaseError,
    InvalidStudentIdError,
    RecordNotFoundError,
    StudentNotFoundError,
    ValidationFailedError,
)
from students_api.student.service import (
    create_student_svc,
    get_student_svc,
    get_students_paged_svc,
)
from tests.utils import InMemoryStudentStore


def _body(**fields: object) -> bytes:
    return json.dumps(fields).encode()


async def test_create_round_trip(fake_store: InMemoryStudentStore) -> None:
    """Create returns the id under which the student can be read."""
    created = await create_student_svc(
        fake_store, _body(name="Alice", email="alice@example.com", age=22)
    )

    student = await get_student_svc(fake_store, str(created.id))

    assert student.model_dump() == {
        "id": created.id,
        "name": "Alice",
        "email": "alice@example.com",
        "age": 22,
    }


async def test_create_empty_body(fake_store: InMemoryStudentStore) -> None:
    """An empty body never reaches the store."""
    with pytest.raises(BadRequestError, match="request body is empty"):
        await create_student_svc(fake_store, b"")
    assert fake_store.calls["create"] == 0


async def test_create_validation_failure(fake_store: InMemoryStudentStore) -> None:
    """The validation error keeps the individual violations."""
    with pytest.raises(ValidationFailedError) as exc_info:
        await create_student_svc(fake_store, _body(name="Bob", age=17))

    assert [v.field for v in exc_info.value.violations] == ["email", "age"]
    assert exc_info.value.message == "email is required; age must be greater than 18"
    assert fake_store.calls["create"] == 0


async def test_create_storage_failure(fake_store: InMemoryStudentStore) -> None:
    """Store failures are internal errors chained to the cause."""
    fake_store.failure = DatabaseError("disk full")

    with pytest.raises(InternalServerError) as exc_info:
        await create_student_svc(
            fake_store, _body(name="Alice", email="alice@example.com", age=22)
        )

    assert isinstance(exc_info.value.__cause__, DatabaseError)


async def test_get_invalid_id(fake_store: InMemoryStudentStore) -> None:
    """Non-numeric ids are rejected before the store."""
    with pytest.raises(InvalidStudentIdError):
        await get_student_svc(fake_store, "abc")
    assert fake_store.calls["get_by_id"] == 0


async def test_get_not_found(fake_store: InMemoryStudentStore) -> None:
    """The storage not-found kind becomes the 404 error."""
    with pytest.raises(StudentNotFoundError) as exc_info:
        await get_student_svc(fake_store, "99")

    assert exc_info.value.student_id == 99
    assert exc_info.value.status_code == 404
    assert isinstance(exc_info.value.__cause__, RecordNotFoundError)


async def test_paged_response(fake_store: InMemoryStudentStore) -> None:
    """Pagination numbers are derived from the total count."""
    for i in range(25):
        await fake_store.create(f"Student_{i}", f"s{i}@example.com", 20)

    result = await get_students_paged_svc(fake_store, "3", "10")

    assert [student.id for student in result.data] == list(range(21, 26))
    assert (result.total_items, result.total_pages) == (25, 3)
    assert (result.has_next, result.has_prev) == (False, True)
    assert fake_store.calls["list"] == 1
    assert fake_store.calls["count"] == 1


async def test_paged_storage_failure(fake_store: InMemoryStudentStore) -> None:
    """A failing list call is an internal error."""
    fake_store.failure = DatabaseError("locked")

    with pytest.raises(InternalServerError):
        await get_students_paged_svc(fake_store, None, None)
