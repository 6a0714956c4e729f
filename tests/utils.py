"""Helpers shared by the student tests."""

from collections import Counter
from collections.abc import Sequence

from fastapi import status
from fastapi.testclient import TestClient

from students_api.student.exceptions import RecordNotFoundError
from students_api.student.models import Student

__all__ = ["InMemoryStudentStore", "create_students"]


class InMemoryStudentStore:
    """``StudentStore`` fake that keeps students in a dict.

    Set ``failure`` to make every following call raise it. ``calls`` counts the
    calls per operation, failed ones included.
    """

    def __init__(self) -> None:
        self.students: dict[int, Student] = {}
        self.calls: Counter[str] = Counter()
        self.failure: Exception | None = None
        self._next_id = 1

    def _enter(self, operation: str) -> None:
        self.calls[operation] += 1
        if self.failure is not None:
            raise self.failure

    async def create(self, name: str, email: str, age: int) -> int:
        self._enter("create")
        student_id = self._next_id
        self._next_id += 1
        self.students[student_id] = Student(
            id=student_id, name=name, email=email, age=age
        )
        return student_id

    async def get_by_id(self, student_id: int) -> Student:
        self._enter("get_by_id")
        try:
            return self.students[student_id]
        except KeyError:
            raise RecordNotFoundError(str(student_id)) from None

    async def list(self, offset: int, limit: int) -> Sequence[Student]:
        self._enter("list")
        ordered = [self.students[key] for key in sorted(self.students)]
        return ordered[offset : offset + limit]

    async def count(self) -> int:
        self._enter("count")
        return len(self.students)


def create_students(client: TestClient, count: int) -> list[int]:
    """Create ``count`` valid students through the API and return their ids."""
    ids = []
    for i in range(1, count + 1):
        response = client.post(
            "/students",
            json={"name": f"Student_{i}", "email": f"student{i}@example.com", "age": 20},
        )
        assert response.status_code == status.HTTP_201_CREATED
        ids.append(response.json()["id"])
    return ids
