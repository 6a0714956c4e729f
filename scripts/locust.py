"""Load testing with Locust.

Run with: uvx locust -f scripts/locust.py
Run headless with: uvx locust -f scripts/locust.py --headless -u 10 -r 2
"""

import random

from locust import HttpUser, between, task

_STUDENTS_PATH = "/students"
_BAD_REQUEST = 400
_NOT_FOUND = 404


class StudentsLoadTests(HttpUser):
    """Load tests for the students API."""

    host = "http://localhost:8082"
    wait_time = between(0.1, 0.5)

    def on_start(self) -> None:
        """Remember the ids this user created."""
        self.created_ids: list[int] = []

    @task(3)
    def create_student(self) -> None:
        """Create a valid student."""
        number = random.randint(1, 1_000_000)  # noqa: S311
        response = self.client.post(
            _STUDENTS_PATH,
            json={
                "name": f"Student {number}",
                "email": f"student{number}@example.com",
                "age": random.randint(18, 100),  # noqa: S311
            },
        )
        if response.ok:
            self.created_ids.append(response.json()["id"])

    @task(5)
    def get_student(self) -> None:
        """Read back one of the created students."""
        if not self.created_ids:
            return
        student_id = random.choice(self.created_ids)  # noqa: S311
        self.client.get(f"{_STUDENTS_PATH}/{student_id}", name="/students/[id]")

    @task(5)
    def list_students(self) -> None:
        """Walk a random page."""
        page = random.randint(1, 10)  # noqa: S311
        self.client.get(
            f"{_STUDENTS_PATH}?page={page}&limit=20", name="/students?page=[n]"
        )

    @task
    def create_invalid_student(self) -> None:
        """Send a student the validation rules reject."""
        with self.client.post(
            _STUDENTS_PATH, json={"name": "Bob", "age": 17}, catch_response=True
        ) as response:
            if response.status_code == _BAD_REQUEST:
                response.success()  # type: ignore[attr-defined]

    @task
    def get_missing_student(self) -> None:
        """Ask for an id that does not exist."""
        with self.client.get(
            f"{_STUDENTS_PATH}/0", name="/students/[missing]", catch_response=True
        ) as response:
            if response.status_code == _NOT_FOUND:
                response.success()  # type: ignore[attr-defined]
