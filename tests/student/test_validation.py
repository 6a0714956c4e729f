# ruff: noqa: S101

"""Tests for the student validation rules."""

import pytest

from students_api.student.schemas import StudentCreate
from students_api.student.validation import (
    Violation,
    ViolationKind,
    format_violations,
    validate_student,
)


def test_valid_student() -> None:
    """A complete, valid student has no violations."""
    student = StudentCreate(name="Alice", email="alice@example.com", age=22)
    assert validate_student(student) == []


def test_first_violation_per_field() -> None:
    """A missing email is only reported as required, not also as malformed."""
    violations = validate_student(StudentCreate(name="Bob", age=17))

    assert violations == [
        Violation("email", ViolationKind.REQUIRED),
        Violation("age", ViolationKind.MIN, "18"),
    ]


def test_zero_age_is_missing() -> None:
    """Zero is the missing value of an integer field."""
    violations = validate_student(
        StudentCreate(name="Carol", email="carol@example.com", age=0)
    )
    assert violations == [Violation("age", ViolationKind.REQUIRED)]


@pytest.mark.parametrize(
    ("violation", "message"),
    [
        (Violation("name", ViolationKind.REQUIRED), "name is required"),
        (Violation("age", ViolationKind.MIN, "18"), "age must be greater than 18"),
        (Violation("age", ViolationKind.MAX, "100"), "age must be less than 100"),
        (Violation("email", ViolationKind.EMAIL), "email is not a valid email"),
        (Violation("ref", ViolationKind.UUID), "ref is not a valid UUID"),
        (Violation("name", "alpha"), "name is not valid for tag alpha"),
    ],
)
def test_violation_message(violation: Violation, message: str) -> None:
    """Each kind has its own phrasing, with a generic fallback."""
    assert violation.message == message


def test_format_violations() -> None:
    """Messages are joined with a semicolon."""
    message = format_violations([
        Violation("name", ViolationKind.REQUIRED),
        Violation("age", ViolationKind.MAX, "100"),
    ])
    assert message == "name is required; age must be less than 100"


@pytest.mark.parametrize(
    ("email", "valid"),
    [
        ("bob@campus.local", True),
        ("bob@uni.test", True),
        ('"bob smith"@example.com', True),
        ("bob@example", True),
        ("bob@", False),
        ("bob.example.com", False),
        ("bob@exa mple.com", False),
    ],
)
def test_email_syntax(email: str, valid: bool) -> None:  # noqa: FBT001
    """The email rule checks syntax, not deliverability."""
    violations = validate_student(StudentCreate(name="Bob", email=email, age=30))
    assert (violations == []) is valid
