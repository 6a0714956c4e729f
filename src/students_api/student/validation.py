"""Field-level validation rules for students."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final, NamedTuple

import email_validator
from email_validator import EmailNotValidError, validate_email

from .schemas import StudentCreate

__all__ = [
    "Violation",
    "ViolationKind",
    "format_violations",
    "validate_student",
]


class ViolationKind(StrEnum):
    """Kinds of constraints a field value can break."""

    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    EMAIL = "email"
    UUID = "uuid"


@dataclass(frozen=True, slots=True)
class Violation:
    """A single broken constraint on a single field."""

    field: str
    kind: str
    param: str = ""

    @property
    def message(self) -> str:
        """Human readable description, e.g. ``age must be greater than 18``."""
        match self.kind:
            case ViolationKind.REQUIRED:
                return f"{self.field} is required"
            case ViolationKind.UUID:
                return f"{self.field} is not a valid UUID"
            case ViolationKind.MIN:
                return f"{self.field} must be greater than {self.param}"
            case ViolationKind.MAX:
                return f"{self.field} must be less than {self.param}"
            case ViolationKind.EMAIL:
                return f"{self.field} is not a valid email"
            case _:
                return f"{self.field} is not valid for tag {self.kind}"


class _Rule(NamedTuple):
    kind: str
    check: Callable[[Any], bool]
    param: str = ""


def _present(value: Any) -> bool:  # noqa: ANN401
    return value not in {"", 0, None}


# Addresses are checked for syntax only. Reserved names such as ".local" and
# dotless hosts are well-formed even though they are not globally deliverable.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _is_email(value: Any) -> bool:  # noqa: ANN401
    try:
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
            allow_quoted_local=True,
        )
    except EmailNotValidError:
        return False
    return True


def _min(bound: int) -> _Rule:
    return _Rule(ViolationKind.MIN, lambda value: value >= bound, str(bound))


def _max(bound: int) -> _Rule:
    return _Rule(ViolationKind.MAX, lambda value: value <= bound, str(bound))


_REQUIRED: Final = _Rule(ViolationKind.REQUIRED, _present)
_EMAIL: Final = _Rule(ViolationKind.EMAIL, _is_email)

MIN_AGE: Final = 18
MAX_AGE: Final = 100

# Rules run in order and stop at the first failure of each field.
_STUDENT_RULES: Final[dict[str, Sequence[_Rule]]] = {
    "name": (_REQUIRED,),
    "email": (_REQUIRED, _EMAIL),
    "age": (_REQUIRED, _min(MIN_AGE), _max(MAX_AGE)),
}


def _run_rules(
    values: dict[str, Any], rules: dict[str, Sequence[_Rule]]
) -> list[Violation]:
    violations: list[Violation] = []
    for field, field_rules in rules.items():
        value = values.get(field)
        for rule in field_rules:
            if not rule.check(value):
                violations.append(Violation(field, rule.kind, rule.param))
                break
    return violations


def validate_student(student: StudentCreate) -> list[Violation]:
    """Check a decoded student against its field rules.

    Args:
        student: The decoded request body.

    Returns:
        The violations in field order, at most one per field. Empty when the
        student is valid.
    """
    return _run_rules(student.model_dump(), _STUDENT_RULES)


def format_violations(violations: Sequence[Violation]) -> str:
    """Join violation messages into one ``"; "`` separated string."""
    return "; ".join(violation.message for violation in violations)
