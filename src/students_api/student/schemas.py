"""Request and response schemas for students."""

import math
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

__all__ = ["PaginatedResponse", "StudentCreate"]

T = TypeVar("T")


class StudentCreate(BaseModel):
    """Decoded body of ``POST /students``.

    Missing and ``null`` fields take their zero value so that the validation
    rules, not the decoder, report them as required. Types are strict: ``"22"``
    is not an age.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = ""
    email: str = ""
    age: int = 0

    @field_validator("name", "email", "age", mode="before")
    @classmethod
    def _null_as_missing(cls, value: Any, info: ValidationInfo) -> Any:  # noqa: ANN401
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of items plus the numbers needed to navigate the rest."""

    data: Sequence[T]
    page: int
    limit: int
    total_items: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_query(
        cls, *, data: Sequence[T], page: int, limit: int, total_items: int
    ) -> "PaginatedResponse[T]":
        """Factory method to create a PaginatedResponse from query results."""
        total_pages = math.ceil(total_items / limit)
        return cls(
            data=data,
            page=page,
            limit=limit,
            total_items=total_items,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )
