"""Offset pagination parameters."""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from students_api.utils.parsing import parse_int64

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "PaginationParams",
    "resolve_pagination",
]

DEFAULT_PAGE: Final = 1
DEFAULT_LIMIT: Final = 20
MIN_LIMIT: Final = 1
MAX_LIMIT: Final = 100


class PaginationParams(BaseModel):
    """Resolved page number and page size."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=MIN_LIMIT, le=MAX_LIMIT)

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page - 1) * self.limit


def _positive_or_none(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        value = parse_int64(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def resolve_pagination(page_raw: str | None, limit_raw: str | None) -> PaginationParams:
    """Turn raw ``page`` and ``limit`` query values into safe pagination params.

    Unparsable or non-positive values fall back to the defaults and a limit
    above ``MAX_LIMIT`` is capped, so this never fails.

    Args:
        page_raw: Raw ``page`` query value, if any.
        limit_raw: Raw ``limit`` query value, if any.

    Returns:
        PaginationParams: Bounded page and limit.
    """
    page = _positive_or_none(page_raw) or DEFAULT_PAGE

    limit = _positive_or_none(limit_raw) or DEFAULT_LIMIT
    limit = max(MIN_LIMIT, min(limit, MAX_LIMIT))

    return PaginationParams(page=page, limit=limit)
