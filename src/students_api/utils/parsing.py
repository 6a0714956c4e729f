"""Strict integer parsing for path and query values."""

import re
from typing import Final

__all__ = ["INT64_MAX", "INT64_MIN", "parse_int64"]

INT64_MAX: Final = 2**63 - 1
INT64_MIN: Final = -(2**63)

_INT_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


def parse_int64(raw: str) -> int:
    """Parse a base-10 integer that fits into 64 bits.

    Unlike ``int()``, surrounding whitespace, digit separators and non-ASCII
    digits are rejected.

    Raises:
        ValueError: If ``raw`` is not an integer or is out of range.
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f'parsing "{raw}": invalid syntax')

    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f'parsing "{raw}": value out of range')
    return value
