"""Three-way key comparators for ArrayTable.

Each comparator returns a negative number if the left key is smaller, zero if
the keys are equal, and a positive number if the left key is larger.
"""

from __future__ import annotations

from typing import Any, Callable

CompareFunc = Callable[[Any, Any], int]


def int_compare(a: int, b: int) -> int:
    return a - b


def string_compare(a: str, b: str) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def natural_compare(a: Any, b: Any) -> int:
    """Compare any two keys that support ``<`` and ``>``."""
    return (a > b) - (a < b)
