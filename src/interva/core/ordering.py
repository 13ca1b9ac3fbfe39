from enum import Enum
from typing import Any


class IncomparableError(ValueError):
    """Raised when a total comparison is asked of incomparable values."""


class Ordering(int, Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def partial_cmp_values(x: Any, y: Any) -> Ordering | None:
    """Compare two raw values, returning None when neither ordering holds.

    NaN and other values for which ``<``, ``==`` and ``>`` are all false
    are reported as incomparable instead of being forced into an order.
    """
    if x < y:
        return Ordering.LESS
    if x > y:
        return Ordering.GREATER
    if x == y:
        return Ordering.EQUAL
    return None


def unwrap_ordering(
    ordering: Ordering | None, left: Any, right: Any
) -> Ordering:
    if ordering is None:
        raise IncomparableError(
            f"{left!r} and {right!r} have no defined ordering"
        )
    return ordering
