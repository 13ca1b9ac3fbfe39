from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from interva.algebra.endpoint import (
    NEG_INF,
    POS_INF,
    Endpoint,
    max_endpoint,
    min_endpoint,
)
from interva.algebra.render import render_interval
from interva.core.ordering import IncomparableError, Ordering

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Interval(Generic[T]):
    """A (possibly empty) range of an ordered domain bounded by two endpoints.

    Nothing forces ``left <= right``; an interval whose left endpoint lies
    above its right endpoint is empty. Equality is structural, so distinct
    empty intervals compare unequal with ``==`` while the subset order
    treats every empty interval as equal.

    Operators mirror ``set``: ``x in i`` is membership, ``<=``/``<`` are
    subset/proper subset and ``&`` is intersection.
    """

    left: Endpoint[T]
    right: Endpoint[T]

    @classmethod
    def empty(cls) -> "Interval[Any]":
        return cls(POS_INF, NEG_INF)

    @classmethod
    def universe(cls) -> "Interval[Any]":
        return cls(NEG_INF, POS_INF)

    @classmethod
    def ge(cls, x: T) -> "Interval[T]":
        """[x, +inf)"""
        return cls(Endpoint.closed(x), POS_INF)

    @classmethod
    def le(cls, x: T) -> "Interval[T]":
        """(-inf, x]"""
        return cls(NEG_INF, Endpoint.closed(x))

    @classmethod
    def gt(cls, x: T) -> "Interval[T]":
        """(x, +inf)"""
        return cls(Endpoint.lopen(x), POS_INF)

    @classmethod
    def lt(cls, x: T) -> "Interval[T]":
        """(-inf, x)"""
        return cls(NEG_INF, Endpoint.ropen(x))

    @classmethod
    def open(cls, left: T, right: T) -> "Interval[T]":
        """(left, right)"""
        return cls(Endpoint.lopen(left), Endpoint.ropen(right))

    @classmethod
    def closed(cls, left: T, right: T) -> "Interval[T]":
        """[left, right]"""
        return cls(Endpoint.closed(left), Endpoint.closed(right))

    @classmethod
    def lcro(cls, left: T, right: T) -> "Interval[T]":
        """[left, right)"""
        return cls(Endpoint.closed(left), Endpoint.ropen(right))

    @classmethod
    def lorc(cls, left: T, right: T) -> "Interval[T]":
        """(left, right]"""
        return cls(Endpoint.lopen(left), Endpoint.closed(right))

    @classmethod
    def singleton(cls, x: T) -> "Interval[T]":
        """[x, x]"""
        return cls.closed(x, x)

    def is_empty(self) -> bool | None:
        """Return whether left > right, or None when that is undefined."""
        ordering = self.left.partial_cmp(self.right)
        if ordering is None:
            return None
        return ordering == Ordering.GREATER

    def is_all(self) -> bool:
        return self == UNIVERSE

    def contains(self, value: T) -> bool:
        point = Endpoint.closed(value)
        return self.left <= point and point <= self.right

    def compare_subset(self, other: "Interval[T]") -> Ordering | None:
        """Order two intervals by inclusion.

        LESS means ``self`` is a subset of ``other``. Returns None when
        neither contains the other.
        """
        if self.is_empty() and other.is_empty():
            return Ordering.EQUAL
        if self.left == other.left and self.right == other.right:
            return Ordering.EQUAL
        if self.left >= other.left and self.right <= other.right:
            return Ordering.LESS
        if self.left <= other.left and self.right >= other.right:
            return Ordering.GREATER
        return None

    def intersect(self, other: "Interval[T]") -> "Interval[T]":
        """Return the intersection, which may be empty.

        Raises IncomparableError when the bounding endpoints have no
        defined ordering; use ``partial_intersect`` to get None instead.
        """
        return Interval(
            max_endpoint(self.left, other.left),
            min_endpoint(self.right, other.right),
        )

    def partial_intersect(self, other: "Interval[T]") -> "Interval[T] | None":
        try:
            return self.intersect(other)
        except IncomparableError:
            return None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __and__(self, other: Any) -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.left, self.right))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_subset(other) == Ordering.LESS

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_subset(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_subset(other) == Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_subset(other) in (
            Ordering.GREATER,
            Ordering.EQUAL,
        )

    def __str__(self) -> str:
        return render_interval(self)


EMPTY: Interval[Any] = Interval.empty()
UNIVERSE: Interval[Any] = Interval.universe()
