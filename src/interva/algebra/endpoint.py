from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from interva.core.ordering import (
    Ordering,
    partial_cmp_values,
    unwrap_ordering,
)

T = TypeVar("T")


class EndpointKind(str, Enum):
    CLOSED = "closed"
    LOPEN = "lopen"
    ROPEN = "ropen"
    POS_INF = "pos_inf"
    NEG_INF = "neg_inf"


SENTINEL_KINDS = frozenset({EndpointKind.POS_INF, EndpointKind.NEG_INF})

# Ordering of two finite endpoints wrapping equal values, keyed by
# (self.kind, other.kind): ROpen(x) < Closed(x) < LOpen(x).
_TIE_BREAK: dict[tuple[EndpointKind, EndpointKind], Ordering] = {
    (EndpointKind.CLOSED, EndpointKind.CLOSED): Ordering.EQUAL,
    (EndpointKind.CLOSED, EndpointKind.LOPEN): Ordering.LESS,
    (EndpointKind.CLOSED, EndpointKind.ROPEN): Ordering.GREATER,
    (EndpointKind.LOPEN, EndpointKind.CLOSED): Ordering.GREATER,
    (EndpointKind.LOPEN, EndpointKind.LOPEN): Ordering.EQUAL,
    (EndpointKind.LOPEN, EndpointKind.ROPEN): Ordering.GREATER,
    (EndpointKind.ROPEN, EndpointKind.CLOSED): Ordering.LESS,
    (EndpointKind.ROPEN, EndpointKind.LOPEN): Ordering.LESS,
    (EndpointKind.ROPEN, EndpointKind.ROPEN): Ordering.EQUAL,
}


@dataclass(frozen=True, eq=False)
class Endpoint(Generic[T]):
    """One boundary of an interval.

    Finite endpoints wrap a value of the element type. ``LOPEN`` sits
    infinitesimally above its value and ``ROPEN`` infinitesimally below it,
    so open and closed boundaries share a single ordering. The two
    sentinels carry no value.

    ``partial_cmp`` returns ``None`` when the wrapped values are
    incomparable (e.g. NaN); ``cmp`` raises ``IncomparableError`` instead.
    Rich comparison operators follow ``partial_cmp`` and are all false for
    incomparable endpoints, mirroring float NaN.
    """

    kind: EndpointKind
    value: T | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EndpointKind):
            object.__setattr__(self, "kind", EndpointKind(self.kind))
        if self.kind in SENTINEL_KINDS and self.value is not None:
            raise ValueError(f"{self.kind.value} endpoint takes no value")
        if self.kind not in SENTINEL_KINDS and self.value is None:
            raise ValueError(f"{self.kind.value} endpoint requires a value")

    @classmethod
    def closed(cls, value: T) -> "Endpoint[T]":
        return cls(EndpointKind.CLOSED, value)

    @classmethod
    def lopen(cls, value: T) -> "Endpoint[T]":
        return cls(EndpointKind.LOPEN, value)

    @classmethod
    def ropen(cls, value: T) -> "Endpoint[T]":
        return cls(EndpointKind.ROPEN, value)

    @property
    def is_finite(self) -> bool:
        return self.kind not in SENTINEL_KINDS

    def partial_cmp(self, other: "Endpoint[T]") -> Ordering | None:
        if self.kind == EndpointKind.POS_INF:
            if other.kind == EndpointKind.POS_INF:
                return Ordering.EQUAL
            return Ordering.GREATER
        if self.kind == EndpointKind.NEG_INF:
            if other.kind == EndpointKind.NEG_INF:
                return Ordering.EQUAL
            return Ordering.LESS
        if other.kind == EndpointKind.POS_INF:
            return Ordering.LESS
        if other.kind == EndpointKind.NEG_INF:
            return Ordering.GREATER

        ordering = partial_cmp_values(self.value, other.value)
        if ordering is None or ordering != Ordering.EQUAL:
            return ordering
        return _TIE_BREAK[(self.kind, other.kind)]

    def cmp(self, other: "Endpoint[T]") -> Ordering:
        return unwrap_ordering(self.partial_cmp(other), self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        if self.kind != other.kind:
            return False
        return self.kind in SENTINEL_KINDS or self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.partial_cmp(other) == Ordering.LESS

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.partial_cmp(other) == Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.GREATER, Ordering.EQUAL)


POS_INF: Endpoint[Any] = Endpoint(EndpointKind.POS_INF)
NEG_INF: Endpoint[Any] = Endpoint(EndpointKind.NEG_INF)


def max_endpoint(a: Endpoint[T], b: Endpoint[T]) -> Endpoint[T]:
    """Return the larger endpoint, preferring ``b`` on ties.

    Raises IncomparableError when the endpoints have no defined ordering.
    """
    if a.cmp(b) == Ordering.GREATER:
        return a
    return b


def min_endpoint(a: Endpoint[T], b: Endpoint[T]) -> Endpoint[T]:
    """Return the smaller endpoint, preferring ``a`` on ties.

    Raises IncomparableError when the endpoints have no defined ordering.
    """
    if a.cmp(b) == Ordering.GREATER:
        return b
    return a
