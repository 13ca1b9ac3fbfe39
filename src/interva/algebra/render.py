import math
from typing import TYPE_CHECKING, Any

from interva.algebra.endpoint import NEG_INF, POS_INF, Endpoint, EndpointKind

if TYPE_CHECKING:
    from interva.algebra.interval import Interval

EMPTY_NOTATION = "{}"
# Finite bounds holding a float infinity use an overflowing literal so they
# are not read back as the unbounded sentinels.
_FLOAT_INF_LITERAL = "1e999"

_LEFT_BRACKETS = {
    EndpointKind.CLOSED: "[",
    EndpointKind.LOPEN: "(",
}
_RIGHT_BRACKETS = {
    EndpointKind.CLOSED: "]",
    EndpointKind.ROPEN: ")",
}


def render_endpoint(endpoint: Endpoint[Any]) -> str:
    if endpoint.kind == EndpointKind.POS_INF:
        return "+inf"
    if endpoint.kind == EndpointKind.NEG_INF:
        return "-inf"
    return f"{endpoint.kind.value}({_format_value(endpoint.value)})"


def _format_value(value: Any) -> str:
    if isinstance(value, float) and math.isinf(value):
        sign = "-" if value < 0 else ""
        return f"{sign}{_FLOAT_INF_LITERAL}"
    return str(value)


def _render_value(endpoint: Endpoint[Any]) -> str:
    if endpoint.is_finite:
        return _format_value(endpoint.value)
    return render_endpoint(endpoint)


def _has_bracket_form(interval: "Interval[Any]") -> bool:
    left_ok = interval.left == NEG_INF or interval.left.kind in _LEFT_BRACKETS
    right_ok = (
        interval.right == POS_INF or interval.right.kind in _RIGHT_BRACKETS
    )
    return left_ok and right_ok


def render_interval(interval: "Interval[Any]") -> str:
    """Render an interval in bracket notation, e.g. ``[1, 2)``.

    The canonical empty interval renders as ``{}``. Endpoints placed on a
    side where bracket notation cannot express them (an ``ropen`` left
    bound, say) fall back to ``<left, right>`` with tagged endpoints.
    """
    if interval.left == POS_INF and interval.right == NEG_INF:
        return EMPTY_NOTATION
    if not _has_bracket_form(interval):
        left = render_endpoint(interval.left)
        right = render_endpoint(interval.right)
        return f"<{left}, {right}>"

    left_bracket = _LEFT_BRACKETS.get(interval.left.kind, "(")
    right_bracket = _RIGHT_BRACKETS.get(interval.right.kind, ")")
    return (
        f"{left_bracket}{_render_value(interval.left)}, "
        f"{_render_value(interval.right)}{right_bracket}"
    )
