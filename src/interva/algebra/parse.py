import re
from collections.abc import Callable
from typing import Any

from interva.algebra.endpoint import NEG_INF, POS_INF, Endpoint
from interva.algebra.interval import EMPTY, Interval

_POS_INF_TOKENS = frozenset({"inf", "+inf", "infinity", "+infinity"})
_NEG_INF_TOKENS = frozenset({"-inf", "-infinity"})
_EMPTY_TOKENS = frozenset({"{}", "empty"})
_INTERVAL_RE = re.compile(
    r"^\s*(?P<lb>[\[(])\s*(?P<left>[^,\[\]()]+?)\s*,"
    r"\s*(?P<right>[^,\[\]()]+?)\s*(?P<rb>[\])])\s*$"
)
_SINGLETON_RE = re.compile(r"^\s*\{\s*(?P<value>[^{},]+?)\s*\}\s*$")


class NotationError(ValueError):
    """Raised when interval notation cannot be parsed."""


def parse_value(token: str) -> int | float:
    """Parse a numeric token as int when it is an integer literal."""
    stripped = token.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError as err:
        raise NotationError(f"Invalid value '{token}'") from err


def _parse_bound(
    token: str,
    bracket: str,
    value_type: Callable[[str], Any],
    make_finite: Callable[[Any], Endpoint[Any]],
) -> Endpoint[Any]:
    lowered = token.strip().lower()
    if lowered in _POS_INF_TOKENS or lowered in _NEG_INF_TOKENS:
        if bracket in "[]":
            raise NotationError(
                f"Infinite bound '{token}' must use an open bracket"
            )
        return POS_INF if lowered in _POS_INF_TOKENS else NEG_INF

    try:
        value = value_type(token.strip())
    except NotationError:
        raise
    except (ArithmeticError, TypeError, ValueError) as err:
        raise NotationError(f"Invalid value '{token}'") from err
    return make_finite(value)


def parse_interval(
    text: str,
    value_type: Callable[[str], Any] = parse_value,
) -> Interval[Any]:
    """Parse bracket notation such as ``[1, 2)`` or ``(-inf, 3]``.

    ``{}`` and ``empty`` give the canonical empty interval and ``{x}`` the
    singleton ``[x, x]``. Finite bound tokens are converted with
    ``value_type``. Raises NotationError on malformed input.
    """
    if text.strip().lower() in _EMPTY_TOKENS:
        return EMPTY

    singleton = _SINGLETON_RE.match(text)
    if singleton is not None:
        token = singleton.group("value")
        try:
            return Interval.singleton(value_type(token.strip()))
        except NotationError:
            raise
        except (ArithmeticError, TypeError, ValueError) as err:
            raise NotationError(f"Invalid value '{token}'") from err

    match = _INTERVAL_RE.match(text)
    if match is None:
        raise NotationError(
            f"Invalid interval '{text}': expected '[LO, HI]', '(LO, HI)', "
            "a half-open mix of the two, '{X}' or '{}'"
        )

    left_bracket = match.group("lb")
    right_bracket = match.group("rb")
    left = _parse_bound(
        match.group("left"),
        left_bracket,
        value_type,
        Endpoint.closed if left_bracket == "[" else Endpoint.lopen,
    )
    right = _parse_bound(
        match.group("right"),
        right_bracket,
        value_type,
        Endpoint.closed if right_bracket == "]" else Endpoint.ropen,
    )
    return Interval(left, right)
