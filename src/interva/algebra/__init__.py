"""algebra: intervals over ordered types with open and closed bounds."""

from interva.algebra.endpoint import (
    NEG_INF,
    POS_INF,
    Endpoint,
    EndpointKind,
    max_endpoint,
    min_endpoint,
)
from interva.algebra.interval import EMPTY, UNIVERSE, Interval
from interva.algebra.models import (
    EndpointModel,
    IntervalModel,
    dumps_endpoint,
    dumps_interval,
    endpoint_from_model,
    endpoint_to_model,
    interval_from_model,
    interval_to_model,
    loads_endpoint,
    loads_interval,
)
from interva.algebra.parse import NotationError, parse_interval, parse_value
from interva.algebra.render import render_endpoint, render_interval
from interva.core.ordering import IncomparableError, Ordering

__all__ = [
    "EMPTY",
    "NEG_INF",
    "POS_INF",
    "UNIVERSE",
    "Endpoint",
    "EndpointKind",
    "EndpointModel",
    "IncomparableError",
    "Interval",
    "IntervalModel",
    "NotationError",
    "Ordering",
    "dumps_endpoint",
    "dumps_interval",
    "endpoint_from_model",
    "endpoint_to_model",
    "interval_from_model",
    "interval_to_model",
    "loads_endpoint",
    "loads_interval",
    "max_endpoint",
    "min_endpoint",
    "parse_interval",
    "parse_value",
    "render_endpoint",
    "render_interval",
]
