import logging
import math
from typing import Annotated, Any, Literal

import srsly
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
)

from interva.algebra.endpoint import NEG_INF, POS_INF, Endpoint, EndpointKind
from interva.algebra.interval import Interval

_LOGGER = logging.getLogger(__name__)


def _require_value(value: Any) -> Any:
    if value is None:
        raise ValueError("finite endpoints require a non-null value")
    return value


BoundValue = Annotated[Any, AfterValidator(_require_value)]


class ClosedEndpointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["closed"] = "closed"
    value: BoundValue


class LOpenEndpointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["lopen"] = "lopen"
    value: BoundValue


class ROpenEndpointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["ropen"] = "ropen"
    value: BoundValue


class PosInfEndpointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["pos_inf"] = "pos_inf"


class NegInfEndpointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["neg_inf"] = "neg_inf"


_EndpointModelUnion = (
    ClosedEndpointModel
    | LOpenEndpointModel
    | ROpenEndpointModel
    | PosInfEndpointModel
    | NegInfEndpointModel
)
EndpointModel = Annotated[_EndpointModelUnion, Field(discriminator="kind")]

_FINITE_MODELS: dict[EndpointKind, type[BaseModel]] = {
    EndpointKind.CLOSED: ClosedEndpointModel,
    EndpointKind.LOPEN: LOpenEndpointModel,
    EndpointKind.ROPEN: ROpenEndpointModel,
}


class IntervalModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    left: EndpointModel = Field(description="Lower boundary")
    right: EndpointModel = Field(description="Upper boundary")


endpoint_adapter: TypeAdapter[_EndpointModelUnion] = TypeAdapter(
    EndpointModel
)


def endpoint_to_model(endpoint: Endpoint[Any]) -> _EndpointModelUnion:
    if endpoint.kind == EndpointKind.POS_INF:
        return PosInfEndpointModel()
    if endpoint.kind == EndpointKind.NEG_INF:
        return NegInfEndpointModel()
    model_cls = _FINITE_MODELS[endpoint.kind]
    return model_cls(value=endpoint.value)  # type: ignore[return-value]


def endpoint_from_model(model: _EndpointModelUnion) -> Endpoint[Any]:
    if isinstance(model, PosInfEndpointModel):
        return POS_INF
    if isinstance(model, NegInfEndpointModel):
        return NEG_INF
    return Endpoint(EndpointKind(model.kind), model.value)


def interval_to_model(interval: Interval[Any]) -> IntervalModel:
    return IntervalModel(
        left=endpoint_to_model(interval.left),
        right=endpoint_to_model(interval.right),
    )


def interval_from_model(model: IntervalModel) -> Interval[Any]:
    return Interval(
        endpoint_from_model(model.left),
        endpoint_from_model(model.right),
    )


def _is_non_finite(value: Any) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def dumps_interval(interval: Interval[Any]) -> str:
    """Serialize an interval to a JSON object string.

    Raises ValueError for NaN or infinite float bounds, which JSON cannot
    carry; use ``interval_to_model`` to keep them in memory.
    """
    for endpoint in (interval.left, interval.right):
        if _is_non_finite(endpoint.value):
            raise ValueError(
                f"Cannot serialize non-finite bound {endpoint.value!r} "
                "to JSON"
            )
    return srsly.json_dumps(interval_to_model(interval).model_dump())


def loads_interval(text: str) -> Interval[Any]:
    """Parse an interval from the JSON form written by ``dumps_interval``.

    Raises ValueError on malformed JSON and pydantic's ValidationError on
    a well-formed document of the wrong shape.
    """
    raw = srsly.json_loads(text)
    model = IntervalModel.model_validate(raw)
    _LOGGER.debug("decoded interval model %r", model)
    return interval_from_model(model)


def dumps_endpoint(endpoint: Endpoint[Any]) -> str:
    if _is_non_finite(endpoint.value):
        raise ValueError(
            f"Cannot serialize non-finite bound {endpoint.value!r} to JSON"
        )
    return srsly.json_dumps(endpoint_to_model(endpoint).model_dump())


def loads_endpoint(text: str) -> Endpoint[Any]:
    model = endpoint_adapter.validate_python(srsly.json_loads(text))
    return endpoint_from_model(model)
