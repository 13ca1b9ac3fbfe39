import math

import pytest
import srsly
from pydantic import ValidationError

from interva.algebra.endpoint import NEG_INF, POS_INF, Endpoint, EndpointKind
from interva.algebra.interval import EMPTY, UNIVERSE, Interval
from interva.algebra.models import (
    ClosedEndpointModel,
    IntervalModel,
    PosInfEndpointModel,
    dumps_endpoint,
    dumps_interval,
    endpoint_from_model,
    endpoint_to_model,
    interval_from_model,
    interval_to_model,
    loads_endpoint,
    loads_interval,
)


class TestEndpointModels:
    def test_finite_endpoint_keeps_kind_and_value(self) -> None:
        model = endpoint_to_model(Endpoint.lopen(2.5))
        assert model.model_dump() == {"kind": "lopen", "value": 2.5}

    def test_sentinels_have_no_value(self) -> None:
        assert endpoint_to_model(POS_INF).model_dump() == {"kind": "pos_inf"}
        assert endpoint_to_model(NEG_INF).model_dump() == {"kind": "neg_inf"}

    def test_from_model(self) -> None:
        assert endpoint_from_model(ClosedEndpointModel(value=3)) == (
            Endpoint.closed(3)
        )
        assert endpoint_from_model(PosInfEndpointModel()) == POS_INF

    def test_nan_survives_model_layer(self) -> None:
        model = endpoint_to_model(Endpoint.ropen(math.nan))
        endpoint = endpoint_from_model(model)
        assert endpoint.kind == EndpointKind.ROPEN
        assert math.isnan(endpoint.value)

    def test_json_text(self) -> None:
        assert loads_endpoint(dumps_endpoint(Endpoint.ropen(4))) == (
            Endpoint.ropen(4)
        )
        assert loads_endpoint('{"kind": "neg_inf"}') == NEG_INF

    def test_sentinel_with_value_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            loads_endpoint('{"kind": "pos_inf", "value": 1}')

    def test_finite_without_value_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            loads_endpoint('{"kind": "closed"}')
        with pytest.raises(ValidationError, match="non-null value"):
            loads_endpoint('{"kind": "closed", "value": null}')

    def test_unknown_kind_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            loads_endpoint('{"kind": "half_open", "value": 1}')


class TestIntervalModels:
    @pytest.mark.parametrize(
        "interval",
        [
            EMPTY,
            UNIVERSE,
            Interval.closed(1, 2),
            Interval.open(-1.5, 0.25),
            Interval.lcro(0, 10),
            Interval.lorc("a", "b"),
            Interval.ge(3),
            Interval.lt(3),
            Interval(Endpoint.closed(5), Endpoint.closed(1)),
        ],
    )
    def test_json_round_trip_preserves_structure(
        self, interval: Interval
    ) -> None:
        restored = loads_interval(dumps_interval(interval))
        assert restored == interval
        assert type(restored.left.value) is type(interval.left.value)

    def test_round_trip_preserves_comparisons(self) -> None:
        a = Interval.closed(1, 3)
        b = Interval.open(2, 4)
        restored_a = loads_interval(dumps_interval(a))
        restored_b = loads_interval(dumps_interval(b))
        assert restored_a & restored_b == a & b
        assert restored_a.compare_subset(restored_b) == a.compare_subset(b)

    def test_dump_shape(self) -> None:
        raw = srsly.json_loads(dumps_interval(Interval.lcro(1, 2)))
        assert raw == {
            "left": {"kind": "closed", "value": 1},
            "right": {"kind": "ropen", "value": 2},
        }

    def test_model_round_trip(self) -> None:
        interval = Interval.lorc(0.5, 1.5)
        model = interval_to_model(interval)
        assert isinstance(model, IntervalModel)
        assert interval_from_model(model) == interval
        assert interval_from_model(
            IntervalModel.model_validate(model.model_dump())
        ) == interval

    def test_non_finite_bound_is_rejected_for_json(self) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            dumps_interval(Interval.closed(math.nan, 1.0))
        with pytest.raises(ValueError, match="non-finite"):
            dumps_endpoint(Endpoint.closed(math.inf))

    def test_extra_fields_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IntervalModel.model_validate(
                {
                    "left": {"kind": "neg_inf"},
                    "right": {"kind": "pos_inf"},
                    "label": "all",
                }
            )

    def test_missing_side_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            loads_interval('{"left": {"kind": "neg_inf"}}')
