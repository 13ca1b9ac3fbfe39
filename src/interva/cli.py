import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any

import srsly
import typer
from pydantic import ValidationError

from interva.algebra.interval import Interval
from interva.algebra.models import (
    IntervalModel,
    dumps_interval,
    interval_from_model,
)
from interva.algebra.parse import NotationError, parse_interval, parse_value
from interva.core.ordering import IncomparableError, Ordering

app = typer.Typer(help="Evaluate interval membership, order and intersection.")
_LOGGER = logging.getLogger(__name__)

_ORDERING_NAMES = {
    Ordering.LESS: "less",
    Ordering.EQUAL: "equal",
    Ordering.GREATER: "greater",
}


class _IntervalRowError(Exception):
    def __init__(self, *, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(reason)


def _parse_interval_arg(value: str) -> Interval[Any]:
    try:
        return parse_interval(value)
    except NotationError as err:
        raise typer.BadParameter(str(err)) from err


def _parse_value_arg(value: str) -> int | float:
    try:
        return parse_value(value)
    except NotationError as err:
        raise typer.BadParameter(str(err)) from err


def _iter_intervals(input_file: Path) -> Iterator[Interval[Any]]:
    with input_file.open("r", encoding="utf-8") as input_handle:
        for line_number, line in enumerate(input_handle, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            try:
                raw = srsly.json_loads(stripped)
            except ValueError as err:
                raise _IntervalRowError(
                    line_number=line_number,
                    reason=f"malformed JSON ({err})",
                ) from err
            try:
                model = IntervalModel.model_validate(raw)
            except ValidationError as err:
                first_error = err.errors(include_url=False)[0]
                loc = ".".join(str(item) for item in first_error["loc"])
                raise _IntervalRowError(
                    line_number=line_number,
                    reason=f"invalid interval row at '{loc}': "
                    f"{first_error['msg']}",
                ) from err
            interval = interval_from_model(model)
            try:
                interval.is_empty()
            except TypeError as err:
                raise _IntervalRowError(
                    line_number=line_number,
                    reason=f"bounds are not mutually comparable ({err})",
                ) from err
            _LOGGER.debug("line %d: %r", line_number, model)
            yield interval


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def contains(
    interval: Annotated[str, typer.Argument(help="Interval, e.g. '[1, 2)'")],
    value: Annotated[str, typer.Argument(help="Numeric value to test")],
) -> None:
    """Print whether VALUE lies in INTERVAL."""
    parsed = _parse_interval_arg(interval)
    typer.echo("true" if parsed.contains(_parse_value_arg(value)) else "false")


@app.command()
def compare(
    first: Annotated[str, typer.Argument(help="First interval")],
    second: Annotated[str, typer.Argument(help="Second interval")],
) -> None:
    """Print how FIRST relates to SECOND under the subset order."""
    ordering = _parse_interval_arg(first).compare_subset(
        _parse_interval_arg(second)
    )
    typer.echo(
        "incomparable" if ordering is None else _ORDERING_NAMES[ordering]
    )


@app.command()
def intersect(
    first: Annotated[str, typer.Argument(help="First interval")],
    second: Annotated[str, typer.Argument(help="Second interval")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON")
    ] = False,
) -> None:
    """Print the intersection of FIRST and SECOND."""
    left = _parse_interval_arg(first)
    right = _parse_interval_arg(second)
    try:
        result = left.intersect(right)
    except IncomparableError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    if as_json:
        try:
            typer.echo(dumps_interval(result))
        except ValueError as err:
            typer.echo(f"Error: {err}", err=True)
            raise typer.Exit(1) from err
        return
    typer.echo(str(result))


@app.command()
def info(
    input_file: Annotated[
        Path, typer.Argument(help="Input JSONL file of intervals")
    ],
) -> None:
    """Summarize a JSONL file of serialized intervals."""
    total = 0
    n_empty = 0
    n_universe = 0
    n_undefined = 0
    try:
        for interval in _iter_intervals(input_file):
            total += 1
            empty = interval.is_empty()
            if empty is None:
                n_undefined += 1
            elif empty:
                n_empty += 1
            if interval.is_all():
                n_universe += 1
    except _IntervalRowError as err:
        typer.echo(
            f"Error: invalid JSONL row in {input_file} at line "
            f"{err.line_number}: {err.reason}",
            err=True,
        )
        raise typer.Exit(1) from err

    typer.echo(f"{input_file}: {total} intervals")
    typer.echo(f"  empty: {n_empty}")
    typer.echo(f"  universe: {n_universe}")
    typer.echo(f"  undefined: {n_undefined}")
