from pathlib import Path

import pytest
from typer.testing import CliRunner

from interva.algebra.interval import EMPTY, UNIVERSE, Interval
from interva.algebra.models import dumps_interval, loads_interval
from interva.cli import app

runner = CliRunner()


def _write_rows(path: Path, rows: list[str]) -> Path:
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


class TestContains:
    @pytest.mark.parametrize(
        ("interval", "value", "expected"),
        [
            ("[1.5, 1.7]", "1.7", "true"),
            ("(1.5, 1.7)", "1.7", "false"),
            ("[1, 2)", "1", "true"),
            ("(1, +inf)", "1", "false"),
            ("{}", "0", "false"),
        ],
    )
    def test_membership(self, interval: str, value: str, expected: str) -> None:
        result = runner.invoke(app, ["contains", interval, value])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_bad_interval_is_a_usage_error(self) -> None:
        result = runner.invoke(app, ["contains", "[1, 2", "1"])
        assert result.exit_code == 2

    def test_bad_value_is_a_usage_error(self) -> None:
        result = runner.invoke(app, ["contains", "[1, 2]", "abc"])
        assert result.exit_code == 2


class TestCompare:
    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            ("[1, 2]", "(1, 2)", "greater"),
            ("(1, 2)", "[1, 2]", "less"),
            ("{}", "(1, 1)", "equal"),
            ("[1, 3]", "[2, 4]", "incomparable"),
        ],
    )
    def test_subset_order(self, first: str, second: str, expected: str) -> None:
        result = runner.invoke(app, ["compare", first, second])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected


class TestIntersect:
    def test_notation_output(self) -> None:
        result = runner.invoke(app, ["intersect", "[1, 3]", "(2, 4)"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "(2, 3]"

    def test_json_output(self) -> None:
        result = runner.invoke(app, ["intersect", "[1, 3]", "(2, 4)", "--json"])
        assert result.exit_code == 0
        assert loads_interval(result.stdout.strip()) == Interval.lorc(2, 3)

    def test_empty_result(self) -> None:
        result = runner.invoke(app, ["intersect", "[1, 2)", "[5, 6]"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "[5, 2)"

    def test_incomparable_bounds_fail(self) -> None:
        result = runner.invoke(app, ["intersect", "[nan, 2]", "[1, 3]"])
        assert result.exit_code == 1
        assert "no defined ordering" in result.output

    def test_verbose_flag_is_accepted(self) -> None:
        result = runner.invoke(app, ["--verbose", "intersect", "{}", "[1, 2]"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "{}"


class TestInfo:
    def test_counts(self, tmp_path: Path) -> None:
        rows = [
            dumps_interval(Interval.closed(1, 2)),
            dumps_interval(EMPTY),
            dumps_interval(UNIVERSE),
            "",
            dumps_interval(Interval.open(3, 3)),
        ]
        input_file = _write_rows(tmp_path / "intervals.jsonl", rows)
        result = runner.invoke(app, ["info", str(input_file)])
        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines[0] == f"{input_file}: 4 intervals"
        assert "  empty: 2" in lines
        assert "  universe: 1" in lines
        assert "  undefined: 0" in lines

    def test_malformed_json_reports_line(self, tmp_path: Path) -> None:
        rows = [dumps_interval(EMPTY), "{not json"]
        input_file = _write_rows(tmp_path / "intervals.jsonl", rows)
        result = runner.invoke(app, ["info", str(input_file)])
        assert result.exit_code == 1
        assert "at line 2: malformed JSON" in result.output

    def test_invalid_row_reports_location(self, tmp_path: Path) -> None:
        rows = ['{"left": {"kind": "neg_inf"}, "right": {"kind": "sideways"}}']
        input_file = _write_rows(tmp_path / "intervals.jsonl", rows)
        result = runner.invoke(app, ["info", str(input_file)])
        assert result.exit_code == 1
        assert "at line 1: invalid interval row at 'right" in result.output

    def test_mixed_type_bounds_report_line(self, tmp_path: Path) -> None:
        rows = [
            dumps_interval(Interval.closed(1, 2)),
            '{"left": {"kind": "closed", "value": 1}, '
            '"right": {"kind": "closed", "value": "a"}}',
        ]
        input_file = _write_rows(tmp_path / "intervals.jsonl", rows)
        result = runner.invoke(app, ["info", str(input_file)])
        assert result.exit_code == 1
        assert "at line 2: bounds are not mutually comparable" in result.output
