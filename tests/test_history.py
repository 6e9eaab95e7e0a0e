"""Tests for ResultHistory and snapshot types."""

from __future__ import annotations

import io

from lex_evaluation import ResultGroup, ResultHistory, ResultRow


def _row(call: int, *groups: tuple[str, list[str], list[float]]) -> ResultRow:
    return ResultRow(
        groups=tuple(ResultGroup(name, tuple(names), tuple(values)) for name, names, values in groups),
        evaluation_call=call,
    )


class TestResultRow:
    """Tests for flattening snapshots."""

    def test_flattening(self):
        """Names and values flatten left to right across groups."""
        row = _row(3, ("A", ["a1", "a2"], [1.0, 2.0]), ("B", ["b1"], [3.0]))

        assert row.value_names == ["a1", "a2", "b1"]
        assert row.values == [1.0, 2.0, 3.0]
        assert len(row.groups[0]) == 2
        assert not row.is_zero_evaluation


class TestResultHistory:
    """Tests for the append-only history."""

    def test_append_preserves_order(self):
        """Rows are kept in append order."""
        history = ResultHistory(["x"])
        for call in (0, 2, 4):
            history.append(_row(call, ("A", ["x"], [float(call)])))

        assert [row.evaluation_call for row in history] == [0, 2, 4]
        assert history.latest is history[-1]
        assert len(history.rows) == 3

    def test_goodness_empty(self):
        """Empty history has goodness 0.0."""
        assert ResultHistory(["x"]).get_goodness() == 0.0
        assert ResultHistory(["x"]).latest is None

    def test_goodness_first_group_without_values(self):
        """A first aggregator reporting nothing gives goodness 0.0."""
        history = ResultHistory(["b"])
        history.append(_row(1, ("A", [], []), ("B", ["b"], [7.0])))

        assert history.get_goodness() == 0.0

    def test_goodness_uses_latest_row(self):
        """Goodness reads the most recent row."""
        history = ResultHistory(["x", "y"])
        history.append(_row(1, ("A", ["x", "y"], [0.1, 0.9])))
        history.append(_row(2, ("A", ["x", "y"], [0.3, 0.7])))

        assert history.get_goodness() == 0.3

    def test_print_format(self):
        """Values are fixed-point with six decimals, tab separated."""
        history = ResultHistory(["x", "y"])
        history.append(_row(1, ("A", ["x"], [1.0 / 3.0]), ("B", ["y"], [-2.5])))

        out = io.StringIO()
        history.print(out)

        assert out.getvalue() == "x\ty\n0.333333\t-2.500000\n"
