"""Append-only log of evaluation snapshots."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

import pandas as pd

from ..core import ResultRow

VALUE_FORMAT = "{:.6f}"
SEPARATOR = "\t"


class ResultHistory:
    """Ordered, append-only sequence of ResultRows.

    Rows are never removed or reordered. All rows share the flattened value
    names given at construction.
    """

    def __init__(self, value_names: Sequence[str]) -> None:
        self._value_names = tuple(value_names)
        self._rows: list[ResultRow] = []

    @property
    def value_names(self) -> list[str]:
        """Flattened value names, one per reported scalar."""
        return list(self._value_names)

    @property
    def rows(self) -> tuple[ResultRow, ...]:
        return tuple(self._rows)

    @property
    def latest(self) -> ResultRow | None:
        """Most recently appended row, or None if empty."""
        return self._rows[-1] if self._rows else None

    def append(self, row: ResultRow) -> None:
        self._rows.append(row)

    def get_goodness(self) -> float:
        """First value of the first group of the latest row, or 0.0 if empty."""
        row = self.latest
        if row is None or not row.groups or not row.groups[0].values:
            return 0.0
        return row.groups[0].values[0]

    def print(self, out: TextIO | None = None) -> None:
        """Write the history as tab-separated text.

        The first line holds the value names; each following line holds one
        row's values in fixed-point notation with six decimals. Nothing about
        the stream other than its contents is touched.

        Args:
            out: Text stream to write to. Defaults to sys.stdout.
        """
        if out is None:
            out = sys.stdout
        out.write(SEPARATOR.join(self._value_names) + "\n")
        for row in self._rows:
            out.write(SEPARATOR.join(VALUE_FORMAT.format(v) for v in row.values) + "\n")

    def to_frame(self) -> pd.DataFrame:
        """Return the history as a DataFrame indexed by evaluate-call number."""
        index = pd.Index([row.evaluation_call for row in self._rows], name="evaluation_call")
        return pd.DataFrame(
            [row.values for row in self._rows],
            columns=list(self._value_names),
            index=index,
            dtype="float64",
        )

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ResultRow]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> ResultRow:
        return self._rows[index]
