"""Protocols shared across lex-evaluation.

This module defines the capability contracts the evaluator depends on:
the Aggregator protocol every metric accumulator implements, the Predictor
protocol for anything that maps a feature vector to a score, and the
ExampleStream protocol a held-out dataset must satisfy.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from numpy.typing import NDArray


@runtime_checkable
class Aggregator(Protocol):
    """Protocol for per-round metric accumulators.

    An aggregator incorporates one example at a time, reports its current
    value(s) on demand, and is cleared between evaluation rounds. The number
    of names returned by get_value_names() must always equal the number of
    values returned by get_result().
    """

    def update(self, prediction: float, label: float, weight: float) -> None:
        """Incorporate one example into the running accumulator.

        Args:
            prediction: Score produced by the predictor for the example.
            label: The example's label.
            weight: The example's weight.
        """
        ...

    def get_result(self) -> list[float]:
        """Return the accumulated metric values without modifying state."""
        ...

    def reset(self) -> None:
        """Clear the accumulator to its post-construction state.

        Calling reset twice in a row is equivalent to calling it once.
        """
        ...

    def get_value_names(self) -> list[str]:
        """Return one stable name per value reported by get_result()."""
        ...


@runtime_checkable
class Predictor(Protocol):
    """Protocol for anything that scores a single feature vector."""

    def predict(self, features: NDArray[Any]) -> float:
        """Return a scalar prediction for one example."""
        ...


class ExampleLike(Protocol):
    """Read-only view of one labeled, weighted example."""

    @property
    def features(self) -> NDArray[Any]: ...

    @property
    def label(self) -> float: ...

    @property
    def weight(self) -> float: ...


class ExampleStream(Protocol):
    """Protocol for a held-out dataset.

    Both methods must return a fresh, finite iterator starting at the first
    example on every call. Evaluators sharing one stream across threads rely
    on examples() being safe for concurrent, independent invocation.
    """

    def examples(self) -> Iterator[ExampleLike]:
        """Iterate lightweight views over the stored examples."""
        ...

    def example_values(self) -> Iterator[ExampleLike]:
        """Iterate copies of the stored examples."""
        ...
