"""Factory for evaluator handles.

Callers that juggle several differently configured evaluators only need
evaluate/get_goodness/print, so make_evaluator() returns them behind the
EvaluatorHandle protocol.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, TextIO, TypeVar

from ..aggregators import create_aggregator
from ..config import EvaluatorParameters
from ..core import Aggregator, Predictor
from ..data import as_dataset
from ..progress import ProgressReporter
from .evaluator import Evaluator

PredictorT_contra = TypeVar("PredictorT_contra", bound=Predictor, contravariant=True)


class EvaluatorHandle(Protocol[PredictorT_contra]):
    """Uniform handle over any evaluator configuration."""

    def evaluate(self, predictor: PredictorT_contra) -> bool: ...

    def get_goodness(self) -> float: ...

    def print(self, out: TextIO | None = None) -> None: ...


def make_evaluator(
    dataset: Any,
    aggregators: Iterable[Aggregator | str],
    parameters: EvaluatorParameters | None = None,
    progress_reporter: ProgressReporter | None = None,
) -> EvaluatorHandle[Predictor]:
    """Create an evaluator and return it as an EvaluatorHandle.

    Args:
        dataset: An ExampleStream, a DataFrame (last column is the label),
            or a (features, labels[, weights]) tuple.
        aggregators: Aggregator instances or registered aggregator names,
            in reporting order.
        parameters: Schedule parameters. Defaults to EvaluatorParameters().
        progress_reporter: Optional reporter notified after each round.

    Returns:
        Handle exposing evaluate, get_goodness and print.

    Raises:
        InvalidConfigError: If no aggregators are given.
        ValueError: If an aggregator name is unknown.
    """
    if not hasattr(dataset, "examples"):
        dataset = as_dataset(dataset)

    resolved = [
        create_aggregator(agg) if isinstance(agg, str) else agg
        for agg in aggregators
    ]
    return Evaluator(
        dataset=dataset,
        aggregators=resolved,
        parameters=parameters,
        progress_reporter=progress_reporter,
    )
