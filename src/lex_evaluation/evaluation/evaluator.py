"""Online evaluation orchestrator.

This module provides the Evaluator class that scores successive predictors
against a fixed held-out dataset and records one snapshot per round.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Generic, TextIO, TypeVar

from ..config import EvaluatorParameters
from ..core import Aggregator, ExampleStream, Predictor, ResultGroup, ResultRow
from ..errors import AggregatorContractError, InvalidConfigError
from ..predictors import ConstantPredictor
from ..progress import (
    CallbackProgressReporter,
    EvaluationPhase,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    ProgressUpdate,
)
from .history import ResultHistory

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)

PredictorT = TypeVar("PredictorT", bound=Predictor)


class Evaluator(Generic[PredictorT]):
    """Scores predictors against a held-out dataset on a throttled schedule.

    Each call to evaluate() advances a counter; every evaluation_frequency-th
    call streams the dataset once, feeds every example's prediction to each
    aggregator in construction order, and appends the aggregators' results
    to the history as one ResultRow before resetting them.

    Usage:
        evaluator = Evaluator.builder() \\
            .dataset(dataset) \\
            .aggregator(BinaryErrorAggregator()) \\
            .aggregator(LossAggregator("log")) \\
            .parameters(EvaluatorParameters(evaluation_frequency=5)) \\
            .build()

        for predictor in candidates:
            evaluator.evaluate(predictor)

        evaluator.print()
    """

    def __init__(
        self,
        dataset: ExampleStream,
        aggregators: Sequence[Aggregator],
        parameters: EvaluatorParameters | None = None,
        progress_reporter: ProgressReporter | None = None,
    ) -> None:
        """Initialize evaluator, running the zero round if requested.

        Use Evaluator.builder() for a fluent interface.

        Args:
            dataset: Held-out examples, iterated once per round.
            aggregators: Metric accumulators, owned by the evaluator from now on.
            parameters: Schedule parameters. Defaults to EvaluatorParameters().
            progress_reporter: Optional reporter notified after each round.

        Raises:
            InvalidConfigError: If no aggregators are given.
        """
        aggregators = tuple(aggregators)
        if not aggregators:
            raise InvalidConfigError("at least one aggregator is required")

        self._dataset = dataset
        self._aggregators = aggregators
        self._parameters = parameters or EvaluatorParameters()
        self._reporter: ProgressReporter = progress_reporter or NullProgressReporter()
        self._evaluate_calls = 0

        self._value_names = tuple(tuple(agg.get_value_names()) for agg in aggregators)
        self._history = ResultHistory([name for names in self._value_names for name in names])

        if self._parameters.add_zero_evaluation:
            logger.info("Running zero-prediction baseline")
            self._run_round(ConstantPredictor(0.0), EvaluationPhase.ZERO_EVALUATION)

    @classmethod
    def builder(cls) -> EvaluatorBuilder:
        """Create a builder for Evaluator."""
        return EvaluatorBuilder()

    @property
    def parameters(self) -> EvaluatorParameters:
        return self._parameters

    @property
    def aggregators(self) -> tuple[Aggregator, ...]:
        return self._aggregators

    @property
    def history(self) -> ResultHistory:
        return self._history

    @property
    def evaluate_calls(self) -> int:
        """Number of evaluate() calls made so far."""
        return self._evaluate_calls

    def evaluate(self, predictor: PredictorT) -> bool:
        """Evaluate a predictor if the schedule says this call is due.

        Args:
            predictor: Candidate to score on the held-out dataset.

        Returns:
            True if a round ran and a row was appended, False if the call
            was skipped by the evaluation frequency.
        """
        self._evaluate_calls += 1
        if self._evaluate_calls % self._parameters.evaluation_frequency != 0:
            logger.debug(f"Skipping evaluation for call {self._evaluate_calls}")
            return False

        self._run_round(predictor, EvaluationPhase.EVALUATION)
        return True

    def get_goodness(self) -> float:
        """First metric of the first aggregator in the latest row (0.0 if none)."""
        return self._history.get_goodness()

    def print(self, out: TextIO | None = None) -> None:
        """Write the history as tab-separated text (see ResultHistory.print)."""
        self._history.print(out)

    def _run_round(self, predictor: Predictor, phase: EvaluationPhase) -> None:
        """Stream the dataset once, then harvest and reset every aggregator."""
        aggregators = self._aggregators
        n_examples = 0
        try:
            for example in self._dataset.examples():
                prediction = float(predictor.predict(example.features))
                label = example.label
                weight = example.weight
                for aggregator in aggregators:
                    aggregator.update(prediction, label, weight)
                n_examples += 1

            row = ResultRow(groups=self._harvest(), evaluation_call=self._evaluate_calls)
            self._history.append(row)
        finally:
            for aggregator in aggregators:
                aggregator.reset()

        goodness = self._history.get_goodness()
        logger.debug(
            f"Round {len(self._history)} at call {self._evaluate_calls} "
            f"over {n_examples} examples: goodness={goodness:.6f}"
        )
        self._reporter.report(
            ProgressUpdate(
                phase=phase,
                round_index=len(self._history),
                evaluate_calls=self._evaluate_calls,
                goodness=goodness,
                message=f"Evaluated round {len(self._history)}",
            )
        )

    def _harvest(self) -> tuple[ResultGroup, ...]:
        """Collect every aggregator's result, checking it against its names."""
        groups = []
        for position, (aggregator, expected_names) in enumerate(
            zip(self._aggregators, self._value_names)
        ):
            label = type(aggregator).__name__
            names = tuple(aggregator.get_value_names())
            values = tuple(float(v) for v in aggregator.get_result())

            if len(names) != len(values):
                raise AggregatorContractError(
                    position, label, f"{len(names)} value names but {len(values)} values"
                )
            if names != expected_names:
                raise AggregatorContractError(
                    position, label, f"value names changed from {list(expected_names)} to {list(names)}"
                )

            groups.append(ResultGroup(aggregator=label, names=names, values=values))
        return tuple(groups)

    def __repr__(self) -> str:
        names = ", ".join(type(agg).__name__ for agg in self._aggregators)
        return (
            f"Evaluator(aggregators=[{names}], "
            f"evaluate_calls={self._evaluate_calls}, rounds={len(self._history)})"
        )


class EvaluatorBuilder:
    """Builder for Evaluator with fluent interface."""

    def __init__(self) -> None:
        self._dataset: ExampleStream | None = None
        self._aggregators: list[Aggregator] = []
        self._parameters: EvaluatorParameters | None = None
        self._progress_callback: ProgressCallback | None = None

    def dataset(self, dataset: ExampleStream) -> Self:
        """Set the held-out dataset."""
        self._dataset = dataset
        return self

    def aggregator(self, aggregator: Aggregator) -> Self:
        """Append one aggregator; order of calls is reporting order."""
        self._aggregators.append(aggregator)
        return self

    def aggregators(self, aggregators: Iterable[Aggregator]) -> Self:
        """Append several aggregators in order."""
        self._aggregators.extend(aggregators)
        return self

    def parameters(self, parameters: EvaluatorParameters) -> Self:
        """Set the schedule parameters."""
        self._parameters = parameters
        return self

    def on_progress(self, callback: ProgressCallback) -> Self:
        """Set the progress callback."""
        self._progress_callback = callback
        return self

    def build(self) -> Evaluator[Predictor]:
        """Build the Evaluator."""
        if self._dataset is None:
            raise ValueError("dataset is required")

        reporter = (
            CallbackProgressReporter(self._progress_callback)
            if self._progress_callback
            else None
        )
        return Evaluator(
            dataset=self._dataset,
            aggregators=self._aggregators,
            parameters=self._parameters,
            progress_reporter=reporter,
        )
