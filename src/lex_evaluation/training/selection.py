"""Greedy stage selection and early stopping for boosted models."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ..core import Predictor
from ..errors import CancelledError
from ..evaluation import EvaluatorHandle
from ..predictors import StagedBoosterPredictor
from ..progress import (
    EvaluationPhase,
    NullProgressReporter,
    ProgressReporter,
    ProgressUpdate,
)

logger = logging.getLogger(__name__)


@dataclass
class StageSelectionResult:
    """Outcome of select_stage().

    Attributes:
        best_iteration: Boosting round count with the best goodness
            (0 if no round was evaluated).
        best_goodness: Goodness at best_iteration.
        rounds_evaluated: Number of evaluate calls that produced a row.
        stopped_early: Whether patience ran out before max_iterations.
    """

    best_iteration: int
    best_goodness: float
    rounds_evaluated: int
    stopped_early: bool


def staged_predictors(
    model: Any,
    max_iterations: int,
    iteration_kwarg: str | None = None,
) -> Iterator[StagedBoosterPredictor]:
    """Yield a predictor for each prefix 1..max_iterations of a boosted model."""
    for n_iterations in range(1, max_iterations + 1):
        yield StagedBoosterPredictor(model, n_iterations, iteration_kwarg=iteration_kwarg)


def select_stage(
    model: Any,
    evaluator: EvaluatorHandle[Predictor],
    max_iterations: int | None = None,
    *,
    patience: int | None = None,
    higher_is_better: bool = False,
    iteration_kwarg: str | None = None,
    progress_reporter: ProgressReporter | None = None,
) -> StageSelectionResult:
    """Evaluate each boosting prefix and pick the one with the best goodness.

    Calls skipped by the evaluator's frequency gate are not rounds: they
    neither change the best stage nor count towards patience.

    Args:
        model: Fitted boosted model (see StagedBoosterPredictor).
        evaluator: Evaluator whose first metric is the selection criterion.
        max_iterations: Number of prefixes to try. Defaults to the model's
            n_estimators.
        patience: Stop after this many evaluated rounds without improvement.
            None disables early stopping.
        higher_is_better: Direction of the goodness metric (False for error
            rates and losses, True for AUC).
        iteration_kwarg: Forwarded to StagedBoosterPredictor.
        progress_reporter: Optional reporter; also checked for cancellation
            before each evaluate call.

    Returns:
        StageSelectionResult describing the chosen stage.

    Raises:
        ValueError: If max_iterations or patience is invalid.
        CancelledError: If the reporter requests cancellation.
    """
    if max_iterations is None:
        max_iterations = getattr(model, "n_estimators", None)
        if max_iterations is None:
            raise ValueError("max_iterations is required for models without n_estimators")
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")
    if patience is not None and patience < 1:
        raise ValueError("patience must be at least 1")

    reporter = progress_reporter or NullProgressReporter()

    best_iteration = 0
    best_goodness: float | None = None
    rounds = 0
    rounds_without_improvement = 0
    stopped_early = False

    for iteration, predictor in enumerate(
        staged_predictors(model, max_iterations, iteration_kwarg), start=1
    ):
        if reporter.is_cancelled():
            reporter.report(
                ProgressUpdate(
                    phase=EvaluationPhase.CANCELLED,
                    round_index=rounds,
                    evaluate_calls=iteration - 1,
                    goodness=best_goodness or 0.0,
                    message="Stage selection cancelled",
                )
            )
            raise CancelledError()

        if not evaluator.evaluate(predictor):
            continue

        rounds += 1
        goodness = evaluator.get_goodness()
        if best_goodness is None or _improves(goodness, best_goodness, higher_is_better):
            best_goodness = goodness
            best_iteration = iteration
            rounds_without_improvement = 0
        else:
            rounds_without_improvement += 1

        reporter.report(
            ProgressUpdate(
                phase=EvaluationPhase.STAGE_SELECTION,
                round_index=rounds,
                evaluate_calls=iteration,
                goodness=goodness,
                message=f"Iteration {iteration}: goodness {goodness:.6f} (best {best_iteration})",
            )
        )

        if patience is not None and rounds_without_improvement >= patience:
            logger.info(
                f"Early stopping at iteration {iteration}: no improvement in {patience} rounds"
            )
            stopped_early = True
            break

    if best_goodness is None:
        logger.warning(f"No evaluation round ran within {max_iterations} iterations")
        best_goodness = 0.0
    else:
        logger.info(f"Selected iteration {best_iteration} with goodness {best_goodness:.6f}")

    reporter.report(
        ProgressUpdate(
            phase=EvaluationPhase.COMPLETE,
            round_index=rounds,
            evaluate_calls=max_iterations,
            goodness=best_goodness,
            message=f"Selected iteration {best_iteration}",
        )
    )

    return StageSelectionResult(
        best_iteration=best_iteration,
        best_goodness=best_goodness,
        rounds_evaluated=rounds,
        stopped_early=stopped_early,
    )


def _improves(goodness: float, best: float, higher_is_better: bool) -> bool:
    """Strict improvement, so ties keep the earlier (smaller) stage."""
    return goodness > best if higher_is_better else goodness < best
