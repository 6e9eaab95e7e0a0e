"""Progress reporting classes and types.

This module contains the progress reporting infrastructure including the
EvaluationPhase enum, ProgressUpdate dataclass, and reporter implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class EvaluationPhase(Enum):
    """Phases an evaluation run reports."""

    ZERO_EVALUATION = "zero_evaluation"
    EVALUATION = "evaluation"
    STAGE_SELECTION = "stage_selection"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


@dataclass
class ProgressUpdate:
    """Progress update emitted after an evaluation round.

    Attributes:
        phase: Current evaluation phase.
        round_index: Number of result rows recorded so far.
        evaluate_calls: Value of the evaluate-call counter.
        goodness: Goodness of the most recent row.
        message: Human-readable status message.
    """

    phase: EvaluationPhase
    round_index: int
    evaluate_calls: int
    goodness: float
    message: str


# Type alias for progress callback
ProgressCallback = Callable[[ProgressUpdate], None]

# Type alias for cancellation check
CancellationCheck = Callable[[], bool]


class ProgressReporter(Protocol):
    """Protocol for progress reporting.

    Implement this protocol to receive an update after each evaluation round.
    """

    def report(self, update: ProgressUpdate) -> None:
        """Report a progress update.

        Args:
            update: The progress update to report.
        """
        ...

    def is_cancelled(self) -> bool:
        """Check if stage selection should stop before its next evaluate call.

        Returns:
            True if the operation should be cancelled, False otherwise.
        """
        ...


class CallbackProgressReporter:
    """Forwards round updates to a callable and polls another for cancellation.

    Either callable may be omitted. Without a cancellation check, stage
    selection always runs to completion.
    """

    def __init__(
        self,
        progress_callback: ProgressCallback | None = None,
        cancellation_check: CancellationCheck | None = None,
    ) -> None:
        """Wrap the optional callables.

        Args:
            progress_callback: Receives one ProgressUpdate per evaluated round.
            cancellation_check: Polled by select_stage before each evaluate call.
        """
        self._progress_callback = progress_callback
        self._cancellation_check = cancellation_check

    def report(self, update: ProgressUpdate) -> None:
        """Pass the update to the progress callback, if any."""
        if self._progress_callback is not None:
            self._progress_callback(update)

    def is_cancelled(self) -> bool:
        """Poll the cancellation check; False when none was given."""
        if self._cancellation_check is not None:
            return self._cancellation_check()
        return False


class NullProgressReporter:
    """Reporter used when an evaluator or select_stage is given none."""

    def report(self, update: ProgressUpdate) -> None:
        pass

    def is_cancelled(self) -> bool:
        """Never cancelled."""
        return False
