"""Configuration dataclasses for lex-evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True)
class EvaluatorParameters:
    """Schedule parameters for an evaluator.

    Attributes:
        evaluation_frequency: Run a full dataset pass on every N-th evaluate call.
        add_zero_evaluation: Whether to record a constant-zero baseline round
            when the evaluator is constructed.
    """

    evaluation_frequency: int = 1
    add_zero_evaluation: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.evaluation_frequency, bool) or not isinstance(
            self.evaluation_frequency, int
        ):
            raise ValueError("evaluation_frequency must be an integer")
        if self.evaluation_frequency < 1:
            raise ValueError("evaluation_frequency must be at least 1")

    @classmethod
    def builder(cls) -> EvaluatorParametersBuilder:
        """Create a builder for EvaluatorParameters."""
        return EvaluatorParametersBuilder()


class EvaluatorParametersBuilder:
    """Builder for EvaluatorParameters with fluent interface."""

    def __init__(self) -> None:
        self._evaluation_frequency: int = 1
        self._add_zero_evaluation: bool = False

    def evaluation_frequency(self, value: int) -> Self:
        """Set how often a full evaluation round runs."""
        self._evaluation_frequency = value
        return self

    def add_zero_evaluation(self, value: bool = True) -> Self:
        """Enable or disable the zero-prediction baseline round."""
        self._add_zero_evaluation = value
        return self

    def build(self) -> EvaluatorParameters:
        """Build the EvaluatorParameters."""
        return EvaluatorParameters(
            evaluation_frequency=self._evaluation_frequency,
            add_zero_evaluation=self._add_zero_evaluation,
        )
