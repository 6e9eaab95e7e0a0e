"""Result types for lex-evaluation.

This module contains the immutable snapshot types produced by an evaluation
round: one ResultGroup per aggregator, collected into a ResultRow.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultGroup:
    """Values reported by a single aggregator for one round."""

    aggregator: str
    names: tuple[str, ...]
    values: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class ResultRow:
    """One round's snapshot, in aggregator construction order.

    Attributes:
        groups: One result group per aggregator.
        evaluation_call: Evaluate-call counter when the round ran
            (0 for the zero-prediction baseline round).
    """

    groups: tuple[ResultGroup, ...]
    evaluation_call: int = 0

    @property
    def value_names(self) -> list[str]:
        """Flattened value names across all groups."""
        return [name for group in self.groups for name in group.names]

    @property
    def values(self) -> list[float]:
        """Flattened values across all groups."""
        return [value for group in self.groups for value in group.values]

    @property
    def is_zero_evaluation(self) -> bool:
        """Whether this row is the constant-zero baseline round."""
        return self.evaluation_call == 0
