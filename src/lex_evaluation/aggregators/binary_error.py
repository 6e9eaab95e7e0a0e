"""Sign-agreement (binary classification error) aggregator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConfusionCounts:
    """Weighted confusion counts accumulated over one round."""

    true_positives: float = 0.0
    true_negatives: float = 0.0
    false_positives: float = 0.0
    false_negatives: float = 0.0

    @property
    def total(self) -> float:
        return self.true_positives + self.true_negatives + self.false_positives + self.false_negatives


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


class BinaryErrorAggregator:
    """Compares the sign of each prediction with the sign of its label.

    A prediction is positive when it is > 0, and so is a label, so a
    constant 0.0 prediction counts as negative for every example.

    Reports ErrorRate, Precision, Recall and F1Score, all weighted.
    """

    VALUE_NAMES = ("ErrorRate", "Precision", "Recall", "F1Score")

    def __init__(self) -> None:
        self._counts = ConfusionCounts()

    @property
    def counts(self) -> ConfusionCounts:
        """Copy of the current weighted confusion counts."""
        c = self._counts
        return ConfusionCounts(c.true_positives, c.true_negatives, c.false_positives, c.false_negatives)

    def update(self, prediction: float, label: float, weight: float) -> None:
        predicted_positive = prediction > 0
        actual_positive = label > 0
        if predicted_positive and actual_positive:
            self._counts.true_positives += weight
        elif predicted_positive:
            self._counts.false_positives += weight
        elif actual_positive:
            self._counts.false_negatives += weight
        else:
            self._counts.true_negatives += weight

    def get_result(self) -> list[float]:
        c = self._counts
        error_rate = _ratio(c.false_positives + c.false_negatives, c.total)
        precision = _ratio(c.true_positives, c.true_positives + c.false_positives)
        recall = _ratio(c.true_positives, c.true_positives + c.false_negatives)
        f1 = _ratio(2 * precision * recall, precision + recall)
        return [error_rate, precision, recall, f1]

    def reset(self) -> None:
        self._counts = ConfusionCounts()

    def get_value_names(self) -> list[str]:
        return list(self.VALUE_NAMES)
