"""Weighted mean loss aggregator."""

from __future__ import annotations

from .losses import LossFunction, get_loss


class LossAggregator:
    """Accumulates the weighted mean of a per-example loss.

    Args:
        loss: Name of a built-in loss ("squared", "absolute", "log", "hinge")
            or a LossFunction.
    """

    def __init__(self, loss: str | LossFunction = "squared") -> None:
        self._loss = get_loss(loss) if isinstance(loss, str) else loss
        self._sum_weighted_loss = 0.0
        self._sum_weights = 0.0

    @property
    def loss(self) -> LossFunction:
        return self._loss

    def update(self, prediction: float, label: float, weight: float) -> None:
        self._sum_weighted_loss += weight * self._loss(prediction, label)
        self._sum_weights += weight

    def get_result(self) -> list[float]:
        if self._sum_weights == 0:
            return [0.0]
        return [self._sum_weighted_loss / self._sum_weights]

    def reset(self) -> None:
        self._sum_weighted_loss = 0.0
        self._sum_weights = 0.0

    def get_value_names(self) -> list[str]:
        return [f"Mean{self._loss.name}Loss"]
