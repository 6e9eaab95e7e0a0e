"""Per-example loss functions used by LossAggregator."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class LossFunction:
    """A named per-example loss.

    Attributes:
        name: CamelCase name used in the reported value name.
        fn: Callable mapping (prediction, label) to a non-negative loss.
    """

    name: str
    fn: Callable[[float, float], float]

    def __call__(self, prediction: float, label: float) -> float:
        return self.fn(prediction, label)


def _sign(label: float) -> float:
    """Map a label to +1/-1 (positive iff label > 0)."""
    return 1.0 if label > 0 else -1.0


def _squared(prediction: float, label: float) -> float:
    diff = prediction - label
    return diff * diff


def _absolute(prediction: float, label: float) -> float:
    return abs(prediction - label)


def _log(prediction: float, label: float) -> float:
    # log(1 + exp(-margin)) without overflow for large negative margins
    margin = _sign(label) * prediction
    if margin > 0:
        return math.log1p(math.exp(-margin))
    return -margin + math.log1p(math.exp(margin))


def _hinge(prediction: float, label: float) -> float:
    return max(0.0, 1.0 - _sign(label) * prediction)


LOSSES: dict[str, LossFunction] = {
    "squared": LossFunction("Squared", _squared),
    "absolute": LossFunction("Absolute", _absolute),
    "log": LossFunction("Log", _log),
    "hinge": LossFunction("Hinge", _hinge),
}


def get_loss(name: str) -> LossFunction:
    """Look up a built-in loss by name.

    Raises:
        ValueError: If the loss name is unknown.
    """
    if name not in LOSSES:
        raise ValueError(f"Unknown loss '{name}'. Available: {list(LOSSES)}")
    return LOSSES[name]
