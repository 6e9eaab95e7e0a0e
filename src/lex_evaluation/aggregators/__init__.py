"""Aggregator registry for lex-evaluation.

This module provides the built-in metric aggregators and a unified
interface for creating them by name.
"""

from __future__ import annotations

from typing import Any

from ..core import Aggregator
from .auc import AUCAggregator
from .binary_error import BinaryErrorAggregator, ConfusionCounts
from .loss import LossAggregator
from .losses import LOSSES, LossFunction, get_loss
from .regression import RegressionErrorAggregator

_ALL_AGGREGATORS: dict[str, type] = {
    "binary_error": BinaryErrorAggregator,
    "loss": LossAggregator,
    "regression_error": RegressionErrorAggregator,
    "auc": AUCAggregator,
}


def get_available_aggregators() -> list[str]:
    """Get list of registered aggregator names."""
    return list(_ALL_AGGREGATORS)


def create_aggregator(name: str, **kwargs: Any) -> Aggregator:
    """Create an aggregator instance by name.

    Args:
        name: Aggregator name (e.g., "binary_error", "loss").
        **kwargs: Forwarded to the aggregator constructor
            (e.g., loss="log" for "loss").

    Returns:
        A fresh aggregator instance.

    Raises:
        ValueError: If the aggregator name is unknown.
    """
    if name not in _ALL_AGGREGATORS:
        available = list(_ALL_AGGREGATORS.keys())
        raise ValueError(f"Unknown aggregator '{name}'. Available: {available}")

    return _ALL_AGGREGATORS[name](**kwargs)


__all__ = [
    "AUCAggregator",
    "BinaryErrorAggregator",
    "ConfusionCounts",
    "LossAggregator",
    "LossFunction",
    "LOSSES",
    "RegressionErrorAggregator",
    "create_aggregator",
    "get_available_aggregators",
    "get_loss",
]
