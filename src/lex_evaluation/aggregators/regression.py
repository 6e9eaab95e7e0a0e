"""Regression error aggregator (RMSE and MAE)."""

from __future__ import annotations

import math


class RegressionErrorAggregator:
    """Weighted root mean squared error and mean absolute error."""

    def __init__(self) -> None:
        self._sum_squared = 0.0
        self._sum_absolute = 0.0
        self._sum_weights = 0.0

    def update(self, prediction: float, label: float, weight: float) -> None:
        diff = prediction - label
        self._sum_squared += weight * diff * diff
        self._sum_absolute += weight * abs(diff)
        self._sum_weights += weight

    def get_result(self) -> list[float]:
        if self._sum_weights == 0:
            return [0.0, 0.0]
        rmse = math.sqrt(self._sum_squared / self._sum_weights)
        mae = self._sum_absolute / self._sum_weights
        return [rmse, mae]

    def reset(self) -> None:
        self._sum_squared = 0.0
        self._sum_absolute = 0.0
        self._sum_weights = 0.0

    def get_value_names(self) -> list[str]:
        return ["RMSE", "MAE"]
