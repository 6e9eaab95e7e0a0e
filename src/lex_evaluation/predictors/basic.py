"""Simple predictor adapters."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


class ConstantPredictor:
    """Predicts the same value for every example."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def predict(self, features: NDArray[Any]) -> float:
        del features  # Unused, prediction does not depend on the example
        return self.value

    def __repr__(self) -> str:
        return f"ConstantPredictor({self.value})"


class LinearPredictor:
    """Dot product of a weight vector with the features, plus a bias."""

    def __init__(self, weights: ArrayLike, bias: float = 0.0) -> None:
        self.weights = np.asarray(weights, dtype=np.float64).reshape(-1)
        self.bias = float(bias)

    def predict(self, features: NDArray[Any]) -> float:
        return float(np.dot(self.weights, features)) + self.bias


class CallablePredictor:
    """Wraps a plain function of the feature vector."""

    def __init__(self, fn: Callable[[NDArray[Any]], float]) -> None:
        self._fn = fn

    def predict(self, features: NDArray[Any]) -> float:
        return float(self._fn(features))


class EstimatorPredictor:
    """Scores single examples with a fitted scikit-learn style estimator.

    Args:
        model: Fitted estimator.
        method: Name of the scoring method. Defaults to decision_function
            when the model has one (classifiers), otherwise predict.
    """

    def __init__(self, model: Any, method: str | None = None) -> None:
        if method is None:
            method = "decision_function" if hasattr(model, "decision_function") else "predict"
        if not hasattr(model, method):
            raise ValueError(f"{type(model).__name__} has no method '{method}'")
        self.model = model
        self.method = method
        self._score = getattr(model, method)

    def predict(self, features: NDArray[Any]) -> float:
        output = np.asarray(self._score(np.asarray(features).reshape(1, -1)))
        return float(output.reshape(-1)[0])
