"""Truncated predictions from fitted gradient boosting models.

Boosted ensembles produce one candidate predictor per boosting round. This
module exposes each prefix of the ensemble as a Predictor so that an
Evaluator can score every round of a single fitted model.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from sklearn.base import is_classifier


def _xgboost_kwargs(n_iterations: int) -> dict[str, Any]:
    return {"iteration_range": (0, n_iterations)}


def _lightgbm_kwargs(n_iterations: int) -> dict[str, Any]:
    return {"num_iteration": n_iterations}


# Keyed by the top-level module of the model class
BOOSTING_LIBRARIES: dict[str, dict[str, Any]] = {
    "xgboost": {
        "iteration_kwargs": _xgboost_kwargs,
        "margin_kwargs": {"output_margin": True},
    },
    "lightgbm": {
        "iteration_kwargs": _lightgbm_kwargs,
        "margin_kwargs": {"raw_score": True},
    },
}


def _library_of(model: Any) -> str:
    return type(model).__module__.split(".")[0]


def supports_staged_prediction(model: Any) -> bool:
    """Check whether the model's library is known to support truncation."""
    return _library_of(model) in BOOSTING_LIBRARIES


class StagedBoosterPredictor:
    """Predictor using only the first n_iterations rounds of a boosted model.

    Classifiers are scored with their raw margin so that the sign of the
    prediction matches the predicted class.

    Args:
        model: Fitted XGBoost or LightGBM scikit-learn API model.
        n_iterations: Number of leading boosting rounds to use (>= 1).
        iteration_kwarg: Keyword the model's predict() takes for the round
            count, for libraries other than XGBoost and LightGBM.

    Raises:
        ValueError: If n_iterations < 1 or the model library is unsupported
            and no iteration_kwarg was given.
    """

    def __init__(self, model: Any, n_iterations: int, iteration_kwarg: str | None = None) -> None:
        if n_iterations < 1:
            raise ValueError("n_iterations must be at least 1")

        library = _library_of(model)
        if iteration_kwarg is not None:
            kwargs: dict[str, Any] = {iteration_kwarg: n_iterations}
        elif library in BOOSTING_LIBRARIES:
            options = BOOSTING_LIBRARIES[library]
            kwargs = options["iteration_kwargs"](n_iterations)
            if is_classifier(model):
                kwargs.update(options["margin_kwargs"])
        else:
            raise ValueError(
                f"{type(model).__name__} does not support truncated prediction. "
                f"Supported libraries: {list(BOOSTING_LIBRARIES)}"
            )

        self.model = model
        self.n_iterations = n_iterations
        self._predict_kwargs = kwargs

    def predict(self, features: NDArray[Any]) -> float:
        output = self.model.predict(np.asarray(features).reshape(1, -1), **self._predict_kwargs)
        return float(np.asarray(output).reshape(-1)[0])

    def __repr__(self) -> str:
        return f"StagedBoosterPredictor({type(self.model).__name__}, n_iterations={self.n_iterations})"
