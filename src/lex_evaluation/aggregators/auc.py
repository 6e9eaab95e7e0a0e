"""Area under the ROC curve aggregator."""

from __future__ import annotations

import logging

import numpy as np
from sklearn.metrics import roc_auc_score

logger = logging.getLogger(__name__)


class AUCAggregator:
    """Weighted ROC AUC of predictions against labels binarised at > 0.

    Unlike the running-sum aggregators this one has to keep every
    (prediction, label, weight) triple of the round. Reports 0.5 when the
    round saw fewer than two classes.
    """

    def __init__(self) -> None:
        self._predictions: list[float] = []
        self._labels: list[float] = []
        self._weights: list[float] = []

    def update(self, prediction: float, label: float, weight: float) -> None:
        self._predictions.append(prediction)
        self._labels.append(label)
        self._weights.append(weight)

    def get_result(self) -> list[float]:
        y_true = np.asarray(self._labels, dtype=np.float64) > 0
        weights = np.asarray(self._weights, dtype=np.float64)

        positive_weight = float(weights[y_true].sum())
        negative_weight = float(weights[~y_true].sum())
        if positive_weight <= 0 or negative_weight <= 0:
            if self._labels:
                logger.warning("AUC undefined for a round with a single class, reporting 0.5")
            return [0.5]

        auc = roc_auc_score(
            y_true.astype(int),
            np.asarray(self._predictions, dtype=np.float64),
            sample_weight=weights,
        )
        return [float(auc)]

    def reset(self) -> None:
        self._predictions = []
        self._labels = []
        self._weights = []

    def get_value_names(self) -> list[str]:
        return ["AUC"]
