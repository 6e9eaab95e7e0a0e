"""Predictors module - adapters implementing the Predictor protocol."""

from .basic import CallablePredictor, ConstantPredictor, EstimatorPredictor, LinearPredictor
from .boosting import StagedBoosterPredictor, supports_staged_prediction

__all__ = [
    "CallablePredictor",
    "ConstantPredictor",
    "EstimatorPredictor",
    "LinearPredictor",
    "StagedBoosterPredictor",
    "supports_staged_prediction",
]
