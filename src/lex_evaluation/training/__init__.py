"""Training module - stage selection for boosted models."""

from .selection import StageSelectionResult, select_stage, staged_predictors

__all__ = [
    "StageSelectionResult",
    "select_stage",
    "staged_predictors",
]
