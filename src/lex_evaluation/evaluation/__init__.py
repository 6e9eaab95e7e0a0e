"""Evaluation module - online evaluation orchestration and result history."""

from __future__ import annotations

from .evaluator import Evaluator, EvaluatorBuilder
from .factory import EvaluatorHandle, make_evaluator
from .history import ResultHistory

__all__ = [
    "Evaluator",
    "EvaluatorBuilder",
    "EvaluatorHandle",
    "ResultHistory",
    "make_evaluator",
]
