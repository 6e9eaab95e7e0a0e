"""Progress reporting for lex-evaluation.

This module provides per-round progress updates from evaluators, along
with the callbacks and cancellation hook used by stage selection.
"""

from __future__ import annotations

from .reporter import (
    CallbackProgressReporter,
    CancellationCheck,
    EvaluationPhase,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    ProgressUpdate,
)

__all__ = [
    "EvaluationPhase",
    "ProgressUpdate",
    "ProgressCallback",
    "CancellationCheck",
    "ProgressReporter",
    "CallbackProgressReporter",
    "NullProgressReporter",
]
