"""Core types and protocols for lex-evaluation.

This module contains the foundational snapshot types and the capability
protocols used throughout the library.
"""

from __future__ import annotations

from .protocols import Aggregator, ExampleLike, ExampleStream, Predictor
from .types import ResultGroup, ResultRow

__all__ = [
    # Types
    "ResultGroup",
    "ResultRow",
    # Protocols
    "Aggregator",
    "Predictor",
    "ExampleLike",
    "ExampleStream",
]
