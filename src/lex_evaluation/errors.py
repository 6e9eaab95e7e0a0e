"""Exception hierarchy for lex-evaluation."""

from __future__ import annotations

from collections.abc import Hashable


class LexEvalError(Exception):
    """Base exception for lex-evaluation."""

    pass


class InvalidConfigError(LexEvalError):
    """Invalid evaluator setup provided."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid configuration: {message}")


class InvalidDataError(LexEvalError):
    """Dataset validation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid data: {message}")


class TargetNotFoundError(LexEvalError):
    """Target column not found in data."""

    def __init__(self, column: Hashable, available: list[Hashable]) -> None:
        self.column = column
        self.available = available
        super().__init__(f"Target column '{column}' not found. Available columns: {available}")


class AggregatorContractError(LexEvalError):
    """An aggregator reported values inconsistent with its value names."""

    def __init__(self, position: int, aggregator: str, message: str) -> None:
        self.position = position
        self.aggregator = aggregator
        super().__init__(f"Aggregator #{position} ({aggregator}) broke its contract: {message}")


class CancelledError(LexEvalError):
    """Stage selection was cancelled by user."""

    def __init__(self) -> None:
        super().__init__("Stage selection was cancelled")
