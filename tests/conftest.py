"""Shared test fixtures and utilities for lex-evaluation tests."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
import pytest

from lex_evaluation import EvaluatorParameters, ExampleDataset, ProgressUpdate

# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def tiny_dataset() -> ExampleDataset:
    """Two examples: (label=1, weight=1) then (label=0, weight=1)."""
    return ExampleDataset(features=[[1.0], [-1.0]], labels=[1.0, 0.0], weights=[1.0, 1.0])


@pytest.fixture
def binary_dataset() -> ExampleDataset:
    """Create a linearly separable-ish binary dataset.

    Returns:
        Dataset with 3 features and 0/1 labels from a noisy linear rule.
    """
    rng = np.random.default_rng(42)
    n_samples = 200

    X = rng.normal(size=(n_samples, 3))
    score = X[:, 0] * 2.0 - X[:, 1] + rng.normal(scale=0.3, size=n_samples)
    y = (score > 0).astype(float)
    weights = rng.uniform(0.5, 1.5, size=n_samples)

    return ExampleDataset(X, y, weights)


@pytest.fixture
def regression_dataset() -> ExampleDataset:
    """Targets equal to the first feature, so scale=1.0 predicts perfectly."""
    X = np.array([[1.0], [2.0], [3.0], [4.0]])
    return ExampleDataset(X, X[:, 0])


@pytest.fixture
def binary_frame() -> pd.DataFrame:
    """Create a small numeric DataFrame with a weight and a target column."""
    rng = np.random.default_rng(0)
    n_samples = 30

    data = {
        "x1": rng.normal(size=n_samples),
        "x2": rng.normal(size=n_samples),
        "w": rng.uniform(0.1, 1.0, size=n_samples),
    }
    data["target"] = (data["x1"] > 0).astype(int)

    return pd.DataFrame(data)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def zero_eval_params() -> EvaluatorParameters:
    """Every call evaluates, with the zero-prediction baseline."""
    return EvaluatorParameters.builder().add_zero_evaluation().build()


# =============================================================================
# Helper Aggregators and Models
# =============================================================================


class RecordingAggregator:
    """Aggregator that logs every call into a shared list."""

    def __init__(self, name: str, log: list[tuple[str, str]]) -> None:
        self.name = name
        self.log = log
        self.updates: list[tuple[float, float, float]] = []

    def update(self, prediction: float, label: float, weight: float) -> None:
        self.log.append((self.name, "update"))
        self.updates.append((prediction, label, weight))

    def get_result(self) -> list[float]:
        self.log.append((self.name, "get_result"))
        return [float(len(self.updates))]

    def reset(self) -> None:
        self.log.append((self.name, "reset"))
        self.updates = []

    def get_value_names(self) -> list[str]:
        return [f"{self.name}Count"]


class FakeStagedModel:
    """Model whose predict() scales the first feature by a per-stage factor."""

    def __init__(self, scales: list[float]) -> None:
        self.scales = scales
        self.n_estimators = len(scales)

    def predict(self, X: Any, n_rounds: int | None = None) -> np.ndarray:
        scale = self.scales[(n_rounds or self.n_estimators) - 1]
        return np.asarray(X)[:, 0] * scale


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    """Shared list RecordingAggregators append to."""
    return []


@pytest.fixture
def make_recorder(call_log):
    """Factory for RecordingAggregators sharing call_log."""

    def factory(name: str) -> RecordingAggregator:
        return RecordingAggregator(name, call_log)

    return factory


@pytest.fixture
def staged_model() -> FakeStagedModel:
    """Squared loss against regression_dataset is 0 at stage 3 and grows after."""
    return FakeStagedModel([0.2, 0.9, 1.0, 1.5, 2.0, 3.0])


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def progress_tracker() -> list[ProgressUpdate]:
    """List that progress callbacks append updates to."""
    return []


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (real boosting libraries)"
    )
