"""Held-out example dataset with reference and value iteration forms."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from ..errors import InvalidDataError, TargetNotFoundError


@dataclass(frozen=True)
class Example:
    """Standalone copy of one labeled, weighted example."""

    features: NDArray[np.float64]
    label: float
    weight: float


class ExampleRef:
    """Lightweight view of one row of an ExampleDataset.

    Nothing is copied: features is a view into the dataset's feature matrix,
    and label/weight are read from the dataset arrays on access.
    """

    __slots__ = ("_dataset", "_index")

    def __init__(self, dataset: ExampleDataset, index: int) -> None:
        self._dataset = dataset
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def features(self) -> NDArray[np.float64]:
        return self._dataset._features[self._index]

    @property
    def label(self) -> float:
        return float(self._dataset._labels[self._index])

    @property
    def weight(self) -> float:
        return float(self._dataset._weights[self._index])

    def to_value(self) -> Example:
        """Copy this view into a standalone Example."""
        return Example(features=self.features.copy(), label=self.label, weight=self.weight)

    def __repr__(self) -> str:
        return f"ExampleRef(index={self._index}, label={self.label}, weight={self.weight})"


class ExampleDataset:
    """Finite, restartable collection of labeled, weighted examples.

    The arrays are copied and frozen at construction, so any number of
    evaluators (including ones running on other threads) can iterate the
    same dataset independently.

    Example:
        dataset = ExampleDataset(X_test, y_test)
        for example in dataset.examples():
            score = model.predict(example.features)
    """

    def __init__(
        self,
        features: ArrayLike,
        labels: ArrayLike,
        weights: ArrayLike | None = None,
    ) -> None:
        """Initialize from feature matrix, labels and optional weights.

        Args:
            features: 2-D array of shape (n_examples, n_features). A 1-D array
                is treated as a single feature column.
            labels: 1-D array of length n_examples.
            weights: Optional 1-D array of length n_examples. Defaults to ones.

        Raises:
            InvalidDataError: If the array shapes do not line up.
        """
        X = np.array(features, dtype=np.float64)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if X.ndim != 2:
            raise InvalidDataError(f"features must be 2-dimensional, got {X.ndim} dimensions")

        y = np.array(labels, dtype=np.float64).reshape(-1)
        if len(y) != X.shape[0]:
            raise InvalidDataError(
                f"Got {X.shape[0]} feature rows but {len(y)} labels"
            )

        if weights is None:
            w = np.ones(len(y), dtype=np.float64)
        else:
            w = np.array(weights, dtype=np.float64).reshape(-1)
            if len(w) != len(y):
                raise InvalidDataError(f"Got {len(y)} labels but {len(w)} weights")

        for array in (X, y, w):
            array.setflags(write=False)

        self._features = X
        self._labels = y
        self._weights = w

    @classmethod
    def from_frame(
        cls,
        data: pd.DataFrame,
        target_column: Hashable | None = None,
        weight_column: Hashable | None = None,
    ) -> ExampleDataset:
        """Build a dataset from a DataFrame of numeric columns.

        Args:
            data: DataFrame with features, target and optional weight column.
            target_column: Name of the label column. Defaults to the last column.
            weight_column: Optional name of the example weight column.

        Returns:
            ExampleDataset over the remaining columns as features.

        Raises:
            TargetNotFoundError: If target column not found.
            InvalidDataError: If the weight column is missing or data has nulls.
        """
        if target_column is None:
            target_column = data.columns[-1]

        if target_column not in data.columns:
            raise TargetNotFoundError(target_column, list(data.columns))

        if weight_column is not None and weight_column not in data.columns:
            raise InvalidDataError(f"Weight column '{weight_column}' not found")

        if data.isnull().any().any():
            null_cols = data.columns[data.isnull().any()].tolist()
            raise InvalidDataError(f"Data contains null values in columns: {null_cols}")

        drop = [target_column] if weight_column is None else [target_column, weight_column]
        X = data.drop(columns=drop)
        try:
            features = X.to_numpy(dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidDataError(f"Feature columns must be numeric: {e}") from e

        weights = None if weight_column is None else data[weight_column].to_numpy()
        return cls(features, data[target_column].to_numpy(), weights)

    @property
    def n_features(self) -> int:
        """Number of feature columns."""
        return int(self._features.shape[1])

    @property
    def total_weight(self) -> float:
        """Sum of example weights."""
        return float(self._weights.sum())

    def examples(self) -> Iterator[ExampleRef]:
        """Iterate lightweight views over the examples, in storage order."""
        for index in range(len(self._labels)):
            yield ExampleRef(self, index)

    def example_values(self) -> Iterator[Example]:
        """Iterate standalone copies of the examples, in storage order."""
        for index in range(len(self._labels)):
            yield Example(
                features=self._features[index].copy(),
                label=float(self._labels[index]),
                weight=float(self._weights[index]),
            )

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"ExampleDataset(n_examples={len(self)}, n_features={self.n_features})"


def as_dataset(data: Any, target_column: Hashable | None = None) -> ExampleDataset:
    """Coerce a DataFrame or (features, labels[, weights]) tuple into a dataset."""
    if isinstance(data, ExampleDataset):
        return data
    if isinstance(data, pd.DataFrame):
        return ExampleDataset.from_frame(data, target_column=target_column)
    if isinstance(data, tuple) and len(data) in (2, 3):
        return ExampleDataset(*data)
    raise InvalidDataError(f"Cannot build a dataset from {type(data).__name__}")
