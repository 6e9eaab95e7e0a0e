"""Tests for predictor adapters."""

from __future__ import annotations

import numpy as np
import pytest
from sklearn.linear_model import LinearRegression, LogisticRegression

from lex_evaluation import (
    CallablePredictor,
    ConstantPredictor,
    EstimatorPredictor,
    LinearPredictor,
    Predictor,
    StagedBoosterPredictor,
)
from lex_evaluation.predictors import supports_staged_prediction


class TestSimplePredictors:
    """Tests for constant, linear and callable predictors."""

    def test_constant(self):
        """ConstantPredictor ignores the features."""
        predictor = ConstantPredictor(0.25)
        assert predictor.predict(np.array([1.0, 2.0])) == 0.25
        assert predictor.predict(np.array([-5.0])) == 0.25

    def test_linear(self):
        """LinearPredictor is a dot product plus bias."""
        predictor = LinearPredictor([1.0, -2.0], bias=0.5)
        assert predictor.predict(np.array([3.0, 1.0])) == pytest.approx(1.5)

    def test_callable(self):
        """CallablePredictor wraps a function and returns a float."""
        predictor = CallablePredictor(lambda x: np.sum(x))
        result = predictor.predict(np.array([1.0, 2.0]))

        assert result == 3.0
        assert isinstance(result, float)

    @pytest.mark.parametrize(
        "predictor",
        [ConstantPredictor(), LinearPredictor([1.0]), CallablePredictor(lambda x: 0.0)],
    )
    def test_satisfy_protocol(self, predictor):
        """All adapters satisfy the Predictor protocol."""
        assert isinstance(predictor, Predictor)


class TestEstimatorPredictor:
    """Tests for wrapping scikit-learn estimators."""

    def test_classifier_uses_decision_function(self, binary_dataset):
        """Classifiers are scored by their signed decision function."""
        X = np.array([ref.features for ref in binary_dataset.examples()])
        y = np.array([ref.label for ref in binary_dataset.examples()])
        model = LogisticRegression().fit(X, y)
        predictor = EstimatorPredictor(model)

        assert predictor.method == "decision_function"
        assert predictor.predict(X[0]) == pytest.approx(model.decision_function(X[:1])[0])

    def test_regressor_uses_predict(self):
        """Regressors fall back to predict()."""
        X = np.array([[1.0], [2.0], [3.0]])
        model = LinearRegression().fit(X, [2.0, 4.0, 6.0])
        predictor = EstimatorPredictor(model)

        assert predictor.method == "predict"
        assert predictor.predict(np.array([4.0])) == pytest.approx(8.0)

    def test_explicit_method(self):
        """An explicit method name is honoured."""
        X = np.array([[0.0], [1.0], [2.0], [3.0]])
        model = LogisticRegression().fit(X, [0, 0, 1, 1])
        predictor = EstimatorPredictor(model, method="predict")

        assert predictor.predict(np.array([3.0])) == 1.0

    def test_missing_method(self):
        """Unknown methods raise ValueError."""
        with pytest.raises(ValueError, match="no method"):
            EstimatorPredictor(LinearRegression(), method="predict_proba")


class TestStagedBoosterPredictor:
    """Tests for truncated boosting predictions."""

    def test_explicit_iteration_kwarg(self, staged_model):
        """Unknown libraries work with an explicit iteration keyword."""
        predictor = StagedBoosterPredictor(staged_model, 2, iteration_kwarg="n_rounds")
        assert predictor.predict(np.array([2.0])) == pytest.approx(1.8)

    def test_unknown_library(self, staged_model):
        """Unknown libraries without an iteration keyword are rejected."""
        assert not supports_staged_prediction(staged_model)
        with pytest.raises(ValueError, match="truncated prediction"):
            StagedBoosterPredictor(staged_model, 1)

    def test_iterations_must_be_positive(self, staged_model):
        """n_iterations must be at least 1."""
        with pytest.raises(ValueError, match="n_iterations"):
            StagedBoosterPredictor(staged_model, 0, iteration_kwarg="n_rounds")

    @pytest.mark.slow
    def test_lightgbm_truncation(self, binary_dataset):
        """Full-length staged predictions match LightGBM's raw scores."""
        lgb = pytest.importorskip("lightgbm")
        X = np.array([ref.features for ref in binary_dataset.examples()])
        y = np.array([ref.label for ref in binary_dataset.examples()])
        model = lgb.LGBMClassifier(n_estimators=10, verbose=-1).fit(X, y)

        assert supports_staged_prediction(model)
        full = StagedBoosterPredictor(model, 10)
        first = StagedBoosterPredictor(model, 1)

        assert full.predict(X[0]) == pytest.approx(model.predict(X[:1], raw_score=True)[0])
        assert first.predict(X[0]) == pytest.approx(
            model.predict(X[:1], raw_score=True, num_iteration=1)[0]
        )

    @pytest.mark.slow
    def test_xgboost_truncation(self, binary_dataset):
        """Staged predictions match XGBoost's margin for the same range."""
        xgb = pytest.importorskip("xgboost")
        X = np.array([ref.features for ref in binary_dataset.examples()])
        y = np.array([ref.label for ref in binary_dataset.examples()])
        model = xgb.XGBClassifier(n_estimators=10, max_depth=2, verbosity=0).fit(X, y)

        predictor = StagedBoosterPredictor(model, 3)
        expected = model.predict(X[:1], output_margin=True, iteration_range=(0, 3))[0]

        assert predictor.predict(X[0]) == pytest.approx(float(expected))
