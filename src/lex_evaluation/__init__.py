"""lex-evaluation: Online evaluation of successive predictors.

This library scores a sequence of candidate predictors (for example the
successive rounds of a boosted model) against a fixed held-out dataset,
using an ordered set of metric aggregators, and keeps one snapshot per
evaluated round for model selection, early stopping or progress reporting.

Example usage:
    from lex_evaluation import (
        BinaryErrorAggregator,
        Evaluator,
        EvaluatorParameters,
        ExampleDataset,
        LossAggregator,
    )

    params = EvaluatorParameters.builder() \\
        .evaluation_frequency(5) \\
        .add_zero_evaluation() \\
        .build()

    evaluator = Evaluator.builder() \\
        .dataset(ExampleDataset(X_test, y_test)) \\
        .aggregator(BinaryErrorAggregator()) \\
        .aggregator(LossAggregator("log")) \\
        .parameters(params) \\
        .build()

    for predictor in candidates:
        evaluator.evaluate(predictor)

    print(evaluator.get_goodness())
    evaluator.print()
"""

from __future__ import annotations

# Aggregators
from .aggregators import (
    AUCAggregator,
    BinaryErrorAggregator,
    LossAggregator,
    RegressionErrorAggregator,
    create_aggregator,
    get_available_aggregators,
)

# Configuration
from .config import EvaluatorParameters, EvaluatorParametersBuilder

# Types and protocols (from core module)
from .core import (
    Aggregator,
    ExampleStream,
    Predictor,
    ResultGroup,
    ResultRow,
)

# Data
from .data import Example, ExampleDataset, ExampleRef

# Errors
from .errors import (
    AggregatorContractError,
    CancelledError,
    InvalidConfigError,
    InvalidDataError,
    LexEvalError,
    TargetNotFoundError,
)

# Evaluation
from .evaluation import (
    Evaluator,
    EvaluatorBuilder,
    EvaluatorHandle,
    ResultHistory,
    make_evaluator,
)

# Predictors
from .predictors import (
    CallablePredictor,
    ConstantPredictor,
    EstimatorPredictor,
    LinearPredictor,
    StagedBoosterPredictor,
)

# Progress
from .progress import (
    CallbackProgressReporter,
    EvaluationPhase,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    ProgressUpdate,
)

# Training
from .training import StageSelectionResult, select_stage

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "EvaluatorParameters",
    "EvaluatorParametersBuilder",
    # Evaluation
    "Evaluator",
    "EvaluatorBuilder",
    "EvaluatorHandle",
    "ResultHistory",
    "make_evaluator",
    # Aggregators
    "AUCAggregator",
    "BinaryErrorAggregator",
    "LossAggregator",
    "RegressionErrorAggregator",
    "create_aggregator",
    "get_available_aggregators",
    # Data
    "Example",
    "ExampleDataset",
    "ExampleRef",
    # Predictors
    "CallablePredictor",
    "ConstantPredictor",
    "EstimatorPredictor",
    "LinearPredictor",
    "StagedBoosterPredictor",
    # Training
    "StageSelectionResult",
    "select_stage",
    # Progress
    "EvaluationPhase",
    "ProgressUpdate",
    "ProgressCallback",
    "ProgressReporter",
    "CallbackProgressReporter",
    "NullProgressReporter",
    # Types and protocols (from core)
    "Aggregator",
    "Predictor",
    "ExampleStream",
    "ResultGroup",
    "ResultRow",
    # Errors
    "LexEvalError",
    "InvalidConfigError",
    "InvalidDataError",
    "TargetNotFoundError",
    "AggregatorContractError",
    "CancelledError",
]
