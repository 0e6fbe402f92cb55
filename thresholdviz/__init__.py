# Threshold Visualization - Metrics Core
"""
Metrics core for an interactive binary-classifier threshold visualization.

Modules:
- data: Labeled score observations and the class-skew sizing helper
- eval: Confusion matrix, point metrics, ROC and PR curve sweeps
"""

__version__ = "0.1.0"

from .data import (
    Label,
    Observation,
    ClassSizes,
    as_observations,
    compute_num_examples,
)
from .eval import (
    ConfusionMatrix,
    CurvePoint,
    OperatingPoint,
    RocCurve,
    PrCurve,
    SweepDefaults,
    compute_confusion_matrix,
    compute_precision,
    compute_recall,
    compute_rates,
    compute_roc_curve,
    compute_pr_curve,
    format_metric,
    operating_point,
    sweep_thresholds,
)

__all__ = [
    # Data
    "Label",
    "Observation",
    "ClassSizes",
    "as_observations",
    "compute_num_examples",
    # Evaluation
    "ConfusionMatrix",
    "CurvePoint",
    "OperatingPoint",
    "RocCurve",
    "PrCurve",
    "SweepDefaults",
    "compute_confusion_matrix",
    "compute_precision",
    "compute_recall",
    "compute_rates",
    "compute_roc_curve",
    "compute_pr_curve",
    "format_metric",
    "operating_point",
    "sweep_thresholds",
]
