"""Confusion-matrix counting, point metrics and threshold-sweep curves."""

from .metrics import (
    ConfusionMatrix,
    CurvePoint,
    ThresholdResult,
    OperatingPoint,
    SweepDefaults,
    compute_confusion_matrix,
    compute_precision,
    compute_recall,
    compute_rates,
    format_metric,
    sweep_thresholds,
    operating_point,
)
from .curves import (
    RocCurve,
    PrCurve,
    threshold_grid,
    compute_roc_curve,
    compute_pr_curve,
)

__all__ = [
    "ConfusionMatrix",
    "CurvePoint",
    "ThresholdResult",
    "OperatingPoint",
    "compute_confusion_matrix",
    "compute_precision",
    "compute_recall",
    "compute_rates",
    "format_metric",
    "sweep_thresholds",
    "operating_point",
    "SweepDefaults",
    "RocCurve",
    "PrCurve",
    "threshold_grid",
    "compute_roc_curve",
    "compute_pr_curve",
]
