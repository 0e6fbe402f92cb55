"""
Confusion-matrix counting and point metrics for a scored binary dataset.

Every function here classifies with the same rule, ``score >= threshold`` means
predicted positive, so curves and point metrics always agree.

Degenerate ratios are not guarded: an absent class gives NaN or Infinity,
which the plotting side renders as a gap. Precision is the one exception and
falls back to 0.0 when nothing is predicted positive.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, NamedTuple, Sequence

import numpy as np

from ..data import ObservationLike, as_arrays


class SweepDefaults:
    """Fixed settings shared by the curve sweeps and the display layer."""

    THRESHOLD_STEPS = 100
    SEED_THRESHOLD = 1.0
    DISPLAY_DECIMALS = 2


class ConfusionMatrix(NamedTuple):
    """Binary confusion matrix counts, ordered (tp, fn, fp, tn)."""

    tp: int
    fn: int
    fp: int
    tn: int

    @property
    def total(self) -> int:
        return self.tp + self.fn + self.fp + self.tn

    @property
    def actual_positives(self) -> int:
        return self.tp + self.fn

    @property
    def actual_negatives(self) -> int:
        return self.fp + self.tn

    @property
    def predicted_positives(self) -> int:
        return self.tp + self.fp

    @property
    def predicted_negatives(self) -> int:
        return self.fn + self.tn


class CurvePoint(NamedTuple):
    """A point on a ROC (fpr, tpr) or PR (recall, precision) curve."""

    x: float
    y: float


@dataclass
class ThresholdResult:
    """Confusion matrix tied to a specific score threshold."""

    threshold: float
    matrix: ConfusionMatrix


@dataclass
class OperatingPoint:
    """Metrics at the currently selected threshold."""

    threshold: float
    matrix: ConfusionMatrix
    fpr: float
    tpr: float
    precision: float
    recall: float

    def to_dict(self) -> Dict[str, float]:
        """Serialize metrics as a flat dictionary."""
        return {
            "threshold": self.threshold,
            "tp": self.matrix.tp,
            "fn": self.matrix.fn,
            "fp": self.matrix.fp,
            "tn": self.matrix.tn,
            "fpr": self.fpr,
            "tpr": self.tpr,
            "precision": self.precision,
            "recall": self.recall,
        }

    def display(self, decimals: int = SweepDefaults.DISPLAY_DECIMALS) -> Dict[str, str]:
        """Rates formatted for display."""
        return {
            "fpr": format_metric(self.fpr, decimals),
            "tpr": format_metric(self.tpr, decimals),
            "precision": format_metric(self.precision, decimals),
            "recall": format_metric(self.recall, decimals),
        }


def _safe_div(numerator: float, denominator: float) -> float:
    """Division that returns 0.0 for an empty denominator."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _ratio(numerator: float, denominator: float) -> float:
    """IEEE division: 0/0 is NaN and x/0 is +-Infinity, without warnings."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def _count(is_positive: np.ndarray, scores: np.ndarray, threshold: float) -> ConfusionMatrix:
    predicted = scores >= threshold
    tp = int(np.sum(is_positive & predicted))
    fn = int(np.sum(is_positive & ~predicted))
    fp = int(np.sum(~is_positive & predicted))
    tn = int(np.sum(~is_positive & ~predicted))
    return ConfusionMatrix(tp=tp, fn=fn, fp=fp, tn=tn)


def compute_confusion_matrix(
    dataset: Iterable[ObservationLike],
    threshold: float,
) -> ConfusionMatrix:
    """Count (tp, fn, fp, tn) with scores >= threshold predicted positive."""
    is_positive, scores = as_arrays(dataset)
    return _count(is_positive, scores, float(threshold))


def compute_precision(matrix: Sequence[int]) -> float:
    """TP / (TP + FP), or 0.0 when nothing is predicted positive."""
    tp, fn, fp, tn = matrix
    return _safe_div(tp, tp + fp)


def compute_recall(matrix: Sequence[int]) -> float:
    """TP / (TP + FN). NaN when the dataset has no positives."""
    tp, fn, fp, tn = matrix
    return _ratio(tp, tp + fn)


def compute_rates(matrix: Sequence[int]) -> CurvePoint:
    """False-positive rate and true-positive rate, both unguarded."""
    tp, fn, fp, tn = matrix
    return CurvePoint(x=_ratio(fp, fp + tn), y=_ratio(tp, tp + fn))


def format_metric(value: float, decimals: int = SweepDefaults.DISPLAY_DECIMALS) -> str:
    """Format a metric with a fixed number of decimals ("0.50"), ties rounded up."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Decimal(value) is the exact binary value, so 0.125 -> "0.13"
    quantum = Decimal(1).scaleb(-decimals)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def sweep_thresholds(
    dataset: Iterable[ObservationLike],
    thresholds: Iterable[float],
) -> List[ThresholdResult]:
    """Evaluate the confusion matrix across a list of thresholds."""
    is_positive, scores = as_arrays(dataset)
    results: List[ThresholdResult] = []
    for threshold in thresholds:
        matrix = _count(is_positive, scores, float(threshold))
        results.append(ThresholdResult(threshold=float(threshold), matrix=matrix))
    return results


def operating_point(
    dataset: Iterable[ObservationLike],
    threshold: float,
) -> OperatingPoint:
    """Collect the matrix and derived rates at a single threshold."""
    matrix = compute_confusion_matrix(dataset, threshold)
    fpr, tpr = compute_rates(matrix)
    return OperatingPoint(
        threshold=float(threshold),
        matrix=matrix,
        fpr=fpr,
        tpr=tpr,
        precision=compute_precision(matrix),
        recall=compute_recall(matrix),
    )
