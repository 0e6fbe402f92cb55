"""
ROC and Precision-Recall curves traced by a fixed threshold sweep.

Both sweeps walk the threshold from 1.0 towards 0.0 in steps of 0.01 and
recount the confusion matrix at each step. Thresholds are generated as exact
k/100 values so a score of e.g. 0.3 lands on the same side of the 0.3
threshold every time.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import numpy as np

from ..data import ObservationLike, as_arrays
from .metrics import CurvePoint, SweepDefaults, _count, compute_precision, compute_rates, compute_recall

logger = logging.getLogger(__name__)


def threshold_grid(
    steps: int = SweepDefaults.THRESHOLD_STEPS,
    include_zero: bool = True,
) -> np.ndarray:
    """Descending thresholds 1.0, 1 - 1/steps, ..., optionally ending at 0.0."""
    if steps <= 0:
        raise ValueError("steps must be > 0")
    stop = -1 if include_zero else 0
    return np.arange(steps, stop, -1) / steps


@dataclass
class RocCurve:
    """ROC curve points with the area accumulated during the sweep."""

    points: List[CurvePoint]
    thresholds: List[float]
    auc: float

    def trapezoid_auc(self) -> float:
        """Area under the same points using the trapezoid rule."""
        xs = [point.x for point in self.points]
        ys = [point.y for point in self.points]
        # np.trapz was renamed to np.trapezoid in NumPy 2.0
        _trapz = getattr(np, "trapezoid", None) or np.trapz
        # Thresholds descend, so fpr ascends and the integral is positive
        return float(_trapz(ys, xs))

    def to_dict(self) -> Dict[str, object]:
        return {
            "points": [list(point) for point in self.points],
            "thresholds": list(self.thresholds),
            "auc": self.auc,
        }


@dataclass
class PrCurve:
    """Precision-Recall curve points, x = recall and y = precision."""

    points: List[CurvePoint]
    thresholds: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "points": [list(point) for point in self.points],
            "thresholds": list(self.thresholds),
        }


def compute_roc_curve(dataset: Iterable[ObservationLike]) -> RocCurve:
    """
    Trace the ROC curve and estimate its area.

    The curve starts with a seed point at threshold 1.0, followed by the sweep
    1.00, 0.99, ..., 0.00, so the first two points coincide and the curve has
    102 points. Area is the left-rectangle sum ``|fpr - prev_fpr| * prev_tpr``
    over consecutive points.

    Args:
        dataset: Observations, (label, score) pairs or label/score mappings

    Returns:
        RocCurve with (fpr, tpr) points; non-finite rates are kept as NaN/Inf
    """
    is_positive, scores = as_arrays(dataset)

    seed = compute_rates(_count(is_positive, scores, SweepDefaults.SEED_THRESHOLD))
    points = [seed]
    thresholds = [SweepDefaults.SEED_THRESHOLD]
    auc = 0.0
    prev = seed
    for threshold in threshold_grid():
        current = compute_rates(_count(is_positive, scores, threshold))
        points.append(current)
        thresholds.append(float(threshold))
        auc += abs(current.x - prev.x) * prev.y
        prev = current

    logger.debug("ROC sweep over %d examples: %d points, auc=%s", len(scores), len(points), auc)
    return RocCurve(points=points, thresholds=thresholds, auc=auc)


def compute_pr_curve(dataset: Iterable[ObservationLike]) -> PrCurve:
    """Trace the PR curve over thresholds 1.00 down to 0.01 (100 points)."""
    is_positive, scores = as_arrays(dataset)

    points = []
    thresholds = []
    for threshold in threshold_grid(include_zero=False):
        matrix = _count(is_positive, scores, threshold)
        points.append(CurvePoint(x=compute_recall(matrix), y=compute_precision(matrix)))
        thresholds.append(float(threshold))

    logger.debug("PR sweep over %d examples: %d points", len(scores), len(points))
    return PrCurve(points=points, thresholds=thresholds)
