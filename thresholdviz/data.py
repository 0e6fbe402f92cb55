"""
Data Model for Threshold Visualization

Labeled score observations consumed by the evaluation helpers, plus the
sizing helper used when generating a synthetic dataset with a given class skew.

Usage:
    from thresholdviz.data import Observation, compute_num_examples

    data = [Observation("positive", 0.9), Observation("negative", 0.2)]
    sizes = compute_num_examples(300, "positive", 2)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, NamedTuple, Tuple, Union

import numpy as np


class Label(str, Enum):
    """Ground-truth class of an observation."""
    POSITIVE = "positive"
    NEGATIVE = "negative"


LabelLike = Union[Label, str]


def as_label(value: LabelLike) -> Label:
    """Normalize a label or label string, rejecting anything else."""
    try:
        return Label(value)
    except ValueError:
        raise ValueError(
            f"Unknown label {value!r}. Use one of: {[label.value for label in Label]}"
        ) from None


@dataclass(frozen=True)
class Observation:
    """A single scored example with its true label."""

    label: Label
    score: float

    def __post_init__(self):
        object.__setattr__(self, "label", as_label(self.label))
        try:
            score = float(self.score)
        except (TypeError, ValueError):
            raise ValueError(f"Score must be a real number, got {self.score!r}") from None
        object.__setattr__(self, "score", score)

    @property
    def is_positive(self) -> bool:
        return self.label is Label.POSITIVE


ObservationLike = Union[Observation, Tuple[LabelLike, float], Mapping[str, Any]]


def as_observations(data: Iterable[ObservationLike]) -> Tuple[Observation, ...]:
    """
    Coerce a dataset into a tuple of Observations.

    Accepts Observation instances, (label, score) pairs, or mappings with
    "label" and "score" keys.
    """
    observations = []
    for item in data:
        if isinstance(item, Observation):
            observations.append(item)
        elif isinstance(item, Mapping):
            if "label" not in item or "score" not in item:
                raise ValueError("Observation mappings need 'label' and 'score' keys.")
            observations.append(Observation(item["label"], item["score"]))
        else:
            try:
                label, score = item
            except (TypeError, ValueError):
                raise ValueError(f"Expected a (label, score) pair, got {item!r}") from None
            observations.append(Observation(label, score))
    return tuple(observations)


def as_arrays(data: Iterable[ObservationLike]) -> Tuple[np.ndarray, np.ndarray]:
    """Split a dataset into (is_positive, scores) numpy arrays."""
    observations = as_observations(data)
    is_positive = np.fromiter(
        (obs.is_positive for obs in observations), dtype=bool, count=len(observations)
    )
    scores = np.fromiter(
        (obs.score for obs in observations), dtype=np.float64, count=len(observations)
    )
    return is_positive, scores


# =============================================================================
# Dataset sizing
# =============================================================================

class ClassSizes(NamedTuple):
    """Number of examples per class. Values are not rounded."""

    num_positives: float
    num_negatives: float


def compute_num_examples(
    total_examples: float,
    skew_towards: LabelLike,
    skew: float,
) -> ClassSizes:
    """
    Split a total example count between the two classes.

    The skewed-towards class gets ``total_examples / (1 + skew)`` and the other
    class gets the remainder, so a larger skew shrinks the skewed-towards class.
    A skew of 0 is the unskewed setting and gives an even split, the same as 1,
    so the result jumps at 0: a tiny positive skew gives almost every example
    to the skewed-towards class.

    Args:
        total_examples: Total number of examples to generate
        skew_towards: Label whose size is divided by ``1 + skew``
        skew: Non-negative skew ratio

    Returns:
        ClassSizes with real-valued counts; rounding is left to the caller
    """
    label = as_label(skew_towards)
    if not skew >= 0:
        raise ValueError("skew must be >= 0.")
    if not total_examples >= 0:
        raise ValueError("total_examples must be >= 0.")

    ratio = skew if skew > 0 else 1.0
    skewed = total_examples / (1 + ratio)
    other = total_examples - skewed
    if label is Label.POSITIVE:
        return ClassSizes(num_positives=skewed, num_negatives=other)
    return ClassSizes(num_positives=other, num_negatives=skewed)
