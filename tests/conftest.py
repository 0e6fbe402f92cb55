"""
Pytest Configuration and Shared Fixtures

Provides small labeled score datasets for the metrics tests.
"""

import pytest

from thresholdviz.data import Observation


@pytest.fixture
def balanced_dataset():
    """Two positives and two negatives, one of each on either side of 0.5."""
    return [
        Observation("positive", 0.9),
        Observation("positive", 0.3),
        Observation("negative", 0.8),
        Observation("negative", 0.1),
    ]


@pytest.fixture
def separable_dataset():
    """Every positive outscores every negative."""
    return [
        Observation("positive", 0.9),
        Observation("positive", 0.8),
        Observation("negative", 0.2),
        Observation("negative", 0.1),
    ]


@pytest.fixture
def all_positive_dataset():
    """Five positives and no negatives."""
    return [Observation("positive", score) for score in (0.2, 0.3, 0.4, 0.5, 0.6)]
