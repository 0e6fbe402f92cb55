"""Tests for the ROC and PR threshold sweeps."""

import logging
import math

import pytest

from thresholdviz.data import Observation
from thresholdviz.eval import (
    SweepDefaults,
    compute_pr_curve,
    compute_roc_curve,
    threshold_grid,
)


class TestThresholdGrid:
    """Tests for threshold generation."""

    def test_default_grid_has_101_descending_values(self):
        grid = threshold_grid()
        assert len(grid) == SweepDefaults.THRESHOLD_STEPS + 1
        assert grid[0] == 1.0
        assert grid[-1] == 0.0
        assert all(a > b for a, b in zip(grid, grid[1:]))

    def test_grid_values_are_exact_hundredths(self):
        grid = threshold_grid()
        assert grid[70] == 0.3
        assert grid[50] == 0.5

    def test_grid_without_zero(self):
        grid = threshold_grid(include_zero=False)
        assert len(grid) == 100
        assert grid[-1] == 0.01

    def test_invalid_steps_raise(self):
        with pytest.raises(ValueError, match="steps"):
            threshold_grid(steps=0)


class TestRocCurve:
    """Tests for compute_roc_curve."""

    def test_curve_has_seed_plus_101_points(self, balanced_dataset):
        roc = compute_roc_curve(balanced_dataset)
        assert len(roc.points) == 102
        assert len(roc.thresholds) == 102
        assert roc.points[0] == roc.points[1]
        assert roc.thresholds[:2] == [1.0, 1.0]

    def test_curve_runs_from_origin_to_corner(self, balanced_dataset):
        roc = compute_roc_curve(balanced_dataset)
        assert roc.points[0] == (0.0, 0.0)
        assert roc.points[-1] == (1.0, 1.0)

    def test_separable_dataset_has_unit_area(self, separable_dataset):
        roc = compute_roc_curve(separable_dataset)
        assert roc.auc == pytest.approx(1.0)
        assert roc.trapezoid_auc() == pytest.approx(1.0)

    def test_area_uses_previous_tpr(self):
        """A tie flips fpr and tpr together; the left rectangle adds nothing."""
        data = [Observation("positive", 0.5), Observation("negative", 0.5)]
        roc = compute_roc_curve(data)
        assert roc.auc == 0.0
        assert roc.trapezoid_auc() == pytest.approx(0.5)

    def test_balanced_dataset_area(self, balanced_dataset):
        # fpr steps to 0.5 at 0.8 (tpr 0.5), then to 1.0 at 0.1 (tpr 1.0)
        roc = compute_roc_curve(balanced_dataset)
        assert roc.auc == pytest.approx(0.75)

    def test_all_positive_dataset_keeps_nan_fpr(self, all_positive_dataset):
        roc = compute_roc_curve(all_positive_dataset)
        assert len(roc.points) == 102
        assert all(math.isnan(point.x) for point in roc.points)
        assert roc.points[-1].y == 1.0
        assert math.isnan(roc.auc)

    def test_empty_dataset_does_not_raise(self):
        roc = compute_roc_curve([])
        assert len(roc.points) == 102
        assert math.isnan(roc.auc)

    def test_to_dict(self, separable_dataset):
        d = compute_roc_curve(separable_dataset).to_dict()
        assert d["points"][0] == [0.0, 0.0]
        assert len(d["thresholds"]) == 102
        assert d["auc"] == pytest.approx(1.0)

    def test_sweep_is_logged(self, balanced_dataset, caplog):
        caplog.set_level(logging.DEBUG, logger="thresholdviz.eval.curves")
        compute_roc_curve(balanced_dataset)
        assert "ROC sweep over 4 examples: 102 points" in caplog.text


class TestPrCurve:
    """Tests for compute_pr_curve."""

    def test_curve_has_100_points(self, balanced_dataset):
        pr = compute_pr_curve(balanced_dataset)
        assert len(pr.points) == 100
        assert pr.thresholds[0] == 1.0
        assert pr.thresholds[-1] == 0.01

    def test_first_point_uses_zero_precision(self, balanced_dataset):
        pr = compute_pr_curve(balanced_dataset)
        recall, precision = pr.points[0]
        assert recall == 0.0
        assert precision == 0.0

    def test_last_point_predicts_everything_positive(self, balanced_dataset):
        pr = compute_pr_curve(balanced_dataset)
        assert pr.points[-1] == (1.0, 0.5)

    def test_point_at_half(self, balanced_dataset):
        pr = compute_pr_curve(balanced_dataset)
        index = pr.thresholds.index(0.5)
        assert pr.points[index] == (0.5, 0.5)

    def test_no_positives_gives_nan_recall(self):
        data = [Observation("negative", 0.4), Observation("negative", 0.7)]
        pr = compute_pr_curve(data)
        assert all(math.isnan(point.x) for point in pr.points)
        assert all(point.y == 0.0 for point in pr.points)

    def test_empty_dataset_does_not_raise(self):
        pr = compute_pr_curve([])
        assert len(pr.points) == 100
        assert all(math.isnan(point.x) for point in pr.points)
        assert all(point.y == 0.0 for point in pr.points)

    def test_to_dict(self, balanced_dataset):
        d = compute_pr_curve(balanced_dataset).to_dict()
        assert len(d["points"]) == 100
        assert d["points"][-1] == [1.0, 0.5]
