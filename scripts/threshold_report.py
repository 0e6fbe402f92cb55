#!/usr/bin/env python3
"""
Print confusion-matrix metrics and curve summaries for a demo dataset.

Usage:
    python scripts/threshold_report.py [--threshold 0.5] [--n-examples 200]
                                       [--skew-towards positive] [--skew 1.0]
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def generate_demo_dataset(
    n_examples: int,
    skew_towards: str,
    skew: float,
    separation: float = 0.3,
    seed: int = 0,
):
    """Draw Gaussian scores around 0.5 +- separation/2 for each class."""
    from thresholdviz.data import Observation, compute_num_examples

    sizes = compute_num_examples(n_examples, skew_towards, skew)
    rng = np.random.default_rng(seed)
    positives = rng.normal(0.5 + separation / 2, 0.15, int(sizes.num_positives))
    negatives = rng.normal(0.5 - separation / 2, 0.15, int(sizes.num_negatives))
    return (
        [Observation("positive", score) for score in positives]
        + [Observation("negative", score) for score in negatives]
    )


def main():
    parser = argparse.ArgumentParser(description="Threshold metrics report")
    parser.add_argument("--threshold", type=float, default=0.5, help="Decision threshold")
    parser.add_argument("--n-examples", type=int, default=200, help="Total examples")
    parser.add_argument(
        "--skew-towards",
        choices=["positive", "negative"],
        default="positive",
        help="Class whose share is divided by 1 + skew",
    )
    parser.add_argument("--skew", type=float, default=0.0, help="Class skew ratio")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    from thresholdviz.eval import compute_pr_curve, compute_roc_curve, operating_point

    data = generate_demo_dataset(args.n_examples, args.skew_towards, args.skew, seed=args.seed)
    point = operating_point(data, args.threshold)
    roc = compute_roc_curve(data)
    pr = compute_pr_curve(data)

    print()
    print("=" * 50)
    print(f"THRESHOLD REPORT ({len(data)} examples)")
    print("=" * 50)
    for key in ("tp", "fn", "fp", "tn"):
        print(f"  {key:<25} {getattr(point.matrix, key)}")
    for key, value in point.display().items():
        print(f"  {key:<25} {value}")
    print(f"  {'roc_auc':<25} {roc.auc:.4f}")
    print(f"  {'roc_auc_trapezoid':<25} {roc.trapezoid_auc():.4f}")
    print(f"  {'roc_points':<25} {len(roc.points)}")
    print(f"  {'pr_points':<25} {len(pr.points)}")
    print("=" * 50)


if __name__ == "__main__":
    main()
