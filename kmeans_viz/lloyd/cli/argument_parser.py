"""
Command-line argument parser for the k-means customer clustering animation.

This module provides the main argument parser, defining all command-line
options and their default values.
"""

import argparse

from kmeans_viz.config import (
    DEFAULT_CONVERGENCE_THRESHOLD,
    DEFAULT_K,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_STEP_DELAY,
    K_MAX,
    K_MIN,
)


def parse_args(argv=None):
    """Parse command-line arguments for k-means customer clustering."""
    parser = argparse.ArgumentParser(
        description="K-Means Customer Segmentation (Lloyd's algorithm, step by step)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Clustering parameters
    parser.add_argument(
        "--k",
        type=int,
        default=DEFAULT_K,
        help=f"Number of clusters, clamped to [{K_MIN}, {K_MAX}] (default: {DEFAULT_K})",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        dest="max_iterations",
        help=f"Maximum Lloyd iterations (default: {DEFAULT_MAX_ITERATIONS})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_CONVERGENCE_THRESHOLD,
        help=f"Centroid shift counted as converged (default: {DEFAULT_CONVERGENCE_THRESHOLD})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for data generation and initialization (default: random)",
    )
    parser.add_argument(
        "--collapse-status",
        action="store_true",
        dest="collapse_status",
        help="Report hitting the iteration cap as converged",
    )

    # Display options
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_STEP_DELAY,
        help=f"Seconds to pause between iterations (default: {DEFAULT_STEP_DELAY})",
    )
    parser.add_argument(
        "--no-animation",
        action="store_true",
        dest="no_animation",
        help="Only show the final result, without per-iteration output or delay",
    )
    parser.add_argument(
        "--show-points",
        action="store_true",
        dest="show_points",
        help="List every customer with its cluster at the end",
    )
    parser.add_argument(
        "--export",
        type=str,
        default=None,
        help="Write the final customer assignments to this CSV file",
    )

    return parser.parse_args(argv)
