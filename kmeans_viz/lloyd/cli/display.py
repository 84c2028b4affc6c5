"""
Display utilities for the k-means customer clustering CLI.

This module provides formatted display functions for the run configuration,
per-iteration centroids, the final status and cluster statistics.
"""

from typing import Optional, Sequence

import pandas as pd
from colorama import Fore, Style

from kmeans_viz.common.utils import (
    cluster_color,
    cluster_label,
    color_text,
    format_value,
    log_warn,
)
from kmeans_viz.lloyd.core.convergence import centroid_shifts
from kmeans_viz.lloyd.core.driver import ClusteringConfig
from kmeans_viz.lloyd.core.models import Centroid, ClusteringState, RunStatus


def display_configuration(config: ClusteringConfig, n_points: int, delay: float):
    """
    Display configuration information.

    Args:
        config: Clustering configuration
        n_points: Number of customers in the dataset
        delay: Pause between iterations in seconds
    """
    print("\n" + color_text("=" * 80, Fore.CYAN, Style.BRIGHT))
    print(color_text("CUSTOMER SEGMENTATION - K-MEANS CLUSTERING", Fore.CYAN, Style.BRIGHT))
    print(color_text("=" * 80, Fore.CYAN, Style.BRIGHT))
    print(color_text("Configuration:", Fore.WHITE))
    print(color_text(f"  Customers: {n_points}", Fore.WHITE))
    print(color_text(f"  Clusters (K): {config.k}", Fore.WHITE))
    print(color_text(f"  Max Iterations: {config.max_iterations}", Fore.WHITE))
    print(color_text(f"  Convergence Threshold: {config.threshold}", Fore.WHITE))
    seed_text = config.seed if config.seed is not None else "random"
    print(color_text(f"  Seed: {seed_text}", Fore.WHITE))
    print(color_text(f"  Step Delay: {delay}s", Fore.WHITE))
    print(color_text("=" * 80, Fore.CYAN, Style.BRIGHT))


def format_centroid(centroid: Centroid) -> str:
    """Colored 'Cluster N (rentals, spending)' text for one centroid."""
    text = (
        f"{cluster_label(centroid.index)} "
        f"({format_value(centroid.feature1, 1)}, {format_value(centroid.feature2, 2)})"
    )
    return color_text(text, cluster_color(centroid.index))


def display_iteration(
    state: ClusteringState,
    previous_centroids: Optional[Sequence[Centroid]] = None,
):
    """
    Display the centroids of one iteration and how far they moved.

    Args:
        state: Snapshot emitted by the driver
        previous_centroids: Centroids the iteration started from
    """
    print(color_text(f"\nIteration {state.iteration_count}", Fore.CYAN, Style.BRIGHT))
    for centroid in state.centroids:
        print("  " + format_centroid(centroid))

    if previous_centroids:
        shifts = centroid_shifts(previous_centroids, state.centroids)
        print(color_text(f"  Max centroid shift: {format_value(max(shifts), 4)}", Fore.WHITE))


def display_final_status(state: ClusteringState):
    """Display how the run ended."""
    print("\n" + color_text("-" * 80, Fore.CYAN))
    if state.status == RunStatus.CONVERGED:
        print(color_text(
            f"Converged after {state.iteration_count} iterations",
            Fore.GREEN,
            Style.BRIGHT,
        ))
    elif state.status == RunStatus.MAX_ITERATIONS_REACHED:
        suffix = " (reported as converged)" if state.converged else ""
        print(color_text(
            f"Stopped at the iteration cap ({state.iteration_count}) without converging{suffix}",
            Fore.YELLOW,
            Style.BRIGHT,
        ))
    elif state.status == RunStatus.STOPPED:
        log_warn(f"Run interrupted after {state.iteration_count} iterations")
    else:
        log_warn(f"Run not finished (status: {state.status.value})")
    print(color_text("-" * 80, Fore.CYAN))


def display_cluster_statistics(stats: pd.DataFrame):
    """
    Display per-cluster customer statistics.

    Args:
        stats: DataFrame from compute_cluster_statistics
    """
    print("\n" + color_text("CLUSTER ANALYSIS", Fore.MAGENTA, Style.BRIGHT))
    print(color_text("-" * 80, Fore.CYAN))

    if stats.empty:
        print(color_text("  No customers assigned yet", Fore.YELLOW))
        return

    for _, row in stats.iterrows():
        cluster = int(row["cluster"])
        color = cluster_color(cluster)
        print(color_text(cluster_label(cluster), color, Style.BRIGHT))
        print(color_text(f"  Customers: {int(row['count'])}", Fore.WHITE))
        print(color_text(f"  Avg Rentals: {format_value(row['avg_rentals'], 1)}", Fore.WHITE))
        print(color_text(f"  Avg Spending: ${format_value(row['avg_spending'], 2)}", Fore.WHITE))
        print(color_text(f"  {row['activity']}", color))


def display_points(state: ClusteringState):
    """List every customer with coordinates and cluster."""
    print("\n" + color_text("CUSTOMERS", Fore.MAGENTA, Style.BRIGHT))
    print(color_text("-" * 80, Fore.CYAN))
    for point in state.points:
        print(color_text(
            f"  Customer #{point.id:<4} | Rentals: {format_value(point.feature1, 1):>6} | "
            f"Spending: ${format_value(point.feature2, 2):>8} | {cluster_label(point.cluster_index)}",
            cluster_color(point.cluster_index),
        ))
