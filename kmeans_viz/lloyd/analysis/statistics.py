"""
Per-cluster customer statistics for a clustering snapshot.
"""

from __future__ import annotations

import pandas as pd

from kmeans_viz.config import (
    ACTIVITY_LABELS,
    LOW_ACTIVITY_MAX_RENTALS,
    MEDIUM_ACTIVITY_MAX_RENTALS,
)
from kmeans_viz.lloyd.core.models import ClusteringState
from kmeans_viz.lloyd.data.export import points_to_frame

STATISTICS_COLUMNS = ["cluster", "count", "avg_rentals", "avg_spending", "activity"]


def classify_activity(avg_rentals: float) -> str:
    """Label a segment by its average rentals: low (<10), medium (<20) or high."""
    if avg_rentals < LOW_ACTIVITY_MAX_RENTALS:
        return ACTIVITY_LABELS[0]
    if avg_rentals < MEDIUM_ACTIVITY_MAX_RENTALS:
        return ACTIVITY_LABELS[1]
    return ACTIVITY_LABELS[2]


def compute_cluster_statistics(state: ClusteringState) -> pd.DataFrame:
    """
    Summarize each non-empty cluster of a snapshot.

    Args:
        state: Snapshot to summarize.

    Returns:
        DataFrame with STATISTICS_COLUMNS, one row per cluster that has at
        least one member, ordered by cluster index. Empty if no point has
        been assigned yet.
    """
    df = points_to_frame(state.points)
    if df.empty:
        return pd.DataFrame(columns=STATISTICS_COLUMNS)

    assigned = df[(df["cluster"] >= 0) & (df["cluster"] < max(state.k, 1))]
    if assigned.empty:
        return pd.DataFrame(columns=STATISTICS_COLUMNS)

    stats = (
        assigned.groupby("cluster")
        .agg(
            count=("id", "size"),
            avg_rentals=("rentals", "mean"),
            avg_spending=("spending", "mean"),
        )
        .reset_index()
        .sort_values("cluster")
        .reset_index(drop=True)
    )
    stats["activity"] = stats["avg_rentals"].apply(classify_activity)
    return stats[STATISTICS_COLUMNS]


__all__ = ["STATISTICS_COLUMNS", "classify_activity", "compute_cluster_statistics"]
