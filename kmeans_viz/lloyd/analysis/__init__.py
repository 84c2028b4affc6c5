"""Cluster analysis helpers."""

from kmeans_viz.lloyd.analysis.statistics import (
    classify_activity,
    compute_cluster_statistics,
)

__all__ = ["classify_activity", "compute_cluster_statistics"]
