"""
Lloyd's Algorithm (K-Means) Module.

Clusters rental-store customers on two features (total rentals, total
spending) and exposes every iteration as an immutable snapshot, so a
presentation layer can animate how centroids settle.

Key design decisions:
  - Centroids are seeded by sampling k distinct points (no k-means++).
  - Nearest-centroid ties resolve to the lowest centroid index.
  - Empty clusters keep their previous centroid instead of being re-seeded.
  - Hitting the iteration cap is a separate terminal status from converging;
    callers can opt in to reporting it as converged.

Notes:
  - The driver is a plain generator. Pacing (e.g. a delay between frames)
    belongs to the caller and never changes the result.
"""

from kmeans_viz.lloyd.core.driver import (
    ClusteringConfig,
    KMeansDriver,
    run_kmeans,
)
from kmeans_viz.lloyd.core.models import ClusteringState, RunStatus

__all__ = [
    "ClusteringConfig",
    "KMeansDriver",
    "run_kmeans",
    "ClusteringState",
    "RunStatus",
]
