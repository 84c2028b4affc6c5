"""
Update step: move each centroid to the mean of its members.

Empty clusters freeze: their centroid is carried over unchanged from the
previous iteration instead of being re-seeded or dropped.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from kmeans_viz.lloyd.core.distance import features_array
from kmeans_viz.lloyd.core.models import Centroid, Point
from kmeans_viz.lloyd.utils.validation import validate_centroid_count


def update_centroids(
    points: Sequence[Point],
    k: int,
    previous_centroids: Sequence[Centroid],
) -> Tuple[Centroid, ...]:
    """
    Recompute the k centroids from assigned points.

    Args:
        points: Points after an assignment step.
        k: Number of clusters.
        previous_centroids: Centroids of the previous iteration, ordered by index.

    Returns:
        Tuple of k centroids ordered by index.

    Raises:
        ClusteringError: If `previous_centroids` does not hold exactly k entries.
    """
    validate_centroid_count(previous_centroids, k)

    coords = features_array(points)
    labels = np.array([p.cluster_index for p in points], dtype=int)

    new_centroids = []
    for i in range(k):
        members = coords[labels == i]
        if len(members) == 0:
            new_centroids.append(previous_centroids[i])
            continue
        mean_1, mean_2 = members.mean(axis=0)
        new_centroids.append(
            Centroid(index=i, feature1=float(mean_1), feature2=float(mean_2))
        )

    return tuple(new_centroids)


__all__ = ["update_centroids"]
