"""
Assignment step: label every point with its nearest centroid.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from kmeans_viz.lloyd.core.distance import pairwise_distances
from kmeans_viz.lloyd.core.models import Centroid, Point
from kmeans_viz.lloyd.utils.validation import ClusteringError


def nearest_centroid_indices(
    points: Sequence[Point], centroids: Sequence[Centroid]
) -> np.ndarray:
    """
    Index of the closest centroid for each point.

    np.argmin returns the first minimum, so equidistant centroids resolve to
    the lowest position in `centroids`.
    """
    if len(points) == 0:
        return np.empty(0, dtype=int)
    distances = pairwise_distances(points, centroids)
    return np.argmin(distances, axis=1)


def assign_clusters(
    points: Sequence[Point], centroids: Sequence[Centroid]
) -> Tuple[Point, ...]:
    """
    Return new points labelled with the index of their nearest centroid.

    Point order is preserved and the inputs are left untouched.

    Raises:
        ClusteringError: If there are points but no centroids.
    """
    if len(points) > 0 and len(centroids) == 0:
        raise ClusteringError("cannot assign points without centroids")

    nearest = nearest_centroid_indices(points, centroids)
    return tuple(
        point.with_cluster(centroids[int(pos)].index)
        for point, pos in zip(points, nearest)
    )


__all__ = ["nearest_centroid_indices", "assign_clusters"]
