"""
Euclidean distance over the two customer features.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from kmeans_viz.lloyd.core.models import Centroid, Point

Record = Union[Point, Centroid]


def distance(a: Record, b: Record) -> float:
    """Euclidean distance between two records over (feature1, feature2)."""
    d1 = a.feature1 - b.feature1
    d2 = a.feature2 - b.feature2
    return float(np.sqrt(d1 * d1 + d2 * d2))


def features_array(records: Sequence[Record]) -> np.ndarray:
    """Stack records into an (n, 2) float array of (feature1, feature2)."""
    if len(records) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([(r.feature1, r.feature2) for r in records], dtype=float)


def pairwise_distances(
    points: Sequence[Record], centroids: Sequence[Record]
) -> np.ndarray:
    """
    Distance matrix between points and centroids.

    Uses the same formula as `distance`, broadcast over all pairs.

    Returns:
        Array of shape (len(points), len(centroids)).
    """
    p = features_array(points)
    c = features_array(centroids)
    diff = p[:, np.newaxis, :] - c[np.newaxis, :, :]
    d1 = diff[:, :, 0]
    d2 = diff[:, :, 1]
    return np.sqrt(d1 * d1 + d2 * d2)


__all__ = ["distance", "features_array", "pairwise_distances"]
