"""
Convergence check on centroid movement between iterations.
"""

from __future__ import annotations

from typing import Optional, Sequence

from kmeans_viz.config import DEFAULT_CONVERGENCE_THRESHOLD
from kmeans_viz.lloyd.core.distance import distance
from kmeans_viz.lloyd.core.models import Centroid
from kmeans_viz.lloyd.utils.validation import ClusteringError


def centroid_shifts(
    old_centroids: Sequence[Centroid], new_centroids: Sequence[Centroid]
) -> list[float]:
    """
    Distance moved by each centroid, matched by index.

    Raises:
        ClusteringError: If the two sets do not carry the same indices.
    """
    new_by_index = {c.index: c for c in new_centroids}
    old_indices = sorted(c.index for c in old_centroids)
    if old_indices != sorted(new_by_index) or len(new_by_index) != len(new_centroids):
        raise ClusteringError(
            f"centroid indices do not match: {old_indices} vs "
            f"{sorted(c.index for c in new_centroids)}"
        )
    return [distance(old, new_by_index[old.index]) for old in old_centroids]


def has_converged(
    old_centroids: Optional[Sequence[Centroid]],
    new_centroids: Sequence[Centroid],
    threshold: float = DEFAULT_CONVERGENCE_THRESHOLD,
) -> bool:
    """
    True when no centroid moved farther than `threshold`.

    The first iteration (no previous centroids) never converges.
    """
    if not old_centroids:
        return False
    return all(shift <= threshold for shift in centroid_shifts(old_centroids, new_centroids))


__all__ = ["centroid_shifts", "has_converged"]
