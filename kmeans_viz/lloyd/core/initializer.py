"""
Centroid initialization by sampling points without replacement.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from kmeans_viz.lloyd.core.models import Centroid, Point
from kmeans_viz.lloyd.utils.validation import validate_k, validate_points

RandomLike = Union[None, int, np.random.Generator]


def make_rng(rng: RandomLike = None) -> np.random.Generator:
    """
    Normalize a seed or generator into a numpy Generator.

    Args:
        rng: None (fresh entropy), an int seed, or an existing Generator
            (returned as is so callers can share one stream).
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def initialize_centroids(
    points: Sequence[Point],
    k: int,
    rng: RandomLike = None,
) -> Tuple[Centroid, ...]:
    """
    Pick k distinct points as starting centroids.

    Positions are drawn uniformly at random without replacement. Each centroid
    takes its draw order as `index` and copies the point's coordinates. Two
    centroids can still coincide when the dataset holds duplicate coordinates.

    Args:
        points: Dataset to sample from. Not modified.
        k: Number of centroids, 1 <= k <= len(points).
        rng: Seed or numpy Generator for the draw.

    Returns:
        Tuple of k centroids ordered by index.

    Raises:
        EmptyDatasetError: If `points` is empty.
        InvalidKError: If k is out of range.
    """
    validate_points(points)
    validate_k(k, len(points))

    generator = make_rng(rng)
    drawn = generator.choice(len(points), size=k, replace=False)

    return tuple(
        Centroid(
            index=i,
            feature1=points[int(pos)].feature1,
            feature2=points[int(pos)].feature2,
        )
        for i, pos in enumerate(drawn)
    )


__all__ = ["make_rng", "initialize_centroids"]
