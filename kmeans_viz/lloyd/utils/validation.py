"""
Error kinds and argument validation for the clustering engine.

All errors here signal a caller contract violation; they are raised before
any iteration runs and are never retried.
"""

from __future__ import annotations

import numbers
from typing import Sequence


class ClusteringError(ValueError):
    """Base class for clustering contract violations."""


class InvalidKError(ClusteringError):
    """Raised when k < 1 or k exceeds the number of available points."""

    def __init__(self, k: int, n_points: int):
        self.k = k
        self.n_points = n_points
        super().__init__(
            f"k must be in [1, {n_points}] for {n_points} points, got {k}"
        )


class EmptyDatasetError(ClusteringError):
    """Raised when there are no points to form centroids from."""

    def __init__(self):
        super().__init__("cannot cluster an empty point set")


def validate_points(points: Sequence) -> None:
    """Raise EmptyDatasetError if `points` is None or empty."""
    if points is None or len(points) == 0:
        raise EmptyDatasetError()


def validate_k(k: int, n_points: int) -> None:
    """
    Check that `k` clusters can be seeded from `n_points` points.

    Raises:
        EmptyDatasetError: If n_points is 0.
        InvalidKError: If k < 1 or k > n_points.
    """
    if n_points == 0:
        raise EmptyDatasetError()
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidKError(k, n_points)
    if k < 1 or k > n_points:
        raise InvalidKError(k, n_points)


def validate_centroid_count(centroids: Sequence, k: int) -> None:
    """
    Raise ClusteringError unless exactly `k` centroids are given, indexed 0..k-1 in order.
    """
    if centroids is None or len(centroids) != k:
        got = 0 if centroids is None else len(centroids)
        raise ClusteringError(f"expected {k} centroids, got {got}")
    indices = [c.index for c in centroids]
    if indices != list(range(k)):
        raise ClusteringError(
            f"centroid indices must be 0..{k - 1} in order, got {indices}"
        )


__all__ = [
    "ClusteringError",
    "InvalidKError",
    "EmptyDatasetError",
    "validate_points",
    "validate_k",
    "validate_centroid_count",
]
