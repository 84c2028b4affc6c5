"""Validation helpers and error kinds."""

from kmeans_viz.lloyd.utils.validation import (
    ClusteringError,
    InvalidKError,
    EmptyDatasetError,
    validate_points,
    validate_k,
    validate_centroid_count,
)

__all__ = [
    "ClusteringError",
    "InvalidKError",
    "EmptyDatasetError",
    "validate_points",
    "validate_k",
    "validate_centroid_count",
]
