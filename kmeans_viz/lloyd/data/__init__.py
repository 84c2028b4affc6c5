"""Synthetic customer data and snapshot tables."""

from kmeans_viz.lloyd.data.generator import generate_customers
from kmeans_viz.lloyd.data.export import (
    points_to_frame,
    centroids_to_frame,
    export_state_csv,
)

__all__ = [
    "generate_customers",
    "points_to_frame",
    "centroids_to_frame",
    "export_state_csv",
]
