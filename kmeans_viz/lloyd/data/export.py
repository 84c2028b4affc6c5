"""
Tabular views of clustering snapshots and CSV export.

Columns use the customer vocabulary: feature1 is `rentals`, feature2 is
`spending`. Cluster indices stay 0-based (-1 for unassigned).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from kmeans_viz.lloyd.core.models import Centroid, ClusteringState, Point

POINT_COLUMNS = ["id", "rentals", "spending", "cluster"]
CENTROID_COLUMNS = ["cluster", "rentals", "spending"]


def points_to_frame(points: Sequence[Point]) -> pd.DataFrame:
    """Points as a DataFrame with POINT_COLUMNS, in input order."""
    if len(points) == 0:
        return pd.DataFrame(columns=POINT_COLUMNS)
    return pd.DataFrame(
        [(p.id, p.feature1, p.feature2, p.cluster_index) for p in points],
        columns=POINT_COLUMNS,
    )


def centroids_to_frame(centroids: Sequence[Centroid]) -> pd.DataFrame:
    """Centroids as a DataFrame with CENTROID_COLUMNS, ordered by index."""
    if len(centroids) == 0:
        return pd.DataFrame(columns=CENTROID_COLUMNS)
    return pd.DataFrame(
        [(c.index, c.feature1, c.feature2) for c in centroids],
        columns=CENTROID_COLUMNS,
    )


def export_state_csv(state: ClusteringState, path: Union[str, Path]) -> Path:
    """
    Write the points of a snapshot to CSV.

    Returns:
        The path written to. Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    points_to_frame(state.points).to_csv(path, index=False)
    return path


__all__ = [
    "POINT_COLUMNS",
    "CENTROID_COLUMNS",
    "points_to_frame",
    "centroids_to_frame",
    "export_state_csv",
]
