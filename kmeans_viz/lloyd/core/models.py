"""
Data model for the clustering engine.

Points and centroids are frozen dataclasses and snapshots hold tuples of them,
so a ClusteringState handed to a renderer can never change underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from kmeans_viz.config import UNASSIGNED_CLUSTER


@dataclass(frozen=True)
class Point:
    """A customer record: feature1 = total rentals, feature2 = total spending."""

    id: int
    feature1: float
    feature2: float
    cluster_index: int = UNASSIGNED_CLUSTER

    def with_cluster(self, cluster_index: int) -> "Point":
        """Return a copy of this point labelled with `cluster_index`."""
        return replace(self, cluster_index=cluster_index)

    @property
    def is_assigned(self) -> bool:
        return self.cluster_index != UNASSIGNED_CLUSTER


@dataclass(frozen=True)
class Centroid:
    """Cluster representative; `index` is its position in [0, k)."""

    index: int
    feature1: float
    feature2: float


class RunStatus(str, Enum):
    """Driver loop states."""

    IDLE = "idle"
    RUNNING = "running"
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "max_iterations_reached"
    STOPPED = "stopped"

    @property
    def is_terminal(self) -> bool:
        return self in (
            RunStatus.CONVERGED,
            RunStatus.MAX_ITERATIONS_REACHED,
            RunStatus.STOPPED,
        )


@dataclass(frozen=True)
class ClusteringState:
    """Snapshot of one driver iteration."""

    points: Tuple[Point, ...] = field(default_factory=tuple)
    centroids: Tuple[Centroid, ...] = field(default_factory=tuple)
    iteration_count: int = 0
    converged: bool = False
    status: RunStatus = RunStatus.IDLE

    @property
    def k(self) -> int:
        return len(self.centroids)

    @property
    def finished(self) -> bool:
        """True once the run reached a terminal status."""
        return self.status.is_terminal


__all__ = ["Point", "Centroid", "RunStatus", "ClusteringState"]
