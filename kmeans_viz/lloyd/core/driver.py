"""
Driver loop for Lloyd's algorithm.

Runs assignment -> update -> convergence check one iteration at a time and
emits an immutable ClusteringState after each one. Iteration boundaries are
the only suspension points, so callers can pace consumption (e.g. animate
with a delay) without affecting the result.

States: IDLE -> RUNNING -> {CONVERGED, MAX_ITERATIONS_REACHED}, plus STOPPED
when an external stop signal is observed at an iteration boundary.
"""

from __future__ import annotations

import numbers
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from kmeans_viz.config import (
    DEFAULT_CONVERGENCE_THRESHOLD,
    DEFAULT_K,
    DEFAULT_MAX_ITERATIONS,
)
from kmeans_viz.lloyd.core.assignment import assign_clusters
from kmeans_viz.lloyd.core.convergence import has_converged
from kmeans_viz.lloyd.core.initializer import RandomLike, initialize_centroids, make_rng
from kmeans_viz.lloyd.core.models import Centroid, ClusteringState, Point, RunStatus
from kmeans_viz.lloyd.core.update import update_centroids
from kmeans_viz.lloyd.data.generator import generate_customers
from kmeans_viz.lloyd.utils.validation import (
    validate_centroid_count,
    validate_k,
    validate_points,
)


@dataclass
class ClusteringConfig:
    """Configuration for a k-means run."""

    k: int = DEFAULT_K  # Number of clusters
    max_iterations: int = DEFAULT_MAX_ITERATIONS  # Hard cap on iterations
    threshold: float = DEFAULT_CONVERGENCE_THRESHOLD  # Max centroid shift for convergence

    # Report MAX_ITERATIONS_REACHED as converged=True on snapshots
    report_max_iterations_as_converged: bool = False

    seed: Optional[int] = None  # Seed for data generation and initialization

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.k, bool) or not isinstance(self.k, numbers.Integral) or self.k < 1:
            raise ValueError(f"k must be a positive integer, got {self.k}")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )
        if self.threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {self.threshold}")


def create_clustering_config_from_dict(params: Dict[str, Any]) -> ClusteringConfig:
    """
    Create ClusteringConfig from a dictionary of parameters.

    Args:
        params: Dictionary containing clustering parameters

    Returns:
        ClusteringConfig instance with parameters from dict
    """
    return ClusteringConfig(
        k=params.get("k", DEFAULT_K),
        max_iterations=params.get("max_iterations", DEFAULT_MAX_ITERATIONS),
        threshold=params.get("threshold", DEFAULT_CONVERGENCE_THRESHOLD),
        report_max_iterations_as_converged=params.get(
            "report_max_iterations_as_converged", False
        ),
        seed=params.get("seed"),
    )


class KMeansDriver:
    """Step-by-step Lloyd's algorithm over a customer point set."""

    def __init__(
        self,
        config: Optional[ClusteringConfig] = None,
        points: Optional[Sequence[Point]] = None,
        rng: RandomLike = None,
    ):
        """
        Initialize the driver in the IDLE state.

        Args:
            config: Run configuration (default: ClusteringConfig()).
            points: Dataset to cluster. Generated from the demo segments if None.
            rng: Seed or numpy Generator; falls back to `config.seed`.
        """
        self.config = config or ClusteringConfig()
        self.rng = make_rng(rng if rng is not None else self.config.seed)
        self._stop_event = threading.Event()

        if points is None:
            points = generate_customers(self.rng)
        self.points: tuple[Point, ...] = tuple(points)
        self.centroids: tuple[Centroid, ...] = ()
        self.iteration_count = 0
        self.status = RunStatus.IDLE

    @property
    def k(self) -> int:
        return self.config.k

    @property
    def stop_requested(self) -> bool:
        return self._stop_event.is_set()

    def snapshot(self) -> ClusteringState:
        """Current state as an immutable snapshot."""
        return ClusteringState(
            points=self.points,
            centroids=self.centroids,
            iteration_count=self.iteration_count,
            converged=self._reported_converged(),
            status=self.status,
        )

    def _reported_converged(self) -> bool:
        if self.status == RunStatus.CONVERGED:
            return True
        return (
            self.status == RunStatus.MAX_ITERATIONS_REACHED
            and self.config.report_max_iterations_as_converged
        )

    def reset(self, points: Optional[Sequence[Point]] = None) -> ClusteringState:
        """
        Return to IDLE with a fresh dataset.

        Args:
            points: Replacement dataset; regenerated from the driver's rng if None.
        """
        if points is None:
            points = generate_customers(self.rng)
        self.points = tuple(points)
        self.centroids = ()
        self.iteration_count = 0
        self.status = RunStatus.IDLE
        self._stop_event.clear()
        return self.snapshot()

    def start(
        self, initial_centroids: Optional[Sequence[Centroid]] = None
    ) -> ClusteringState:
        """
        Seed centroids and enter RUNNING.

        Args:
            initial_centroids: Explicit starting centroids. Sampled from the
                points with the driver's rng if None.

        Raises:
            EmptyDatasetError: If there are no points.
            InvalidKError: If k is out of range for the dataset.
            ClusteringError: If `initial_centroids` is not k entries indexed 0..k-1.
            RuntimeError: If the driver is not IDLE.
        """
        if self.status != RunStatus.IDLE:
            raise RuntimeError(f"cannot start from state {self.status.value}")

        validate_points(self.points)
        validate_k(self.k, len(self.points))
        if initial_centroids is None:
            centroids = initialize_centroids(self.points, self.k, self.rng)
        else:
            validate_centroid_count(initial_centroids, self.k)
            centroids = tuple(initial_centroids)

        self.centroids = centroids
        self.iteration_count = 0
        self.status = RunStatus.RUNNING
        return self.snapshot()

    def step(self) -> ClusteringState:
        """
        Run one assignment/update iteration and return its snapshot.

        Raises:
            RuntimeError: If the driver is not RUNNING.
        """
        if self.status != RunStatus.RUNNING:
            raise RuntimeError(f"cannot step from state {self.status.value}")

        old_centroids = self.centroids
        self.points = assign_clusters(self.points, old_centroids)
        self.centroids = update_centroids(self.points, self.k, old_centroids)
        self.iteration_count += 1

        if has_converged(old_centroids, self.centroids, self.config.threshold):
            self.status = RunStatus.CONVERGED
        elif self.iteration_count >= self.config.max_iterations:
            self.status = RunStatus.MAX_ITERATIONS_REACHED

        return self.snapshot()

    def stop(self) -> None:
        """Request a halt; honored at the next iteration boundary."""
        self._stop_event.set()

    def run(self) -> Iterator[ClusteringState]:
        """
        Yield one snapshot per iteration until a terminal state.

        Starts the run first when the driver is IDLE. A stop request is checked
        before each iteration; once seen, the driver moves to STOPPED and
        nothing more is yielded.
        """
        if self.status == RunStatus.IDLE:
            self.start()

        while self.status == RunStatus.RUNNING:
            if self._stop_event.is_set():
                self.status = RunStatus.STOPPED
                return
            yield self.step()


def run_kmeans(
    points: Sequence[Point],
    config: Optional[ClusteringConfig] = None,
    rng: RandomLike = None,
    initial_centroids: Optional[Sequence[Centroid]] = None,
) -> List[ClusteringState]:
    """Convenience function returning every snapshot of a complete run."""
    driver = KMeansDriver(config=config, points=points, rng=rng)
    driver.start(initial_centroids)
    return list(driver.run())


__all__ = [
    "ClusteringConfig",
    "create_clustering_config_from_dict",
    "KMeansDriver",
    "run_kmeans",
]
