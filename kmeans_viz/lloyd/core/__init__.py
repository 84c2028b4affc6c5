"""Core clustering calculation modules."""

from kmeans_viz.lloyd.core.models import (
    Point,
    Centroid,
    RunStatus,
    ClusteringState,
)
from kmeans_viz.lloyd.core.distance import distance, pairwise_distances
from kmeans_viz.lloyd.core.initializer import initialize_centroids
from kmeans_viz.lloyd.core.assignment import assign_clusters
from kmeans_viz.lloyd.core.update import update_centroids
from kmeans_viz.lloyd.core.convergence import has_converged
from kmeans_viz.lloyd.core.driver import (
    ClusteringConfig,
    KMeansDriver,
    create_clustering_config_from_dict,
    run_kmeans,
)

__all__ = [
    "Point",
    "Centroid",
    "RunStatus",
    "ClusteringState",
    "distance",
    "pairwise_distances",
    "initialize_centroids",
    "assign_clusters",
    "update_centroids",
    "has_converged",
    "ClusteringConfig",
    "KMeansDriver",
    "create_clustering_config_from_dict",
    "run_kmeans",
]
