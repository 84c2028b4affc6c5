"""
Tests for update module.
"""
import numpy as np
import pytest

from kmeans_viz.lloyd.core.models import Centroid, Point
from kmeans_viz.lloyd.core.update import update_centroids
from kmeans_viz.lloyd.utils.validation import ClusteringError


def _previous(k=2):
    return tuple(Centroid(index=i, feature1=100.0 + i, feature2=-100.0 - i) for i in range(k))


def test_update_mean_per_cluster():
    """Test centroids move to the per-feature mean of their members."""
    points = (
        Point(id=1, feature1=0.0, feature2=0.0, cluster_index=0),
        Point(id=2, feature1=0.0, feature2=1.0, cluster_index=0),
        Point(id=3, feature1=10.0, feature2=0.0, cluster_index=1),
        Point(id=4, feature1=10.0, feature2=1.0, cluster_index=1),
    )
    centroids = update_centroids(points, 2, _previous())

    assert (centroids[0].feature1, centroids[0].feature2) == pytest.approx((0.0, 0.5))
    assert (centroids[1].feature1, centroids[1].feature2) == pytest.approx((10.0, 0.5))


def test_update_mean_matches_numpy():
    """Test means within floating-point tolerance on random members."""
    rng = np.random.default_rng(0)
    coords = rng.uniform(-50, 50, size=(40, 2))
    labels = rng.integers(0, 3, size=40)
    points = tuple(
        Point(id=i, feature1=float(x), feature2=float(y), cluster_index=int(lbl))
        for i, ((x, y), lbl) in enumerate(zip(coords, labels))
    )
    centroids = update_centroids(points, 3, _previous(3))

    for i in range(3):
        members = coords[labels == i]
        if len(members) == 0:
            continue
        assert abs(centroids[i].feature1 - members[:, 0].mean()) <= 1e-9
        assert abs(centroids[i].feature2 - members[:, 1].mean()) <= 1e-9


def test_update_empty_cluster_freezes():
    """Test an empty cluster keeps its previous centroid exactly."""
    previous = _previous(3)
    points = (
        Point(id=1, feature1=1.0, feature2=1.0, cluster_index=0),
        Point(id=2, feature1=3.0, feature2=3.0, cluster_index=2),
    )
    centroids = update_centroids(points, 3, previous)

    assert centroids[1] == previous[1]
    assert centroids[0] != previous[0]
    assert centroids[2] != previous[2]


def test_update_all_clusters_empty():
    """Test that unassigned points leave every centroid frozen."""
    previous = _previous(2)
    points = (Point(id=1, feature1=1.0, feature2=1.0),)

    assert update_centroids(points, 2, previous) == previous


def test_update_output_ordered_by_index():
    """Test output order follows centroid index."""
    points = (
        Point(id=1, feature1=5.0, feature2=5.0, cluster_index=1),
        Point(id=2, feature1=1.0, feature2=1.0, cluster_index=0),
    )
    centroids = update_centroids(points, 2, _previous())

    assert [c.index for c in centroids] == [0, 1]


def test_update_returns_k_centroids():
    """Test that k centroids are always produced."""
    points = (Point(id=1, feature1=1.0, feature2=1.0, cluster_index=0),)

    assert len(update_centroids(points, 4, _previous(4))) == 4


def test_update_wrong_previous_count():
    """Test previous centroids must cover k."""
    with pytest.raises(ClusteringError, match="expected 3 centroids"):
        update_centroids((), 3, _previous(2))
