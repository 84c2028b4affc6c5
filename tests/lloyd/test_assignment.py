"""
Tests for assignment module.
"""
import pytest

from kmeans_viz.lloyd.core.assignment import assign_clusters, nearest_centroid_indices
from kmeans_viz.lloyd.core.models import Centroid, Point
from kmeans_viz.lloyd.utils.validation import ClusteringError


def _square_points():
    """Two pairs of points far apart on feature1."""
    return (
        Point(id=1, feature1=0.0, feature2=0.0),
        Point(id=2, feature1=0.0, feature2=1.0),
        Point(id=3, feature1=10.0, feature2=0.0),
        Point(id=4, feature1=10.0, feature2=1.0),
    )


def _two_centroids():
    return (
        Centroid(index=0, feature1=0.0, feature2=0.0),
        Centroid(index=1, feature1=10.0, feature2=0.0),
    )


def test_assign_nearest_centroid():
    """Test points go to the closest centroid."""
    assigned = assign_clusters(_square_points(), _two_centroids())

    assert [p.cluster_index for p in assigned] == [0, 0, 1, 1]


def test_assign_preserves_order_and_ids():
    """Test point order and identity fields are unchanged."""
    points = _square_points()
    assigned = assign_clusters(points, _two_centroids())

    assert [p.id for p in assigned] == [p.id for p in points]
    assert [(p.feature1, p.feature2) for p in assigned] == [
        (p.feature1, p.feature2) for p in points
    ]


def test_assign_does_not_mutate_inputs():
    """Test the input points keep their cluster index."""
    points = _square_points()
    assign_clusters(points, _two_centroids())

    assert all(p.cluster_index == -1 for p in points)


def test_assign_returns_new_collection():
    """Test a new tuple is returned."""
    points = _square_points()
    assigned = assign_clusters(points, _two_centroids())

    assert assigned is not points
    assert isinstance(assigned, tuple)


def test_assign_tie_breaks_to_lowest_index():
    """Test an equidistant point goes to the first centroid."""
    point = (Point(id=1, feature1=5.0, feature2=0.0),)
    centroids = (
        Centroid(index=0, feature1=0.0, feature2=0.0),
        Centroid(index=1, feature1=10.0, feature2=0.0),
    )

    assert assign_clusters(point, centroids)[0].cluster_index == 0


def test_assign_tie_between_coincident_centroids():
    """Test coincident centroids resolve to the lowest index."""
    point = (Point(id=1, feature1=3.0, feature2=3.0),)
    centroids = (
        Centroid(index=0, feature1=9.0, feature2=9.0),
        Centroid(index=1, feature1=1.0, feature2=1.0),
        Centroid(index=2, feature1=1.0, feature2=1.0),
    )

    assert assign_clusters(point, centroids)[0].cluster_index == 1


def test_assign_idempotent():
    """Test re-assigning with the same centroids changes nothing."""
    centroids = (
        Centroid(index=0, feature1=2.0, feature2=2.0),
        Centroid(index=1, feature1=7.0, feature2=-1.0),
        Centroid(index=2, feature1=4.0, feature2=9.0),
    )
    points = tuple(
        Point(id=i, feature1=float(i % 9), feature2=float((i * 7) % 11)) for i in range(30)
    )
    first = assign_clusters(points, centroids)
    second = assign_clusters(first, centroids)

    assert [p.cluster_index for p in first] == [p.cluster_index for p in second]


def test_assign_indices_in_range():
    """Test all labels fall in [0, k)."""
    centroids = (
        Centroid(index=0, feature1=0.0, feature2=0.0),
        Centroid(index=1, feature1=50.0, feature2=50.0),
    )
    points = tuple(Point(id=i, feature1=float(i), feature2=float(i)) for i in range(60))

    assert all(0 <= p.cluster_index < 2 for p in assign_clusters(points, centroids))


def test_assign_empty_points():
    """Test assigning no points returns an empty tuple."""
    assert assign_clusters((), _two_centroids()) == ()
    assert len(nearest_centroid_indices((), _two_centroids())) == 0


def test_assign_without_centroids_raises():
    """Test assignment requires centroids."""
    with pytest.raises(ClusteringError, match="without centroids"):
        assign_clusters(_square_points(), ())
