"""
Tests for distance module.
"""
import numpy as np
import pytest

from kmeans_viz.lloyd.core.distance import distance, features_array, pairwise_distances
from kmeans_viz.lloyd.core.models import Centroid, Point


def test_distance_basic():
    """Test 3-4-5 triangle distance."""
    a = Point(id=1, feature1=0.0, feature2=0.0)
    b = Point(id=2, feature1=3.0, feature2=4.0)

    assert distance(a, b) == pytest.approx(5.0)


def test_distance_symmetric():
    """Test distance(a, b) == distance(b, a)."""
    a = Point(id=1, feature1=1.5, feature2=-7.25)
    b = Centroid(index=0, feature1=-3.0, feature2=12.0)

    assert distance(a, b) == distance(b, a)


def test_distance_zero_for_same_coordinates():
    """Test distance is zero only when both coordinates match."""
    a = Point(id=1, feature1=2.0, feature2=3.0)
    same = Centroid(index=0, feature1=2.0, feature2=3.0)
    other = Centroid(index=1, feature1=2.0, feature2=3.5)

    assert distance(a, same) == 0.0
    assert distance(a, other) > 0.0


def test_distance_ignores_id_and_cluster():
    """Test that only the features matter."""
    a = Point(id=1, feature1=1.0, feature2=1.0, cluster_index=0)
    b = Point(id=99, feature1=1.0, feature2=1.0, cluster_index=3)

    assert distance(a, b) == 0.0


def test_features_array_shape():
    """Test features_array stacks (feature1, feature2)."""
    points = [Point(id=1, feature1=1.0, feature2=2.0), Point(id=2, feature1=3.0, feature2=4.0)]
    arr = features_array(points)

    assert arr.shape == (2, 2)
    np.testing.assert_array_equal(arr, [[1.0, 2.0], [3.0, 4.0]])


def test_features_array_empty():
    """Test features_array on an empty sequence."""
    assert features_array([]).shape == (0, 2)


def test_pairwise_distances_matches_scalar_distance():
    """Test the vectorized matrix agrees with distance()."""
    points = [
        Point(id=1, feature1=0.0, feature2=0.0),
        Point(id=2, feature1=5.0, feature2=1.0),
        Point(id=3, feature1=-2.0, feature2=8.0),
    ]
    centroids = [
        Centroid(index=0, feature1=1.0, feature2=1.0),
        Centroid(index=1, feature1=10.0, feature2=-4.0),
    ]
    matrix = pairwise_distances(points, centroids)

    assert matrix.shape == (3, 2)
    for i, p in enumerate(points):
        for j, c in enumerate(centroids):
            assert matrix[i, j] == pytest.approx(distance(p, c), abs=1e-12)
