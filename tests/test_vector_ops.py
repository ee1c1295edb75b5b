import numpy as np
import pytest

from polytope4d.vector_ops import (
    angular_order,
    centroid,
    distance_squared,
    rotate_point,
    rotate_points,
    sort_by_angle_around_centroid,
    sort_polygon_points_3d,
)


def test_distance_squared_single_points():
    assert distance_squared((0, 0, 0, 0), (1, 2, 2, 0)) == pytest.approx(9.0)


def test_distance_squared_broadcasts():
    points = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [2.0, 0.0, 0.0]])
    np.testing.assert_allclose(distance_squared(points, np.zeros(3)), [0.0, 3.0, 4.0])


def test_rotate_point_zero_rotation_is_identity():
    point = np.array([0.2, 0.7, 0.9])
    np.testing.assert_allclose(rotate_point(point, (0, 0, 0), (0.5, 0.5, 0.5)), point)


def test_rotate_point_quarter_turn_about_center():
    rotated = rotate_point((1.0, 0.5, 0.5), (0, 0, np.pi / 2), (0.5, 0.5, 0.5))
    np.testing.assert_allclose(rotated, [0.5, 1.0, 0.5], atol=1e-12)


def test_rotate_point_composes_x_after_y_after_z():
    # Rx(90) . Ry(90) sends +X to +Y; the reverse order would give -Z
    rotated = rotate_point((1.0, 0.0, 0.0), (np.pi / 2, np.pi / 2, 0), (0, 0, 0))
    np.testing.assert_allclose(rotated, [0.0, 1.0, 0.0], atol=1e-12)


def test_rotate_point_matches_batch():
    points = np.random.default_rng(3).uniform(size=(5, 3))
    rotation = (0.3, -1.2, 2.2)
    batch = rotate_points(points, rotation, (0.5, 0.5, 0.5))
    for point, expected in zip(points, batch):
        np.testing.assert_array_equal(rotate_point(point, rotation, (0.5, 0.5, 0.5)), expected)


def test_rotation_preserves_distance_to_center():
    center = np.array([0.5, 0.5, 0.5])
    points = np.random.default_rng(0).uniform(size=(10, 3))
    rotated = rotate_points(points, (0.4, 1.3, -0.8), center)
    np.testing.assert_allclose(distance_squared(rotated, center), distance_squared(points, center))


def test_centroid():
    np.testing.assert_allclose(centroid([[0, 0], [2, 0], [2, 2], [0, 2]]), [1, 1])


def test_angular_order_square():
    points = np.array([[1, 1], [0, 0], [1, 0], [0, 1]], dtype=float)
    np.testing.assert_array_equal(angular_order(points), [1, 2, 0, 3])


def test_angular_order_empty():
    assert len(angular_order(np.zeros((0, 2)))) == 0


def test_sort_by_angle_around_centroid_counter_clockwise():
    angles = np.array([2.0, -1.0, 0.5, -2.5, 1.2])
    points = np.stack([np.cos(angles), np.sin(angles)], axis=1) + [3.0, -1.0]
    ordered = sort_by_angle_around_centroid(points)

    # Same cyclic order as sorting by angle around the circle centre
    expected = points[np.argsort(angles)]
    start = int(np.argmin(np.sum((expected - ordered[0]) ** 2, axis=1)))
    np.testing.assert_allclose(ordered, np.roll(expected, -start, axis=0))


def test_sort_polygon_points_3d_walks_the_boundary():
    square = np.array([
        [0, 0, 0.3], [1, 1, 0.3], [1, 0, 0.3], [0, 1, 0.3],
    ], dtype=float)
    ordered = sort_polygon_points_3d(square)
    sides = np.linalg.norm(ordered - np.roll(ordered, -1, axis=0), axis=1)
    np.testing.assert_allclose(sides, 1.0)


def test_sort_polygon_points_3d_short_input_unchanged():
    points = np.array([[0, 0, 0], [1, 0, 0]], dtype=float)
    np.testing.assert_array_equal(sort_polygon_points_3d(points), points)
