"""
Small fixed-dimension vector arithmetic shared by every other module.

Points are plain numpy arrays of shape (3,) or (4,), or stacks of them with
shape (N, 3) / (N, 4). Nothing here takes a square root unless it has to:
equality and adjacency tests work on squared distances.

Euler rotations follow the composition R = Rx(a) · Ry(b) · Rz(c) applied to the
column vector, which is scipy's intrinsic 'XYZ' sequence. Cross-sections of a
rotated cube are sensitive to this order, so it must not be swapped for the
extrinsic 'xyz' sequence.
"""

import numpy as np
from typing import Sequence
from scipy.spatial.transform import Rotation

EULER_SEQUENCE = 'XYZ'


def distance_squared(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Sum of squared per-component differences over the last axis.

    Args:
        a: (..., D) array
        b: (..., D) array, broadcastable against `a`

    Returns:
        (...) array of squared distances (a float for two single points)
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return np.sum(diff * diff, axis=-1)


def euler_rotation(rotation: Sequence[float]) -> Rotation:
    """Rotation object for an (a, b, c) Euler triple in radians."""
    return Rotation.from_euler(EULER_SEQUENCE, np.asarray(rotation, dtype=float))


def rotate_points(points: np.ndarray,
                  rotation: Sequence[float],
                  center: Sequence[float]) -> np.ndarray:
    """Rotate 3D points about `center` by an Euler triple.

    Args:
        points: (N, 3) array of points
        rotation: (a, b, c) angles in radians about X, Y and Z
        center: (3,) pivot point

    Returns:
        (N, 3) array of rotated points
    """
    points = np.atleast_2d(np.asarray(points, dtype=float))
    center = np.asarray(center, dtype=float)
    return euler_rotation(rotation).apply(points - center) + center


def rotate_point(point: Sequence[float],
                 rotation: Sequence[float],
                 center: Sequence[float]) -> np.ndarray:
    """Rotate a single 3D point about `center`; see `rotate_points`."""
    return rotate_points(np.asarray(point, dtype=float)[None, :], rotation, center)[0]


def centroid(points: np.ndarray) -> np.ndarray:
    """Arithmetic mean of a stack of points."""
    return np.mean(np.asarray(points, dtype=float), axis=0)


def angular_order(points: np.ndarray) -> np.ndarray:
    """Indices that sort 2D points by angle around their centroid.

    Angles come from atan2(y - cy, x - cx) and are sorted ascending with a
    stable sort, so points at equal angles keep their discovery order. For
    points on the boundary of a convex polygon this yields a simple
    (non-crossing) cycle.

    Args:
        points: (N, 2) array; extra columns are ignored

    Returns:
        (N,) integer array of indices
    """
    points = np.asarray(points, dtype=float)
    if len(points) == 0:
        return np.zeros(0, dtype=int)
    center = centroid(points[:, :2])
    angles = np.arctan2(points[:, 1] - center[1], points[:, 0] - center[0])
    return np.argsort(angles, kind='stable')


def sort_by_angle_around_centroid(points: np.ndarray) -> np.ndarray:
    """Return `points` reordered counter-clockwise around their centroid."""
    points = np.asarray(points, dtype=float)
    return points[angular_order(points)]


def sort_polygon_points_3d(points: np.ndarray) -> np.ndarray:
    """Order coplanar 3D points around their centroid.

    A local 2D frame is built in the plane of the points: `u` points from the
    centroid to the first point and `v = normal x u`, where the normal comes
    from the first three points. Each point is then sorted by its angle in
    that frame.

    Args:
        points: (N, 3) array of coplanar points

    Returns:
        (N, 3) array in cyclic order (unchanged when N < 3)
    """
    points = np.asarray(points, dtype=float)
    if len(points) < 3:
        return points

    center = centroid(points)
    normal = np.cross(points[1] - points[0], points[2] - points[0])
    normal = normal / np.linalg.norm(normal)

    u = points[0] - center
    u = u / np.linalg.norm(u)
    v = np.cross(normal, u)
    v = v / np.linalg.norm(v)

    relative = points - center
    angles = np.arctan2(relative @ v, relative @ u)
    return points[np.argsort(angles, kind='stable')]
