"""
Cross-section of a rotated unit cube by a horizontal plane z = const.

The cube [0, 1]^3 is rotated about its centre by an Euler triple, then cut by
the plane at `slice_coordinate` on the world Z axis. The result is the cut
polygon as a cycle of 2D points, each carrying the colour of the cube face on
which the polygon edge starting at that point lies.

Possible outcomes:
- 0 points: the plane misses the cube
- 1 point: the plane touches a single corner
- 2 points: the plane touches a single edge (the edge's midpoint and both
  endpoints are reduced to the endpoints)
- 3 to 6 points: a convex polygon (a hexagon at most)

When the plane coincides with one of the cube's faces the face itself is
returned with `is_face` set. That case is checked before the generic edge
intersection, which would otherwise count every edge of the face as crossing.
"""

import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from polytope4d.config import SLICE_EPSILON
from polytope4d.vector_ops import angular_order, rotate_points

from .cube_geometry import (
    CUBE_CENTER,
    CUBE_EDGES,
    CUBE_FACES,
    CUBE_VERTICES,
    CubeFace,
    FaceSet,
    first_shared_color,
)

logger = logging.getLogger(__name__)


class SlicePoint(NamedTuple):
    """Vertex of a cut polygon.

    Attributes:
        x, y: Position in the slicing plane
        color: Colour of the polygon edge from this point to the next one
    """
    x: float
    y: float
    color: str


class SliceResult(NamedTuple):
    """Output of one slicing query.

    Attributes:
        points: Cycle of polygon vertices (wraps from last to first)
        is_face: True when the plane coincides with one of the cube's faces
    """
    points: Tuple[SlicePoint, ...]
    is_face: bool


class _Intersection(NamedTuple):
    x: float
    y: float
    faces: FaceSet


def rotated_cube_vertices(rotation: Sequence[float]) -> np.ndarray:
    """The 8 cube corners rotated about the cube centre, shape (8, 3)."""
    return rotate_points(CUBE_VERTICES, rotation, CUBE_CENTER)


def _coincident_face(vertices: np.ndarray, slice_coordinate: float,
                     epsilon: float) -> Optional[CubeFace]:
    for face in CUBE_FACES:
        z = vertices[list(face.vertices), 2]
        if np.all(np.abs(z - z[0]) < epsilon) and abs(z[0] - slice_coordinate) < epsilon:
            return face
    return None


def _edge_intersections(vertices: np.ndarray, slice_coordinate: float,
                        epsilon: float) -> List[_Intersection]:
    intersections = []
    for edge in CUBE_EDGES:
        p1 = vertices[edge.v1]
        p2 = vertices[edge.v2]
        z1, z2 = p1[2], p2[2]

        crosses = (z1 <= slice_coordinate <= z2) or (z2 <= slice_coordinate <= z1)
        if not crosses:
            continue

        if abs(z2 - z1) < epsilon:
            # Edge lies flat; only counts when it sits on the plane
            if abs(z1 - slice_coordinate) < epsilon:
                intersections.append(_Intersection(
                    (p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2, edge.faces))
        else:
            t = (slice_coordinate - z1) / (z2 - z1)
            intersections.append(_Intersection(
                p1[0] + t * (p2[0] - p1[0]), p1[1] + t * (p2[1] - p1[1]), edge.faces))
    return intersections


def _unique(points: List[_Intersection], epsilon: float) -> List[_Intersection]:
    unique = []
    for point in points:
        duplicate = any(
            abs(kept.x - point.x) < epsilon and abs(kept.y - point.y) < epsilon
            for kept in unique
        )
        if not duplicate:
            unique.append(point)
    return unique


def _collapse_collinear(points: List[_Intersection], epsilon: float) -> List[_Intersection]:
    # A cube edge lying in the plane yields its midpoint plus both endpoints;
    # the section is the segment between the two extreme points.
    if len(points) < 3:
        return points
    xy = np.array([(p.x, p.y) for p in points])
    rows, cols = np.triu_indices(len(points), k=1)
    lengths = np.sum((xy[rows] - xy[cols]) ** 2, axis=1)
    first, last = rows[np.argmax(lengths)], cols[np.argmax(lengths)]

    direction = xy[last] - xy[first]
    relative = xy - xy[first]
    offsets = np.abs(direction[0] * relative[:, 1] - direction[1] * relative[:, 0])
    if np.any(offsets / np.linalg.norm(direction) >= epsilon):
        return points

    faces = FaceSet.NONE
    for point in points:
        faces |= point.faces
    return [points[first]._replace(faces=faces), points[last]._replace(faces=faces)]


def compute_slice(slice_coordinate: float, rotation: Sequence[float],
                  epsilon: float = SLICE_EPSILON) -> SliceResult:
    """Intersect the rotated unit cube with the plane z = slice_coordinate.

    Args:
        slice_coordinate: Height of the cutting plane on the world Z axis
        rotation: (a, b, c) Euler angles in radians, applied about the cube
            centre (0.5, 0.5, 0.5)
        epsilon: Tolerance for coplanarity and duplicate points

    Returns:
        SliceResult with the ordered, colour-tagged cut polygon
    """
    vertices = rotated_cube_vertices(rotation)

    face = _coincident_face(vertices, slice_coordinate, epsilon)
    if face is not None:
        corners = vertices[list(face.vertices)]
        order = angular_order(corners)
        points = tuple(
            SlicePoint(float(corners[i, 0]), float(corners[i, 1]), face.color)
            for i in order
        )
        logger.debug("Slice z=%.4f lies on the %s face", slice_coordinate, face.name)
        return SliceResult(points=points, is_face=True)

    unique = _unique(_edge_intersections(vertices, slice_coordinate, epsilon), epsilon)
    unique = _collapse_collinear(unique, epsilon)

    if len(unique) > 2:
        order = angular_order(np.array([(p.x, p.y) for p in unique]))
        unique = [unique[i] for i in order]

    is_face = False
    if len(unique) == 4:
        is_face = _coincident_face(vertices, slice_coordinate, epsilon) is not None

    points = []
    for i, current in enumerate(unique):
        following = unique[(i + 1) % len(unique)]
        points.append(SlicePoint(float(current.x), float(current.y),
                                 first_shared_color(current.faces, following.faces)))

    logger.debug("Slice z=%.4f: %d points", slice_coordinate, len(points))
    return SliceResult(points=tuple(points), is_face=is_face)
