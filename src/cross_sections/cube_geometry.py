"""
Static lookup tables for the reference unit cube [0, 1]^3.

The tables form a small arena: vertices are addressed by index, faces list the
indices of their four corners, and edges carry the set of faces they border.
Face membership is a `FaceSet` bit flag, so the faces shared by two points on
the cube's surface are a single bitwise AND.

Face colours:
    +X (x=1) light red      -X (x=0) dark red
    +Y (y=1) light green    -Y (y=0) dark green
    +Z (z=1) light blue     -Z (z=0) dark blue
"""

import enum
from typing import NamedTuple, Tuple

import numpy as np


class FaceSet(enum.IntFlag):
    """Bit set over the six cube faces, in table order."""
    NONE = 0
    BACK = 1
    FRONT = 2
    BOTTOM = 4
    TOP = 8
    LEFT = 16
    RIGHT = 32


COLOR_RIGHT = '#f39494'
COLOR_LEFT = '#c40707'
COLOR_TOP = '#57f157'
COLOR_BOTTOM = '#048004'
COLOR_BACK = '#00008b'
COLOR_FRONT = '#7185f1'
FALLBACK_COLOR = '#888888'

CUBE_CENTER = np.array([0.5, 0.5, 0.5])

CUBE_VERTICES = np.array([
    [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],  # back face (z=0)
    [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1],  # front face (z=1)
], dtype=float)


class CubeFace(NamedTuple):
    """One face of the reference cube.

    Attributes:
        name: Face label
        vertices: Indices into CUBE_VERTICES
        color: Display colour of the face
        tag: Bit identifying the face in a FaceSet
    """
    name: str
    vertices: Tuple[int, int, int, int]
    color: str
    tag: FaceSet


class CubeEdge(NamedTuple):
    """One of the 12 edges, with the two faces it borders."""
    v1: int
    v2: int
    faces: FaceSet


CUBE_FACES = (
    CubeFace('back', (0, 1, 2, 3), COLOR_BACK, FaceSet.BACK),
    CubeFace('front', (4, 5, 6, 7), COLOR_FRONT, FaceSet.FRONT),
    CubeFace('bottom', (0, 1, 5, 4), COLOR_BOTTOM, FaceSet.BOTTOM),
    CubeFace('top', (2, 3, 7, 6), COLOR_TOP, FaceSet.TOP),
    CubeFace('left', (0, 3, 7, 4), COLOR_LEFT, FaceSet.LEFT),
    CubeFace('right', (1, 2, 6, 5), COLOR_RIGHT, FaceSet.RIGHT),
)


def edge_faces(v1: int, v2: int) -> FaceSet:
    """Faces containing both endpoints of an edge."""
    tags = FaceSet.NONE
    for face in CUBE_FACES:
        if v1 in face.vertices and v2 in face.vertices:
            tags |= face.tag
    return tags


_EDGE_PAIRS = (
    (0, 1), (1, 2), (2, 3), (3, 0),  # back face
    (4, 5), (5, 6), (6, 7), (7, 4),  # front face
    (0, 4), (1, 5), (2, 6), (3, 7),  # along z
)

CUBE_EDGES = tuple(CubeEdge(v1, v2, edge_faces(v1, v2)) for v1, v2 in _EDGE_PAIRS)


def first_shared_color(a: FaceSet, b: FaceSet) -> str:
    """Colour of the first face (in table order) present in both sets.

    Falls back to grey when the sets are disjoint, which only happens through
    floating-point corner cases.
    """
    shared = a & b
    for face in CUBE_FACES:
        if shared & face.tag:
            return face.color
    return FALLBACK_COLOR


class MarkerTarget(NamedTuple):
    """Face centre that an arrow marker points at from the cube centre."""
    name: str
    point: Tuple[float, float, float]


MARKER_TARGETS = (
    MarkerTarget('+x', (1.0, 0.5, 0.5)),
    MarkerTarget('-x', (0.0, 0.5, 0.5)),
    MarkerTarget('+y', (0.5, 1.0, 0.5)),
    MarkerTarget('-y', (0.5, 0.0, 0.5)),
    MarkerTarget('+z', (0.5, 0.5, 1.0)),
    MarkerTarget('-z', (0.5, 0.5, 0.0)),
)
