"""
Cross-section of a rotated tesseract by the hyperplane w = const.

The tesseract [-1, 1]^4 has eight cubic cells, one per signed axis. Each cell
is cut separately: the hyperplane meets a cell in a convex polygon, and the
polygons of all eight cells together bound the 3D solid seen in the slice.
Each polygon keeps its cell's colour; the ±X, ±Y and ±Z cells use the colours
of the corresponding faces of the 3D cube, the ±W cells white and grey.

The slice position `w` is given in [0, 1] and mapped to [-1, 1]; output points
are mapped back from [-1, 1]^3 to [0, 1]^3 so they line up with the unit cube.
"""

import logging
from itertools import combinations, product
from typing import List, NamedTuple, Tuple

import numpy as np

from polytope4d.config import SLICE_EPSILON
from polytope4d.rotation4d import rotate_4d
from polytope4d.vector_ops import distance_squared, sort_polygon_points_3d

from .cube_geometry import (
    COLOR_BACK,
    COLOR_BOTTOM,
    COLOR_FRONT,
    COLOR_LEFT,
    COLOR_RIGHT,
    COLOR_TOP,
    FALLBACK_COLOR,
)

logger = logging.getLogger(__name__)

COLOR_POS_W = '#ffffff'
COLOR_NEG_W = FALLBACK_COLOR

TESSERACT_VERTICES = np.array(list(product([-1, 1], repeat=4)), dtype=float)

TESSERACT_EDGES = tuple(
    (i, j) for i, j in combinations(range(len(TESSERACT_VERTICES)), 2)
    if np.count_nonzero(TESSERACT_VERTICES[i] != TESSERACT_VERTICES[j]) == 1
)

_CELL_COLORS = {
    (0, 1): COLOR_RIGHT, (0, -1): COLOR_LEFT,
    (1, 1): COLOR_TOP, (1, -1): COLOR_BOTTOM,
    (2, 1): COLOR_FRONT, (2, -1): COLOR_BACK,
    (3, 1): COLOR_POS_W, (3, -1): COLOR_NEG_W,
}


class TesseractCell(NamedTuple):
    """One cubic cell: the vertices with a fixed value on one axis."""
    fixed_axis: int
    fixed_value: int
    vertices: Tuple[int, ...]
    edges: Tuple[Tuple[int, int], ...]
    color: str


class CellSection(NamedTuple):
    """Polygon cut from one cell.

    Attributes:
        color: Cell colour
        fixed_axis: Axis (0-3) held constant on the cell
        fixed_value: -1 or 1
        points: (K, 3) polygon vertices in cyclic order, in [0, 1]^3
        normal: (3,) unit normal of the polygon
    """
    color: str
    fixed_axis: int
    fixed_value: int
    points: np.ndarray
    normal: np.ndarray


def _build_cells() -> Tuple[TesseractCell, ...]:
    cells = []
    for axis in range(4):
        for value in (-1, 1):
            members = tuple(int(i) for i in np.flatnonzero(TESSERACT_VERTICES[:, axis] == value))
            member_set = set(members)
            edges = tuple(e for e in TESSERACT_EDGES if e[0] in member_set and e[1] in member_set)
            cells.append(TesseractCell(axis, value, members, edges, _CELL_COLORS[(axis, value)]))
    return tuple(cells)


TESSERACT_CELLS = _build_cells()


def _cell_points(cell: TesseractCell, vertices: np.ndarray, slice_w: float,
                 epsilon: float) -> List[np.ndarray]:
    points = []
    for i, j in cell.edges:
        a, b = vertices[i], vertices[j]
        if (a[3] - slice_w) * (b[3] - slice_w) < 0:
            t = (slice_w - a[3]) / (b[3] - a[3])
            points.append(a[:3] + t * (b[:3] - a[:3]))
    for i in cell.vertices:
        if abs(vertices[i, 3] - slice_w) < epsilon:
            points.append(vertices[i, :3].copy())
    return points


def _unique_3d(points: List[np.ndarray], epsilon: float) -> List[np.ndarray]:
    unique = []
    for point in points:
        if not any(distance_squared(point, kept) < epsilon * epsilon for kept in unique):
            unique.append(point)
    return unique


def compute_tesseract_slice(w: float, xw: float = 0.0, yw: float = 0.0, zw: float = 0.0,
                            epsilon: float = SLICE_EPSILON) -> List[CellSection]:
    """Cut the rotated tesseract with the hyperplane at `w`.

    Args:
        w: Slice position in [0, 1] (0.5 is the tesseract centre)
        xw, yw, zw: Rotation angles, applied in that order
        epsilon: Tolerance for on-plane vertices and duplicate points

    Returns:
        One CellSection per cell that the hyperplane cuts in a polygon
    """
    vertices = np.asarray(rotate_4d(TESSERACT_VERTICES, xw=xw, yw=yw, zw=zw))
    slice_w = (w - 0.5) * 2

    sections = []
    for cell in TESSERACT_CELLS:
        points = _cell_points(cell, vertices, slice_w, epsilon)
        if len(points) < 3:
            continue
        points = _unique_3d([p * 0.5 + 0.5 for p in points], epsilon)
        if len(points) < 3:
            continue

        ordered = sort_polygon_points_3d(np.array(points))
        normal = np.cross(ordered[1] - ordered[0], ordered[2] - ordered[0])
        normal = normal / np.linalg.norm(normal)
        sections.append(CellSection(cell.color, cell.fixed_axis, cell.fixed_value,
                                    ordered, normal))

    logger.debug("Tesseract slice w=%.4f cuts %d cells", w, len(sections))
    return sections
