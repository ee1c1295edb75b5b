"""
Cross-sections of the six arrow markers inside the rotated cube.

Each marker runs from the cube centre to one face centre. It is a cylindrical
shaft over the first 60% of its length, capped by a cone that tapers to a
point over the remaining 40%. Cutting it with the plane z = const gives a
conic section, classified by the angle between the marker axis and the plane:

- axis oblique to the plane: an ellipse. Its semi-minor axis is the local
  radius r and its semi-major axis r / cos(theta), where cos(theta) = |dir_z|.
- axis in the plane, cut through the shaft: a rectangle (a band of the
  cylinder) whose height is the chord of the circular cross-section.
- axis in the plane, cut through the cone: a triangle when the plane contains
  the axis, otherwise one branch of a hyperbola.

Shapes smaller than NEGLIGIBLE_SIZE are dropped.
"""

import logging
import math
from typing import List, NamedTuple, Sequence, Union

import numpy as np

from polytope4d.config import NEGLIGIBLE_SIZE, PARALLEL_COS_THRESHOLD
from polytope4d.vector_ops import rotate_points

from .cube_geometry import CUBE_CENTER, MARKER_TARGETS

logger = logging.getLogger(__name__)


class MarkerGeometry(NamedTuple):
    """Dimensions of an arrow marker.

    Attributes:
        shaft_radius: Radius of the cylindrical shaft
        cone_radius: Base radius of the arrow head
        shaft_fraction: Fraction of the marker length taken by the shaft
    """
    shaft_radius: float = 0.03
    cone_radius: float = 0.08
    shaft_fraction: float = 0.6

    @property
    def max_radius(self) -> float:
        return max(self.shaft_radius, self.cone_radius)

    def scaled(self, factor: float) -> 'MarkerGeometry':
        """Thinner or thicker marker with the same proportions along the axis."""
        return self._replace(shaft_radius=self.shaft_radius * factor,
                             cone_radius=self.cone_radius * factor)


class EllipseSlice(NamedTuple):
    """Oblique cut through the shaft or cone."""
    x: float
    y: float
    rotation: float
    rx: float
    ry: float
    marker: str
    kind = 'ellipse'


class RectangleSlice(NamedTuple):
    """Cut parallel to the shaft axis, through the shaft."""
    x: float
    y: float
    rotation: float
    width: float
    height: float
    marker: str
    kind = 'rectangle'


class TriangleSlice(NamedTuple):
    """Cut containing the cone axis."""
    x: float
    y: float
    rotation: float
    base_width: float
    length: float
    marker: str
    kind = 'triangle'


class HyperbolaSlice(NamedTuple):
    """Cut parallel to the cone axis at distance `z_offset` from it.

    The renderer traces the curve from the three cone parameters; (x, y) is
    the centre of the cone base and `rotation` the bearing of the apex.
    """
    x: float
    y: float
    rotation: float
    z_offset: float
    cone_radius: float
    cone_length: float
    marker: str
    kind = 'hyperbola'


ArrowSlice = Union[EllipseSlice, RectangleSlice, TriangleSlice, HyperbolaSlice]


def _checked(value: float, label: str) -> float:
    if math.isnan(value) or value < 0:
        raise ValueError(f"Invalid {label} {value!r} for a marker cross-section")
    return float(value)


def _chord(radius: float, offset: float) -> float:
    return 2.0 * math.sqrt(max(radius * radius - offset * offset, 0.0))


def _parallel_slices(name: str, start: np.ndarray, axis: np.ndarray, bearing: float,
                     slice_coordinate: float, geometry: MarkerGeometry) -> List[ArrowSlice]:
    slices = []
    length = float(np.linalg.norm(axis))
    shaft_length = length * geometry.shaft_fraction
    cone_length = length - shaft_length
    cone_base = start + axis * geometry.shaft_fraction
    marker_z = start[2] + axis[2] / 2
    z_offset = abs(marker_z - slice_coordinate)

    if z_offset < geometry.shaft_radius:
        height = _chord(geometry.shaft_radius, z_offset)
        if height >= NEGLIGIBLE_SIZE:
            middle = start + axis * (geometry.shaft_fraction / 2)
            slices.append(RectangleSlice(
                x=float(middle[0]), y=float(middle[1]), rotation=bearing,
                width=_checked(shaft_length, 'width'),
                height=_checked(height, 'height'),
                marker=name,
            ))

    if z_offset < geometry.cone_radius:
        if z_offset < NEGLIGIBLE_SIZE:
            slices.append(TriangleSlice(
                x=float(cone_base[0]), y=float(cone_base[1]), rotation=bearing,
                base_width=_checked(2 * geometry.cone_radius, 'base width'),
                length=_checked(cone_length, 'length'),
                marker=name,
            ))
        elif _chord(geometry.cone_radius, z_offset) >= NEGLIGIBLE_SIZE:
            slices.append(HyperbolaSlice(
                x=float(cone_base[0]), y=float(cone_base[1]), rotation=bearing,
                z_offset=_checked(z_offset, 'offset'),
                cone_radius=_checked(geometry.cone_radius, 'radius'),
                cone_length=_checked(cone_length, 'length'),
                marker=name,
            ))
    return slices


def _angled_slice(name: str, start: np.ndarray, axis: np.ndarray, cos_theta: float,
                  bearing: float, slice_coordinate: float,
                  geometry: MarkerGeometry) -> List[ArrowSlice]:
    t = (slice_coordinate - start[2]) / axis[2]
    if t < 0 or t > 1:
        return []

    if t <= geometry.shaft_fraction:
        radius = geometry.shaft_radius
    else:
        taper = (t - geometry.shaft_fraction) / (1 - geometry.shaft_fraction)
        radius = geometry.cone_radius * (1 - taper)
    if radius < NEGLIGIBLE_SIZE:
        return []

    center = start + axis * t
    return [EllipseSlice(
        x=float(center[0]), y=float(center[1]), rotation=bearing,
        rx=_checked(radius / cos_theta, 'semi-major axis'),
        ry=_checked(radius, 'semi-minor axis'),
        marker=name,
    )]


def compute_arrow_slices(slice_coordinate: float, rotation: Sequence[float],
                         geometry: MarkerGeometry = MarkerGeometry()) -> List[ArrowSlice]:
    """Cross-sections of all six markers with the plane z = slice_coordinate.

    Args:
        slice_coordinate: Height of the cutting plane on the world Z axis
        rotation: (a, b, c) Euler angles in radians, the same rotation that is
            applied to the cube
        geometry: Marker dimensions

    Returns:
        List of shapes in marker order (+x, -x, +y, -y, +z, -z); a marker can
        contribute nothing, one shape, or in the parallel case a rectangle and
        a cone shape

    Raises:
        ValueError: if a marker radius is negative or NaN
    """
    _checked(geometry.shaft_radius, "shaft radius")
    _checked(geometry.cone_radius, "cone radius")

    targets = np.array([target.point for target in MARKER_TARGETS])
    ends = rotate_points(targets, rotation, CUBE_CENTER)
    start = rotate_points(CUBE_CENTER, rotation, CUBE_CENTER)[0]

    slices: List[ArrowSlice] = []
    for target, end in zip(MARKER_TARGETS, ends):
        low = min(start[2], end[2]) - geometry.max_radius
        high = max(start[2], end[2]) + geometry.max_radius
        if not low <= slice_coordinate <= high:
            continue

        axis = end - start
        direction = axis / np.linalg.norm(axis)
        cos_theta = abs(float(direction[2]))
        bearing = math.atan2(direction[1], direction[0])

        if cos_theta < PARALLEL_COS_THRESHOLD:
            slices.extend(_parallel_slices(target.name, start, axis, bearing,
                                           slice_coordinate, geometry))
        else:
            slices.extend(_angled_slice(target.name, start, axis, cos_theta, bearing,
                                        slice_coordinate, geometry))

    logger.debug("Marker slice z=%.4f: %s", slice_coordinate,
                 ", ".join(f"{s.marker}:{s.kind}" for s in slices) or "none")
    return slices
