"""
Rotations of 4-space about coordinate planes, and perspective projection to 3D.

A simple rotation in 4D turns the points of one coordinate plane and leaves the
orthogonal plane fixed, the way a 3D rotation turns a plane and fixes an axis.
Only the three planes involving W are used here (XW, YW, ZW): rotating in them
is what makes a tesseract appear to turn "inside out" once projected.

Rotations in different planes do not commute. Every caller applies them in
the order XW, then YW, then ZW.

Projection divides x, y and z by (d - w) where d is the viewer distance along
W. Points with w close to d blow up; choosing d outside the polytope's W
extent is the caller's job.
"""

import logging
from functools import partial
from typing import Dict, NamedTuple, Tuple

import jax
import jax.numpy as jnp

from .config import ANGULAR_SPEEDS, DEFAULT_VIEWER_DISTANCE
from .regular_polytopes import Polytope

logger = logging.getLogger(__name__)

ROTATION_PLANES = ('xw', 'yw', 'zw')
PLANE_AXES = {'xw': (0, 3), 'yw': (1, 3), 'zw': (2, 3)}


class RotationMode(NamedTuple):
    """Which W-planes turn during an animation.

    Attributes:
        xw: Rotate in the XW plane
        yw: Rotate in the YW plane
        zw: Rotate in the ZW plane
        label: Display label
    """
    xw: bool
    yw: bool
    zw: bool
    label: str


ROTATION_MODES = (
    RotationMode(True, False, False, 'XW only'),
    RotationMode(False, True, False, 'YW only'),
    RotationMode(False, False, True, 'ZW only'),
    RotationMode(True, True, False, 'XW + YW'),
    RotationMode(True, False, True, 'XW + ZW'),
    RotationMode(False, True, True, 'YW + ZW'),
    RotationMode(True, True, True, 'XW + YW + ZW'),
)


def _plane_axes(plane: str) -> Tuple[int, int]:
    key = plane.lower()
    if key not in PLANE_AXES:
        raise ValueError(f"Unknown rotation plane {plane!r}; expected one of {ROTATION_PLANES}")
    return PLANE_AXES[key]


@partial(jax.jit, static_argnums=(1, 2))
def _rotate_axes(point: jnp.ndarray, i: int, j: int, angle: float) -> jnp.ndarray:
    cos = jnp.cos(angle)
    sin = jnp.sin(angle)
    a = point[..., i]
    b = point[..., j]
    return point.at[..., i].set(a * cos - b * sin).at[..., j].set(a * sin + b * cos)


def rotate_in_plane(point: jnp.ndarray, plane: str, angle: float) -> jnp.ndarray:
    """Rotate 4D point(s) in one of the XW, YW or ZW planes.

    For the XW plane:
        x' = x cos(angle) - w sin(angle)
        w' = x sin(angle) + w cos(angle)
    with y and z unchanged; YW and ZW are analogous.

    Args:
        point: (4,) point or (N, 4) batch
        plane: 'xw', 'yw' or 'zw' (case-insensitive)
        angle: Rotation angle in radians

    Returns:
        Rotated array with the shape of `point`

    Raises:
        ValueError: for any other plane name
    """
    i, j = _plane_axes(plane)
    return _rotate_axes(jnp.asarray(point, dtype=jnp.float64), i, j, angle)


def rotate_4d(point: jnp.ndarray, xw: float = 0.0, yw: float = 0.0,
              zw: float = 0.0) -> jnp.ndarray:
    """Apply the XW, YW and ZW rotations in that order."""
    rotated = rotate_in_plane(point, 'xw', xw)
    rotated = rotate_in_plane(rotated, 'yw', yw)
    return rotate_in_plane(rotated, 'zw', zw)


@jax.jit
def project(point: jnp.ndarray,
            viewer_distance: float = DEFAULT_VIEWER_DISTANCE) -> jnp.ndarray:
    """Perspective projection from 4D to 3D.

    Scales (x, y, z) by 1 / (viewer_distance - w). No clamping is done, so
    w == viewer_distance gives infinities.

    Args:
        point: (4,) point or (N, 4) batch
        viewer_distance: Position of the eye on the W axis

    Returns:
        (3,) or (N, 3) projected coordinates
    """
    point = jnp.asarray(point, dtype=jnp.float64)
    scale = 1.0 / (viewer_distance - point[..., 3])
    return point[..., :3] * scale[..., None]


def project_polytope(polytope: Polytope, angles: Dict[str, float],
                     viewer_distance: float = DEFAULT_VIEWER_DISTANCE) -> jnp.ndarray:
    """Rotate every vertex of a polytope, then project it to 3D.

    Args:
        polytope: Catalog entry
        angles: Mapping with optional 'xw', 'yw', 'zw' angles in radians
        viewer_distance: Position of the eye on the W axis

    Returns:
        (N, 3) array of projected vertex positions
    """
    rotated = rotate_4d(polytope.vertices, **_angle_kwargs(angles))
    return project(rotated, viewer_distance)


def _angle_kwargs(angles: Dict[str, float]) -> Dict[str, float]:
    unknown = set(angles) - set(ROTATION_PLANES)
    if unknown:
        raise ValueError(f"Unknown rotation planes: {sorted(unknown)}")
    return {plane: float(angles.get(plane, 0.0)) for plane in ROTATION_PLANES}


def advance_angles(angles: Dict[str, float], mode: RotationMode,
                   delta: float) -> Dict[str, float]:
    """Step the animation angles by `delta` seconds.

    Only the planes enabled in `mode` advance, each at its speed from
    ANGULAR_SPEEDS. The input mapping is not modified.
    """
    advanced = {plane: float(angles.get(plane, 0.0)) for plane in ROTATION_PLANES}
    for plane in ROTATION_PLANES:
        if getattr(mode, plane):
            advanced[plane] += delta * ANGULAR_SPEEDS[plane]
    return advanced


def mode_angles(mode: RotationMode, elapsed: float) -> Dict[str, float]:
    """Angles reached after `elapsed` seconds in a rotation mode, from rest."""
    return advance_angles({}, mode, elapsed)
