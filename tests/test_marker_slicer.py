import math

import numpy as np
import pytest

from cross_sections.marker_slicer import (
    EllipseSlice,
    HyperbolaSlice,
    MarkerGeometry,
    RectangleSlice,
    TriangleSlice,
    compute_arrow_slices,
)

NO_ROTATION = (0.0, 0.0, 0.0)


def _by_marker(slices):
    grouped = {}
    for s in slices:
        grouped.setdefault(s.marker, []).append(s)
    return grouped


def _kinds(slices):
    return sorted(s.kind for s in slices)


def test_midplane_cuts_every_marker():
    slices = compute_arrow_slices(0.5, NO_ROTATION)
    assert _kinds(slices) == ['ellipse'] * 2 + ['rectangle'] * 4 + ['triangle'] * 4
    assert [s.marker for s in slices] == [
        '+x', '+x', '-x', '-x', '+y', '+y', '-y', '-y', '+z', '-z']


def test_midplane_shapes_along_x():
    grouped = _by_marker(compute_arrow_slices(0.5, NO_ROTATION))
    rectangle, triangle = grouped['+x']
    assert isinstance(rectangle, RectangleSlice)
    assert (rectangle.x, rectangle.y) == pytest.approx((0.65, 0.5))
    assert rectangle.width == pytest.approx(0.3)
    assert rectangle.height == pytest.approx(0.06)
    assert rectangle.rotation == pytest.approx(0.0)

    assert isinstance(triangle, TriangleSlice)
    assert (triangle.x, triangle.y) == pytest.approx((0.8, 0.5))
    assert triangle.base_width == pytest.approx(0.16)
    assert triangle.length == pytest.approx(0.2)

    rectangle, triangle = grouped['-x']
    assert (rectangle.x, rectangle.y) == pytest.approx((0.35, 0.5))
    assert abs(rectangle.rotation) == pytest.approx(math.pi)
    assert (triangle.x, triangle.y) == pytest.approx((0.2, 0.5))

    assert grouped['+y'][0].rotation == pytest.approx(math.pi / 2)
    assert grouped['-y'][0].rotation == pytest.approx(-math.pi / 2)


def test_midplane_shapes_along_z_are_circles():
    grouped = _by_marker(compute_arrow_slices(0.5, NO_ROTATION))
    for name in ('+z', '-z'):
        (ellipse,) = grouped[name]
        assert isinstance(ellipse, EllipseSlice)
        assert (ellipse.x, ellipse.y) == pytest.approx((0.5, 0.5))
        assert ellipse.rx == pytest.approx(0.03)
        assert ellipse.ry == pytest.approx(0.03)


def test_offset_plane_gives_narrower_band_and_hyperbola():
    grouped = _by_marker(compute_arrow_slices(0.52, NO_ROTATION))
    rectangle, hyperbola = grouped['+y']
    assert isinstance(rectangle, RectangleSlice)
    assert rectangle.height == pytest.approx(2 * math.sqrt(0.03 ** 2 - 0.02 ** 2))
    assert isinstance(hyperbola, HyperbolaSlice)
    assert hyperbola.z_offset == pytest.approx(0.02)
    assert hyperbola.cone_radius == pytest.approx(0.08)
    assert hyperbola.cone_length == pytest.approx(0.2)
    assert (hyperbola.x, hyperbola.y) == pytest.approx((0.5, 0.8))

    assert '-z' not in grouped
    assert len(grouped['+z']) == 1


def test_plane_beyond_shaft_cuts_only_cones():
    slices = compute_arrow_slices(0.55, NO_ROTATION)
    assert _kinds(slices) == ['ellipse'] + ['hyperbola'] * 4


def test_ellipse_in_cone_is_tapered():
    (ellipse,) = compute_arrow_slices(0.9, NO_ROTATION)
    assert ellipse.marker == '+z'
    assert ellipse.rx == pytest.approx(0.04)
    assert ellipse.ry == pytest.approx(0.04)


@pytest.mark.parametrize("z", [0.999, 1.2, -0.3])
def test_no_slices(z):
    assert compute_arrow_slices(z, NO_ROTATION) == []


@pytest.mark.parametrize("rotation", [(0.3, 0.5, 0.7), (1.1, -0.4, 2.0), (0.6155, -0.785, 0.0)])
def test_oblique_markers_give_ellipses(rotation):
    for z in np.linspace(0, 1, 41):
        for s in compute_arrow_slices(z, rotation):
            assert isinstance(s, EllipseSlice)
            assert s.rx >= s.ry > 0
            assert s.ry <= 0.08 + 1e-12


def test_oblique_ellipse_stretch():
    # Tilting about X by 30 degrees leaves the x markers flat
    rotation = (math.pi / 6, 0.0, 0.0)
    grouped = _by_marker(compute_arrow_slices(0.6, rotation))
    (ellipse,) = grouped['+z']
    assert ellipse.ry == pytest.approx(0.03)
    assert ellipse.rx == pytest.approx(0.03 / math.cos(math.pi / 6))


def test_scaled_geometry():
    geometry = MarkerGeometry().scaled(2.0)
    assert geometry.shaft_fraction == pytest.approx(0.6)
    assert geometry.max_radius == pytest.approx(0.16)
    ellipse = _by_marker(compute_arrow_slices(0.5, NO_ROTATION, geometry))['+z'][0]
    assert ellipse.rx == pytest.approx(0.06)


@pytest.mark.parametrize("geometry", [
    MarkerGeometry(cone_radius=-0.08),
    MarkerGeometry(shaft_radius=float('nan')),
])
def test_invalid_radius_rejected(geometry):
    with pytest.raises(ValueError):
        compute_arrow_slices(0.5, NO_ROTATION, geometry)
