"""Plane cross-sections of the rotated unit cube, its arrow markers and the tesseract."""

from .cube_geometry import (
    FaceSet,
    CubeFace,
    CubeEdge,
    MarkerTarget,
    CUBE_VERTICES,
    CUBE_FACES,
    CUBE_EDGES,
    CUBE_CENTER,
    MARKER_TARGETS,
    FALLBACK_COLOR,
    first_shared_color
)

from .cube_slicer import (
    SlicePoint,
    SliceResult,
    rotated_cube_vertices,
    compute_slice
)

from .marker_slicer import (
    MarkerGeometry,
    EllipseSlice,
    RectangleSlice,
    TriangleSlice,
    HyperbolaSlice,
    ArrowSlice,
    compute_arrow_slices
)

from .tesseract_slicer import (
    TesseractCell,
    CellSection,
    TESSERACT_CELLS,
    compute_tesseract_slice
)

__all__ = [
    'FaceSet',
    'CubeFace',
    'CubeEdge',
    'MarkerTarget',
    'CUBE_VERTICES',
    'CUBE_FACES',
    'CUBE_EDGES',
    'CUBE_CENTER',
    'MARKER_TARGETS',
    'FALLBACK_COLOR',
    'first_shared_color',
    'SlicePoint',
    'SliceResult',
    'rotated_cube_vertices',
    'compute_slice',
    'MarkerGeometry',
    'EllipseSlice',
    'RectangleSlice',
    'TriangleSlice',
    'HyperbolaSlice',
    'ArrowSlice',
    'compute_arrow_slices',
    'TesseractCell',
    'CellSection',
    'TESSERACT_CELLS',
    'compute_tesseract_slice'
]
