"""Regular 4-polytopes, 4D rotations and perspective projection."""

from . import config

from .vector_ops import (
    distance_squared,
    rotate_point,
    rotate_points,
    centroid,
    angular_order,
    sort_by_angle_around_centroid,
    sort_polygon_points_3d
)

from .coordinate_families import (
    all_sign_variations,
    all_permutations,
    even_permutations,
    deduplicate,
    scale_to_radius,
    expand_family
)

from .regular_polytopes import (
    Polytope,
    find_edges,
    find_triangles,
    validate_polytope,
    make_five_cell,
    make_tesseract,
    make_sixteen_cell,
    make_twenty_four_cell,
    make_one_hundred_twenty_cell,
    make_six_hundred_cell,
    polytope_catalog,
    get_polytope,
    POLYTOPE_NAMES
)

from .rotation4d import (
    RotationMode,
    ROTATION_MODES,
    rotate_in_plane,
    rotate_4d,
    project,
    project_polytope,
    advance_angles,
    mode_angles
)

from .hypercube_counts import (
    HypercubeRow,
    hypercube_elements,
    hypercube_table
)

from .logging_config import setup_logging

__all__ = [
    'config',
    'distance_squared',
    'rotate_point',
    'rotate_points',
    'centroid',
    'angular_order',
    'sort_by_angle_around_centroid',
    'sort_polygon_points_3d',
    'all_sign_variations',
    'all_permutations',
    'even_permutations',
    'deduplicate',
    'scale_to_radius',
    'expand_family',
    'Polytope',
    'find_edges',
    'find_triangles',
    'validate_polytope',
    'make_five_cell',
    'make_tesseract',
    'make_sixteen_cell',
    'make_twenty_four_cell',
    'make_one_hundred_twenty_cell',
    'make_six_hundred_cell',
    'polytope_catalog',
    'get_polytope',
    'POLYTOPE_NAMES',
    'RotationMode',
    'ROTATION_MODES',
    'rotate_in_plane',
    'rotate_4d',
    'project',
    'project_polytope',
    'advance_angles',
    'mode_angles',
    'HypercubeRow',
    'hypercube_elements',
    'hypercube_table',
    'setup_logging'
]
