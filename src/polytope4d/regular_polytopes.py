"""
The six regular convex 4-polytopes, the 4D analogues of the Platonic solids.

Each polytope is an immutable value holding its vertices in 4-space, its edges
as vertex-index pairs and its 2-faces as vertex-index cycles. All six are scaled
to the same circumradius so they can be displayed side by side.

Mathematical significance:
- 5-cell (simplex): 5 vertices, 10 edges, 10 triangles; self-dual
- 8-cell (tesseract): 16 vertices, 32 edges, 24 squares; dual of the 16-cell
- 16-cell (orthoplex): 8 vertices, 24 edges, 32 triangles
- 24-cell: 24 vertices, 96 edges, 96 triangles; self-dual, no 3D analogue
- 120-cell: 600 vertices, 1200 edges, 720 pentagons; dual of the 600-cell
- 600-cell: 120 vertices, 720 edges, 1200 triangles

Except for the 5-cell and the tesseract, edges are recovered from vertex
coordinates alone: in every regular polytope the edges are exactly the pairs
at minimum distance. Triangular faces are then the 3-cliques of the edge graph.
The 120-cell's pentagons are not computed and its face array is empty.
"""

import logging
from functools import lru_cache
from itertools import combinations, product
from typing import Dict, List, NamedTuple, Tuple, Union

import jax.numpy as jnp
import numpy as np

from .config import (
    DISPLAY_CIRCUMRADIUS,
    EDGE_TOLERANCE,
    PHI,
    PHI_INV,
    PHI_INV_SQ,
    PHI_SQ,
    SQRT5,
)
from .coordinate_families import (
    all_sign_variations,
    deduplicate,
    expand_family,
    scale_to_radius,
)
from .vector_ops import distance_squared

logger = logging.getLogger(__name__)


class Polytope(NamedTuple):
    """Immutable data structure representing a regular 4-polytope.

    Attributes:
        name: Short name, e.g. '24-cell'
        description: Human readable label
        vertices: (N, 4) array of vertex coordinates
        edges: (E, 2) array of vertex indices forming edges
        faces: (F, face_size) array of vertex index cycles; (0, face_size)
            when faces are not computed
        face_size: Number of vertices of every face (3, 4 or 5)
    """
    name: str
    description: str
    vertices: jnp.ndarray
    edges: jnp.ndarray
    faces: jnp.ndarray
    face_size: int


def find_edges(vertices: np.ndarray, tolerance: float = EDGE_TOLERANCE) -> np.ndarray:
    """Connect every vertex pair at the minimum nonzero distance.

    Squared distances at or below `tolerance` count as coincident points and
    are ignored when looking for the minimum. A pair is an edge when its
    squared distance is within a relative `tolerance` of the minimum.

    Args:
        vertices: (N, D) array of vertex coordinates
        tolerance: absolute zero threshold and relative match tolerance

    Returns:
        (E, 2) array of index pairs (i < j), in row-major order
    """
    vertices = np.asarray(vertices, dtype=float)
    n_vertices = len(vertices)
    rows, cols = np.triu_indices(n_vertices, k=1)
    pair_dist = distance_squared(vertices[rows], vertices[cols])

    nonzero = pair_dist[pair_dist > tolerance]
    if nonzero.size == 0:
        return np.zeros((0, 2), dtype=np.int64)
    min_dist = np.min(nonzero)

    mask = np.abs(pair_dist - min_dist) < tolerance * min_dist
    return np.stack([rows[mask], cols[mask]], axis=1).astype(np.int64)


def build_adjacency(n_vertices: int, edges: np.ndarray) -> List[set]:
    adjacency = [set() for _ in range(n_vertices)]
    for i, j in np.asarray(edges):
        adjacency[int(i)].add(int(j))
        adjacency[int(j)].add(int(i))
    return adjacency


def find_triangles(n_vertices: int, edges: np.ndarray) -> np.ndarray:
    """Find triangular faces as the 3-cliques of the edge graph.

    Each face (i, j, k) is reported once with i < j < k: j is a neighbour of
    i, k a neighbour of j, and k is also a neighbour of i.

    Args:
        n_vertices: Number of vertices
        edges: (E, 2) array of edge indices

    Returns:
        (F, 3) array of face indices
    """
    adjacency = build_adjacency(n_vertices, edges)

    faces = []
    for i in range(n_vertices):
        for j in sorted(adjacency[i]):
            if j <= i:
                continue
            for k in sorted(adjacency[j]):
                if k <= j:
                    continue
                if k in adjacency[i]:
                    faces.append((i, j, k))

    return np.array(faces, dtype=np.int64).reshape(-1, 3)


def validate_polytope(polytope: Polytope) -> Polytope:
    """Reject a dataset whose faces or edges are inconsistent.

    Raises:
        ValueError: if a face cycle length differs from `face_size` or an
            edge/face references a vertex that does not exist
    """
    faces = np.asarray(polytope.faces)
    edges = np.asarray(polytope.edges)
    n_vertices = len(polytope.vertices)

    if faces.ndim != 2 or faces.shape[1] != polytope.face_size:
        raise ValueError(
            f"{polytope.name}: face cycles of shape {faces.shape} do not match "
            f"face_size={polytope.face_size}"
        )
    for label, indices in (("edge", edges), ("face", faces)):
        if indices.size and (indices.min() < 0 or indices.max() >= n_vertices):
            raise ValueError(f"{polytope.name}: {label} references a missing vertex")
    if edges.size and np.any(edges[:, 0] == edges[:, 1]):
        raise ValueError(f"{polytope.name}: degenerate edge")
    return polytope


def _make_polytope(name: str, description: str, vertices: np.ndarray,
                   edges: np.ndarray, faces: np.ndarray, face_size: int) -> Polytope:
    polytope = Polytope(
        name=name,
        description=description,
        vertices=jnp.asarray(vertices, dtype=jnp.float64),
        edges=jnp.asarray(np.asarray(edges).reshape(-1, 2), dtype=jnp.int64),
        faces=jnp.asarray(np.asarray(faces).reshape(-1, face_size), dtype=jnp.int64),
        face_size=face_size,
    )
    logger.debug("Built %s: %d vertices, %d edges, %d faces",
                 name, len(polytope.vertices), len(polytope.edges), len(polytope.faces))
    return validate_polytope(polytope)


def make_five_cell() -> Polytope:
    """Regular 4-simplex: every pair is an edge, every triple a face."""
    s = 1 / np.sqrt(5)
    vertices = np.array([
        [1, 1, 1, -s],
        [1, -1, -1, -s],
        [-1, 1, -1, -s],
        [-1, -1, 1, -s],
        [0, 0, 0, 4 * s],
    ])
    vertices = scale_to_radius(vertices, DISPLAY_CIRCUMRADIUS)

    edges = list(combinations(range(5), 2))
    faces = list(combinations(range(5), 3))

    return _make_polytope('5-cell', 'Pentachoron (hyper-tetrahedron)',
                          vertices, edges, faces, face_size=3)


def make_tesseract() -> Polytope:
    """Tesseract from the 16 points of {-1, 1}^4.

    Edges join points differing in one coordinate. Each square face fixes two
    coordinates and lets the other two range over {-1, 1}; the corners come
    out in the order (-,-), (-,+), (+,-), (+,+), so the last two are swapped
    to walk the square's boundary instead of its diagonal.
    """
    corners = [tuple(c) for c in product([-1, 1], repeat=4)]
    index_of: Dict[Tuple[int, ...], int] = {c: i for i, c in enumerate(corners)}

    edges = []
    for i, j in combinations(range(len(corners)), 2):
        diff = sum(a != b for a, b in zip(corners[i], corners[j]))
        if diff == 1:
            edges.append((i, j))

    faces = []
    for d1, d2 in combinations(range(4), 2):
        fixed = [d for d in range(4) if d not in (d1, d2)]
        for v1, v2 in product([-1, 1], repeat=2):
            square = []
            for a, b in product([-1, 1], repeat=2):
                coord = [0, 0, 0, 0]
                coord[d1], coord[d2] = a, b
                coord[fixed[0]], coord[fixed[1]] = v1, v2
                square.append(index_of[tuple(coord)])
            c0, c1, c2, c3 = square
            faces.append((c0, c1, c3, c2))

    vertices = scale_to_radius(np.array(corners, dtype=float), DISPLAY_CIRCUMRADIUS)
    return _make_polytope('8-cell', 'Tesseract (hyper-cube)',
                          vertices, edges, faces, face_size=4)


def _from_families(raw: List[np.ndarray]) -> np.ndarray:
    return scale_to_radius(deduplicate(raw), DISPLAY_CIRCUMRADIUS)


def make_sixteen_cell() -> Polytope:
    """16-cell from the permutations of (±1, 0, 0, 0)."""
    vertices = _from_families(expand_family((1, 0, 0, 0)))
    edges = find_edges(vertices)
    faces = find_triangles(len(vertices), edges)
    return _make_polytope('16-cell', 'Hexadecachoron (hyper-octahedron)',
                          vertices, edges, faces, face_size=3)


def make_twenty_four_cell() -> Polytope:
    """24-cell from the permutations of (±1, ±1, 0, 0)."""
    vertices = _from_families(expand_family((1, 1, 0, 0)))
    edges = find_edges(vertices)
    faces = find_triangles(len(vertices), edges)
    return _make_polytope('24-cell', 'Icositetrachoron (self-dual)',
                          vertices, edges, faces, face_size=3)


def make_one_hundred_twenty_cell() -> Polytope:
    """120-cell from seven coordinate families (circumradius 2√2 before scaling).

    Faces are not computed; the face array has shape (0, 5).
    """
    raw = []
    # 24: permutations of (0, 0, ±2, ±2)
    raw += expand_family((0, 0, 2, 2))
    # 64: permutations of (±√5, ±1, ±1, ±1)
    raw += expand_family((SQRT5, 1, 1, 1))
    # 64: permutations of (±φ⁻², ±φ, ±φ, ±φ)
    raw += expand_family((PHI_INV_SQ, PHI, PHI, PHI))
    # 64: permutations of (±φ², ±φ⁻¹, ±φ⁻¹, ±φ⁻¹)
    raw += expand_family((PHI_SQ, PHI_INV, PHI_INV, PHI_INV))
    # 96: even permutations of (±φ², ±φ⁻², ±1, 0)
    raw += expand_family((PHI_SQ, PHI_INV_SQ, 1, 0), even_only=True)
    # 96: even permutations of (±√5, ±φ⁻¹, ±φ, 0)
    raw += expand_family((SQRT5, PHI_INV, PHI, 0), even_only=True)
    # 192: even permutations of (±2, ±1, ±φ, ±φ⁻¹)
    raw += expand_family((2, 1, PHI, PHI_INV), even_only=True)

    vertices = _from_families(raw)
    edges = find_edges(vertices)
    faces = np.zeros((0, 5), dtype=np.int64)

    return _make_polytope('120-cell', 'Hecatonicosachoron (hyper-dodecahedron)',
                          vertices, edges, faces, face_size=5)


def make_six_hundred_cell() -> Polytope:
    """600-cell from three coordinate families (circumradius 2 before scaling)."""
    raw = []
    # 8: permutations of (±2, 0, 0, 0)
    raw += expand_family((2, 0, 0, 0))
    # 16: (±1, ±1, ±1, ±1)
    raw += all_sign_variations((1, 1, 1, 1))
    # 96: even permutations of (0, ±φ⁻¹, ±1, ±φ)
    raw += expand_family((0, PHI_INV, 1, PHI), even_only=True)

    vertices = _from_families(raw)
    edges = find_edges(vertices)
    faces = find_triangles(len(vertices), edges)

    return _make_polytope('600-cell', 'Hexacosichoron (hyper-icosahedron)',
                          vertices, edges, faces, face_size=3)


POLYTOPE_BUILDERS = (
    make_five_cell,
    make_tesseract,
    make_sixteen_cell,
    make_twenty_four_cell,
    make_one_hundred_twenty_cell,
    make_six_hundred_cell,
)

POLYTOPE_NAMES = ('5-cell', '8-cell', '16-cell', '24-cell', '120-cell', '600-cell')


@lru_cache(maxsize=None)
def polytope_catalog() -> Tuple[Polytope, ...]:
    """Build all six polytopes once; later calls return the same tuple."""
    catalog = tuple(build() for build in POLYTOPE_BUILDERS)
    logger.debug("Polytope catalog ready: %s", ", ".join(p.name for p in catalog))
    return catalog


def get_polytope(key: Union[int, str]) -> Polytope:
    """Look up a catalog entry by position (0-5) or by name ('24-cell').

    Raises:
        ValueError: for an unknown name or an out-of-range index
    """
    catalog = polytope_catalog()
    if isinstance(key, str):
        if key not in POLYTOPE_NAMES:
            raise ValueError(f"Unknown polytope {key!r}; expected one of {POLYTOPE_NAMES}")
        return catalog[POLYTOPE_NAMES.index(key)]
    if not 0 <= key < len(catalog):
        raise ValueError(f"Polytope index {key} out of range 0..{len(catalog) - 1}")
    return catalog[key]
