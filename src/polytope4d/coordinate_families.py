"""
Combinatorial generators for 4D coordinate families.

The vertices of the 16-cell, 24-cell, 120-cell and 600-cell are described by a
handful of templates such as "all even permutations of (±φ², ±φ⁻², ±1, 0)".
The helpers here expand such a template into raw coordinates, then clean the
result up: deduplicate near-identical points and rescale to a common
circumradius.

The generators deliberately produce duplicates (sign flips of a zero
coordinate, permutations of repeated values); `deduplicate` is the single
place where those are removed.
"""

import numpy as np
from typing import List, Sequence

from .config import DEDUP_TOLERANCE

Vec4 = np.ndarray


def all_sign_variations(v: Sequence[float]) -> List[Vec4]:
    """All 16 sign flips of a 4-vector.

    Bit k of the mask flips coordinate k. Zero coordinates produce repeated
    variants, which are left for `deduplicate`.
    """
    v = np.asarray(v, dtype=float)
    variations = []
    for mask in range(16):
        signs = np.array([-1.0 if mask & (1 << k) else 1.0 for k in range(4)])
        variations.append(v * signs)
    return variations


def _permute(v: np.ndarray, even_only: bool) -> List[Vec4]:
    result = []
    order = [0, 1, 2, 3]

    def recurse(start: int, parity: int) -> None:
        if start == len(order):
            if not even_only or parity % 2 == 0:
                result.append(v[order].copy())
            return
        for i in range(start, len(order)):
            order[start], order[i] = order[i], order[start]
            recurse(start + 1, parity + (0 if i == start else 1))
            order[start], order[i] = order[i], order[start]

    recurse(0, 0)
    return result


def all_permutations(v: Sequence[float]) -> List[Vec4]:
    """All 24 orderings of the four coordinate slots."""
    return _permute(np.asarray(v, dtype=float), even_only=False)


def even_permutations(v: Sequence[float]) -> List[Vec4]:
    """The 12 orderings reachable by an even number of transpositions.

    Parity is tracked during the swap recursion: every swap of two distinct
    slots counts as one transposition, and results with odd parity are
    discarded.
    """
    return _permute(np.asarray(v, dtype=float), even_only=True)


def deduplicate(vertices: Sequence[Vec4], tolerance: float = DEDUP_TOLERANCE) -> np.ndarray:
    """Drop vertices within `tolerance` (squared distance) of an earlier one.

    First-seen order is preserved.

    Args:
        vertices: sequence of (4,) arrays, or an (N, 4) array
        tolerance: squared-distance threshold

    Returns:
        (M, 4) array of unique vertices, M <= N
    """
    vertices = np.asarray(vertices, dtype=float)
    if len(vertices) == 0:
        return vertices.reshape(0, 4)

    kept = np.empty_like(vertices)
    n_kept = 0
    for vertex in vertices:
        if n_kept:
            diff = kept[:n_kept] - vertex
            if np.min(np.sum(diff * diff, axis=1)) < tolerance:
                continue
        kept[n_kept] = vertex
        n_kept += 1
    return kept[:n_kept].copy()


def scale_to_radius(vertices: np.ndarray, target: float) -> np.ndarray:
    """Uniformly rescale so the largest vertex norm equals `target`."""
    vertices = np.asarray(vertices, dtype=float)
    max_radius = np.max(np.linalg.norm(vertices, axis=1))
    return vertices * (target / max_radius)


def expand_family(template: Sequence[float], even_only: bool = False) -> List[Vec4]:
    """Signed permutations of a template: every sign variation, then every
    (or every even) permutation of each variation.

    Args:
        template: (4,) base coordinate, e.g. (PHI_SQ, PHI_INV_SQ, 1, 0)
        even_only: restrict to even permutations

    Returns:
        List of raw (4,) coordinates, duplicates included
    """
    permute = even_permutations if even_only else all_permutations
    raw = []
    for variation in all_sign_variations(template):
        raw.extend(permute(variation))
    return raw
