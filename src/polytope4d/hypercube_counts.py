"""
Element counts of n-dimensional hypercubes.

An n-cube has C(n, m) * 2^(n - m) faces of dimension m: choose which m axes
the face spans, then pick one of two values on each of the remaining n - m
axes. For the tesseract (n = 4) this gives 16 vertices, 32 edges, 24 squares,
8 cubes and 1 tesseract.
"""

from math import comb
from typing import List, NamedTuple

HYPERCUBE_NAMES = (
    'Point', 'Line Segment', 'Square', 'Cube', 'Tesseract', 'Penteract',
    'Hexeract', 'Hepteract', 'Octeract', 'Enneract', 'Dekeract',
)


class HypercubeRow(NamedTuple):
    """Counts of 0- to 4-dimensional elements of one n-cube."""
    n: int
    name: str
    vertices: int
    edges: int
    faces: int
    cells: int
    tesseracts: int


def hypercube_elements(n: int, m: int) -> int:
    """Number of m-dimensional elements of an n-dimensional hypercube."""
    if n < 0 or m < 0 or m > n:
        return 0
    return comb(n, m) * 2 ** (n - m)


def hypercube_table(max_dim: int = 10) -> List[HypercubeRow]:
    """Rows for n = 0 .. max_dim."""
    if not 0 <= max_dim < len(HYPERCUBE_NAMES):
        raise ValueError(f"max_dim must be between 0 and {len(HYPERCUBE_NAMES) - 1}")
    return [
        HypercubeRow(n, HYPERCUBE_NAMES[n], *(hypercube_elements(n, m) for m in range(5)))
        for n in range(max_dim + 1)
    ]
