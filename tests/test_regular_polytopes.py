import numpy as np
import pytest
import jax.numpy as jnp

from polytope4d.config import DISPLAY_CIRCUMRADIUS
from polytope4d.regular_polytopes import (
    POLYTOPE_NAMES,
    Polytope,
    find_edges,
    find_triangles,
    get_polytope,
    make_sixteen_cell,
    polytope_catalog,
    validate_polytope,
)
from polytope4d.vector_ops import distance_squared

EXPECTED = {
    # name: (vertices, edges, faces, face_size)
    '5-cell': (5, 10, 10, 3),
    '8-cell': (16, 32, 24, 4),
    '16-cell': (8, 24, 32, 3),
    '24-cell': (24, 96, 96, 3),
    '120-cell': (600, 1200, 0, 5),
    '600-cell': (120, 720, 1200, 3),
}


@pytest.fixture(scope="module")
def catalog():
    return polytope_catalog()


def test_catalog_order(catalog):
    assert tuple(p.name for p in catalog) == POLYTOPE_NAMES


def test_catalog_is_memoised(catalog):
    assert polytope_catalog() is catalog


@pytest.mark.parametrize("name", POLYTOPE_NAMES)
def test_element_counts(name):
    polytope = get_polytope(name)
    n_vertices, n_edges, n_faces, face_size = EXPECTED[name]
    assert polytope.vertices.shape == (n_vertices, 4)
    assert polytope.edges.shape == (n_edges, 2)
    assert polytope.faces.shape == (n_faces, face_size)
    assert polytope.face_size == face_size


@pytest.mark.parametrize("name", POLYTOPE_NAMES)
def test_circumradius(name):
    vertices = np.asarray(get_polytope(name).vertices)
    assert np.max(np.linalg.norm(vertices, axis=1)) == pytest.approx(DISPLAY_CIRCUMRADIUS)


@pytest.mark.parametrize("name", POLYTOPE_NAMES)
def test_vertices_are_distinct(name):
    vertices = np.asarray(get_polytope(name).vertices)
    rows, cols = np.triu_indices(len(vertices), k=1)
    assert np.min(distance_squared(vertices[rows], vertices[cols])) > 1e-6


@pytest.mark.parametrize("name", POLYTOPE_NAMES)
def test_edges_are_shortest_bonds(name):
    polytope = get_polytope(name)
    vertices = np.asarray(polytope.vertices)
    edges = np.asarray(polytope.edges)
    lengths = distance_squared(vertices[edges[:, 0]], vertices[edges[:, 1]])
    np.testing.assert_allclose(lengths, lengths[0], rtol=1e-9)

    rows, cols = np.triu_indices(len(vertices), k=1)
    assert np.min(distance_squared(vertices[rows], vertices[cols])) == pytest.approx(lengths[0])
    assert np.all(edges[:, 0] < edges[:, 1])


@pytest.mark.parametrize("name", ['5-cell', '16-cell', '24-cell', '600-cell'])
def test_triangular_faces_are_cliques(name):
    polytope = get_polytope(name)
    edge_set = {tuple(e) for e in np.asarray(polytope.edges).tolist()}
    for i, j, k in np.asarray(polytope.faces).tolist():
        assert i < j < k
        assert {(i, j), (j, k), (i, k)} <= edge_set


@pytest.mark.parametrize("name", POLYTOPE_NAMES)
def test_vertex_degree_is_uniform(name):
    polytope = get_polytope(name)
    degree = np.bincount(np.asarray(polytope.edges).ravel(), minlength=len(polytope.vertices))
    assert len(set(degree.tolist())) == 1


def test_five_cell_is_complete_graph():
    polytope = get_polytope('5-cell')
    assert {tuple(e) for e in np.asarray(polytope.edges).tolist()} == {
        (i, j) for i in range(5) for j in range(i + 1, 5)
    }


def test_tesseract_faces_walk_square_boundaries():
    polytope = get_polytope('8-cell')
    edge_set = {tuple(sorted(e)) for e in np.asarray(polytope.edges).tolist()}
    for face in np.asarray(polytope.faces).tolist():
        assert len(set(face)) == 4
        for a, b in zip(face, face[1:] + face[:1]):
            assert tuple(sorted((a, b))) in edge_set


def test_tesseract_vertices_in_lexicographic_order():
    vertices = np.asarray(get_polytope('8-cell').vertices)
    np.testing.assert_allclose(np.sign(vertices[0]), [-1, -1, -1, -1])
    np.testing.assert_allclose(np.sign(vertices[1]), [-1, -1, -1, 1])
    np.testing.assert_allclose(np.sign(vertices[-1]), [1, 1, 1, 1])


def test_get_polytope_by_index():
    assert get_polytope(3).name == '24-cell'


@pytest.mark.parametrize("key", ['7-cell', 6, -1])
def test_get_polytope_rejects_unknown(key):
    with pytest.raises(ValueError):
        get_polytope(key)


def test_find_edges_on_square():
    square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
    assert {tuple(e) for e in find_edges(square).tolist()} == {(0, 1), (1, 2), (2, 3), (0, 3)}


def test_find_edges_ignores_coincident_points():
    points = np.array([[0, 0], [0, 0], [2, 0]], dtype=float)
    assert find_edges(points).tolist() == [[0, 2], [1, 2]]


def test_find_triangles_on_k4():
    edges = np.array([(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])
    assert find_triangles(4, edges).tolist() == [[0, 1, 2], [0, 1, 3], [0, 2, 3], [1, 2, 3]]


def test_validate_rejects_face_size_mismatch():
    good = make_sixteen_cell()
    bad = good._replace(face_size=4)
    with pytest.raises(ValueError):
        validate_polytope(bad)


def test_validate_rejects_dangling_edge():
    good = make_sixteen_cell()
    bad = good._replace(edges=jnp.concatenate([good.edges, jnp.array([[0, 99]])]))
    with pytest.raises(ValueError):
        validate_polytope(bad)


def test_polytope_is_immutable():
    polytope = get_polytope('16-cell')
    assert isinstance(polytope, Polytope)
    with pytest.raises(AttributeError):
        polytope.name = 'other'
