import numpy as np
import pytest

from wire_cube.geometry import CUBE_EDGES, Cube, Point2, Point3
from wire_cube.projection import project


def test_centered_cube_layout():
    cube = Cube.centered(50.0)
    assert len(cube) == 8
    assert cube[0] == Point3(-25.0, -25.0, -25.0)
    assert cube[1] == Point3(25.0, -25.0, -25.0)
    assert cube[2] == Point3(25.0, -25.0, 25.0)
    assert cube[3] == Point3(-25.0, -25.0, 25.0)
    # Bottom face sits under the top face at the same x/z offsets
    for i in range(4):
        top, bottom = cube[i], cube[i + 4]
        assert (top.x, top.z) == (bottom.x, bottom.z)
        assert bottom.y == 25.0


def test_cube_rejects_wrong_vertex_count():
    with pytest.raises(ValueError):
        Cube(np.zeros((7, 3)))


def test_edges_cover_cube_once():
    assert len(CUBE_EDGES) == 12
    assert len({frozenset(e) for e in CUBE_EDGES}) == 12
    assert CUBE_EDGES[:3] == ((0, 1), (4, 5), (0, 4))
    assert CUBE_EDGES[-3:] == ((3, 0), (7, 4), (3, 7))


def test_every_edge_has_side_length():
    cube = Cube.centered(50.0)
    for i, j in CUBE_EDGES:
        length = np.linalg.norm(cube.vertices[i] - cube.vertices[j])
        assert length == pytest.approx(50.0)


@pytest.mark.parametrize("z", [-1e6, -3.5, 0.0, 42.0])
def test_project_drops_z(z):
    assert project(Point3(1.5, -7.25, z)) == Point2(1.5, -7.25)


def test_point2_from_ints():
    p = Point2.from_ints(3, -4)
    assert p == Point2(3.0, -4.0)
    assert isinstance(p.x, float)
