import numpy as np
import pytest

from yapround.solid import (CheckResult, Region, Solid, loop_area,
                            prepare_loop, solid_oriented, solid_watertight)


def _tetra():
    verts = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=float)
    faces = np.array([[0, 2, 1], [0, 1, 3], [1, 2, 3], [0, 3, 2]])
    return Solid(verts, faces, ['procedure', 'tetra'])


def test_loop_area():
    assert loop_area([[0, 0], [2, 0], [2, 2], [0, 2]]) == pytest.approx(4.0)
    assert loop_area([[0, 0], [0, 2], [2, 2], [2, 0]]) == pytest.approx(-4.0)
    assert loop_area([[0, 0], [1, 1]]) == 0.0


def test_prepare_loop_drops_duplicates_and_orients():
    loop = prepare_loop([[0, 0], [0, 0], [0, 2, 1], [2, 2], [2, 0], [0, 0]])
    assert loop.shape == (4, 2)
    assert loop_area(loop) > 0
    hole = prepare_loop([[0, 0], [2, 0], [2, 2], [0, 2]], want_ccw=False)
    assert loop_area(hole) < 0


def test_region():
    region = Region.from_loop([[0, 0], [0, 10], [10, 10], [10, 0]],
                              [[[2, 2], [4, 2], [4, 4], [2, 4]]])
    assert region.area() == pytest.approx(96.0)
    assert region.bbox() == [[0.0, 0.0], [10.0, 10.0]]
    assert Region.coerce(region) is region
    both = region.union([[20, 0], [21, 0], [21, 1]])
    assert len(both.components) == 2
    assert both.area() == pytest.approx(96.5)
    assert len(list(both.loops())) == 3


def test_tetra_checks():
    sld = _tetra()
    assert sld.volume() == pytest.approx(1.0/6.0)
    assert solid_watertight(sld)
    assert solid_oriented(sld)
    assert sld.bbox() == [[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]]


def test_open_mesh_not_watertight():
    sld = _tetra()
    sld.faces = sld.faces[:3]
    result = solid_watertight(sld)
    assert isinstance(result, CheckResult)
    assert not result
    assert '3 boundary edges detected' in result.warnings


def test_inverted_mesh_not_oriented():
    sld = _tetra()
    sld.faces = sld.faces[:, ::-1].copy()
    assert solid_watertight(sld)
    assert not solid_oriented(sld)


def test_transformed_keeps_faces():
    sld = _tetra()
    T = np.identity(4)
    T[0:3, 3] = [1, 2, 3]
    moved = sld.transformed(T, 'move')
    assert moved.bbox() == [[1.0, 2.0, 3.0], [2.0, 3.0, 4.0]]
    assert np.array_equal(moved.faces, sld.faces)
    assert moved.construction == ['procedure', 'move', ['procedure', 'tetra']]
