import math

import pytest

from yapround.errors import PointError
from yapround.radiuspoint import (RadiusPoint, mirror, normalize,
                                  signed_area, transform)
## unit tests for yapround radiuspoint.py


class TestNormalize:
    """radius defaulting and canonical form"""

    def test_two_component_points_get_zero_radius(self):
        pts = normalize([[0, 0], [10, 0], (10, 10)])
        assert pts == [(0, 0, 0), (10, 0, 0), (10, 10, 0)]
        assert all(p.r == 0 for p in pts)

    def test_three_component_radius_preserved(self):
        pts = normalize([[0, 0, 1.5], [10, 0, 0.25], [5, 5, -2]])
        assert [p.r for p in pts] == [1.5, 0.25, -2]

    def test_excess_components_ignored(self):
        assert normalize([[1, 2, 3, 4, 5]]) == [RadiusPoint(1, 2, 3)]

    def test_mixed_and_order(self):
        raw = [[3, 4], [1, 2, 7], [0, 0]]
        pts = normalize(raw)
        assert [(p.x, p.y) for p in pts] == [(3, 4), (1, 2), (0, 0)]
        assert pts[1].r == 7

    def test_empty(self):
        assert normalize([]) == []

    def test_idempotent(self):
        raw = [[0, 0], [10, 0, 2], [10, 10], [0, 10, 1]]
        once = normalize(raw)
        assert normalize(once) == once

    def test_strict_rejects_short_point(self):
        with pytest.raises(PointError):
            normalize([[0, 0], [1]], strict=True)

    def test_strict_rejects_non_numeric(self):
        with pytest.raises(PointError):
            normalize([[0, 'a']], strict=True)
        with pytest.raises(PointError):
            normalize([[0, 1, True]], strict=True)

    def test_strict_accepts_good_points(self):
        assert normalize([[0, 0], [1, 2, 0.5]], strict=True) == [(0, 0, 0), (1, 2, 0.5)]

    def test_point_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize([5], strict=True)


class TestTransform:

    square = [[0, 0], [10, 0, 1], [10, 10, 2], [0, 10]]

    def test_identity(self):
        assert transform(self.square, [0, 0], 0) == normalize(self.square)

    def test_translation_composes(self):
        once = transform(transform(self.square, [1, 2], 0), [3, -5], 0)
        single = transform(self.square, [4, -3], 0)
        for a, b in zip(once, single):
            assert a.x == pytest.approx(b.x)
            assert a.y == pytest.approx(b.y)
            assert a.r == b.r

    def test_rotation_then_translation(self):
        out = transform([[1, 0, 3]], [5, 5], 90)
        assert out[0].x == pytest.approx(5.0)
        assert out[0].y == pytest.approx(6.0)
        assert out[0].r == 3

    def test_rotate_round_trip(self):
        theta = 37.5
        there = transform(self.square, [0, 0], theta)
        back = transform(there, [0, 0], -theta)
        for a, b in zip(back, normalize(self.square)):
            assert a.x == pytest.approx(b.x, abs=1e-9)
            assert a.y == pytest.approx(b.y, abs=1e-9)
            assert a.r == b.r

    def test_preserves_length_and_order(self):
        out = transform(self.square, [2, 2], 45)
        assert len(out) == len(self.square)
        assert [p.r for p in out] == [0, 1, 2, 0]

    def test_rotation_preserves_distance(self):
        out = transform([[3, 4]], [0, 0], 123.0)
        assert math.hypot(out[0].x, out[0].y) == pytest.approx(5.0)

    def test_empty(self):
        assert transform([], [1, 1], 30) == []


class TestMirror:

    def test_mirror_about_x_axis(self):
        half = [[0, 0], [10, 0, 1], [10, 5, 2]]
        full = mirror(half)
        assert full[:3] == normalize(half)
        tail = full[3:]
        assert [(round(p.x, 9), round(p.y, 9), p.r) for p in tail] == \
            [(10, -5, 2), (10, 0, 1), (0, 0, 0)]

    def test_end_attenuation_drops_points_on_the_line(self):
        half = [[0, 0], [10, 0, 1], [10, 5, 2], [0, 5]]
        full = mirror(half, end_attenuation=(1, 0))
        assert len(full) == 7
        assert full[-1].x == pytest.approx(10.0)
        assert full[-1].y == pytest.approx(0.0)

    def test_mirror_at_angle(self):
        full = mirror([[1, 0]], angle=90)
        assert full[1].x == pytest.approx(-1.0)
        assert full[1].y == pytest.approx(0.0, abs=1e-12)

    def test_mirrored_square_is_symmetric(self):
        full = mirror([[-5, 0], [-5, 5], [5, 5], [5, 0]], end_attenuation=(0, 0))
        assert signed_area(full) == pytest.approx(-100.0)


def test_signed_area_winding():
    ccw = [[0, 0], [4, 0], [4, 3], [0, 3]]
    assert signed_area(ccw) == pytest.approx(12.0)
    assert signed_area(list(reversed(ccw))) == pytest.approx(-12.0)
