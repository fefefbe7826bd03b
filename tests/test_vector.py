import math

import pytest

from voxelburden.vector import Vec3, look_at


def _apply(matrix, point):
    vec = (point.x, point.y, point.z, 1.0)
    return tuple(sum(a * b for a, b in zip(row, vec)) for row in matrix)


def test_length_of_pythagorean_vector():
    assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec3(2.0, -7.0, 1.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalized_zero_raises():
    with pytest.raises(ValueError):
        Vec3().normalized()


def test_cross_of_axes():
    x, y, z = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert y.cross(x) == -z


def test_cross_is_orthogonal_to_inputs():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_distance_symmetric_and_matches_difference():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(4.0, 6.0, 3.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())


def test_arithmetic_operators():
    a = Vec3(1.0, 2.0, 3.0)
    assert a + a == a * 2
    assert 2 * a == a * 2
    assert (a * 2) / 2 == a
    assert a - a == Vec3()
    assert tuple(a) == (1.0, 2.0, 3.0)


def test_look_at_maps_eye_to_origin():
    eye = Vec3(3.0, 4.0, 5.0)
    m = look_at(eye, Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    x, y, z, w = _apply(m, eye)
    assert (x, y, z) == pytest.approx((0.0, 0.0, 0.0))
    assert w == 1.0


def test_look_at_places_target_on_negative_z():
    eye = Vec3(1.0, 2.0, 3.0)
    center = Vec3(-2.0, 0.0, 7.0)
    m = look_at(eye, center, Vec3(0.0, 1.0, 0.0))
    x, y, z, _ = _apply(m, center)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(0.0, abs=1e-9)
    assert z == pytest.approx(-eye.distance(center))


def test_look_at_rotation_rows_are_orthonormal():
    m = look_at(Vec3(0.0, 5.0, 0.0), Vec3(1.0, 0.0, 2.0), Vec3(0.0, 1.0, 0.0))
    rows = [Vec3(*row[:3]) for row in m[:3]]
    for i, a in enumerate(rows):
        assert a.length() == pytest.approx(1.0)
        for b in rows[i + 1:]:
            assert math.isclose(a.dot(b), 0.0, abs_tol=1e-9)