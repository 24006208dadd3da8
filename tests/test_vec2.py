import math

import pytest

from zombiefield.vec2 import Vec2


def test_default_is_origin():
    v = Vec2()
    assert (v.x, v.y) == (0.0, 0.0)


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.25)
    b = Vec2(-7.0, 3.5)
    result = (a + b) - b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_mul_matches_repeated_add():
    v = Vec2(1.25, -3.5)
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_iadd_and_isub_mutate_in_place():
    v = Vec2(1.0, 2.0)
    original = v
    v += Vec2(3.0, 4.0)
    v -= Vec2(3.0, 4.0)
    assert v is original
    assert v == Vec2(1.0, 2.0)


def test_magnitude_of_three_four():
    assert Vec2(3.0, 4.0).magnitude() == pytest.approx(5.0)


@pytest.mark.parametrize("x, y", [(3.0, 4.0), (-1.0, 0.5), (0.0, -9.0), (1e-3, 2e-3)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    v = Vec2(x, y)
    n = v.normalized()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.inclination() == pytest.approx(v.inclination())


def test_normalized_zero_is_zero():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


def test_distance_is_symmetric_and_matches_difference():
    a = Vec2(2.0, -1.0)
    b = Vec2(-4.0, 7.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).magnitude())
    assert a.distance(a) == 0.0


@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, math.pi, -2.0])
def test_rotate_preserves_magnitude(angle):
    v = Vec2(3.0, -1.5)
    assert v.rotate(angle).magnitude() == pytest.approx(v.magnitude())


def test_rotate_then_back_round_trip():
    v = Vec2(-2.5, 4.0)
    back = v.rotate(1.1).rotate(-1.1)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_inclination_reconstructs_vector():
    v = Vec2(-3.0, 2.0)
    rebuilt = Vec2(v.magnitude(), 0.0).rotate(v.inclination())
    assert rebuilt.x == pytest.approx(v.x)
    assert rebuilt.y == pytest.approx(v.y)


def test_unpacking():
    x, y = Vec2(6.0, 7.0)
    assert (x, y) == (6.0, 7.0)