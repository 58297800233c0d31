import math

import pytest

from actionweave.vectors import Vec2, Vec3


def test_unit_vectors_have_length_one():
    for vector in (Vec2.X, Vec2.Y, Vec2.NEG_X, Vec2.NEG_Y):
        assert vector.length() == 1.0


def test_zero_has_length_zero():
    assert Vec2.ZERO.length() == 0.0
    assert Vec3.ZERO.length() == 0.0


def test_vec2_clamp_limits_each_component():
    clamped = Vec2(2.0, -3.0).clamp(Vec2.NEG_ONE, Vec2.ONE)
    assert clamped == Vec2(1.0, -1.0)


def test_vec2_clamp_keeps_values_inside_bounds():
    inside = Vec2(0.5, -0.25)
    assert inside.clamp(Vec2.NEG_ONE, Vec2.ONE) == inside


def test_vec3_clamp_limits_each_component():
    clamped = Vec3(5.0, -5.0, 0.5).clamp(Vec3.NEG_ONE, Vec3.ONE)
    assert clamped == Vec3(1.0, -1.0, 0.5)


def test_clamp_with_inverted_bounds_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).clamp(Vec2.ONE, Vec2.NEG_ONE)
    with pytest.raises(ValueError):
        Vec3(0.0, 0.0, 0.0).clamp(Vec3.ONE, Vec3.NEG_ONE)


def test_normalize_gives_unit_length_in_same_direction():
    vector = Vec2(3.0, -7.0)
    unit = vector.normalize()
    assert math.isclose(unit.length(), 1.0)
    assert math.isclose(unit.x * vector.y, unit.y * vector.x)
    assert unit.x > 0 and unit.y < 0


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2.ZERO.normalize()


def test_arithmetic_round_trip():
    a = Vec2(0.5, 0.7)
    b = Vec2(0.25, -0.1)
    assert (a + b) - b == a
    assert -(-a) == a
    c = Vec3(0.5, 0.7, 0.9)
    assert c + Vec3.ZERO == c


def test_vectors_are_hashable_and_comparable():
    assert {Vec2(0.5, 0.7): "a"}[Vec2(0.5, 0.7)] == "a"
    assert Vec3(0.5, 0.7, 0.9) == Vec3(0.5, 0.7, 0.9)