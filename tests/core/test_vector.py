"""Tests for the Vec3 value type."""

import math

import pytest

from asteroidfield.core.vector import Vec3


def test_arithmetic_returns_new_vectors():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)

    assert a + b == Vec3(5.0, 7.0, 9.0)
    assert b - a == Vec3(3.0, 3.0, 3.0)
    assert -a == Vec3(-1.0, -2.0, -3.0)
    assert a * 2.0 == Vec3(2.0, 4.0, 6.0)
    assert 2.0 * a == Vec3(2.0, 4.0, 6.0)
    assert a == Vec3(1.0, 2.0, 3.0), "operands must not be mutated"


def test_dot_and_cross_follow_right_hand_rule():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)

    assert x.dot(y) == 0.0
    assert x.cross(y) == Vec3(0.0, 0.0, 1.0)


def test_lengths_and_distances():
    v = Vec3(3.0, 4.0, 12.0)

    assert v.length_squared() == 169.0
    assert v.length() == 13.0
    assert Vec3.zero().distance_squared_to(v) == 169.0


def test_normalized_unit_length_and_zero_fallback():
    assert math.isclose(Vec3(0.0, 3.0, 4.0).normalized().length(), 1.0)
    assert Vec3.zero().normalized() == Vec3.zero()
    assert Vec3.zero().normalized(fallback=Vec3(0.0, 0.0, 1.0)) == Vec3(0.0, 0.0, 1.0)


def test_of_requires_three_components():
    assert Vec3.of((1, 2, 3)) == Vec3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vec3.of([1.0, 2.0])


def test_iteration_and_tuple():
    v = Vec3(1.0, 2.0, 3.0)
    assert list(v) == [1.0, 2.0, 3.0]
    assert v.as_tuple() == (1.0, 2.0, 3.0)
