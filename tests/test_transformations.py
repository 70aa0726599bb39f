import math
import pytest

from raykernel.math import Matrix, point, vector
from raykernel.transformations import (
    translation, scaling, rotation_x, rotation_y, rotation_z, skewing
)

H = math.sqrt(2) / 2


def test_translation_moves_points():
    t = translation(5, -3, 2)
    assert t * point(-3, 4, 5) == point(2, 1, 7)
    assert t.inverse() * point(-3, 4, 5) == point(-8, 7, 3)


def test_translation_does_not_affect_vectors():
    v = vector(-3, 4, 5)
    assert translation(5, -3, 2) * v == v


def test_translation_cells():
    t = translation(5, -3, 2)
    assert (t[0, 3], t[1, 3], t[2, 3], t[3, 3]) == (5, -3, 2, 1)


def test_scaling():
    s = scaling(2, 3, 4)
    assert s * point(-4, 6, 8) == point(-8, 18, 32)
    assert s * vector(-4, 6, 8) == vector(-8, 18, 32)
    assert s.inverse() * vector(-4, 6, 8) == vector(-2, 2, 2)


def test_reflection_is_negative_scaling():
    assert scaling(-1, 1, 1) * point(2, 3, 4) == point(-2, 3, 4)


def test_rotation_x():
    p = point(0, 1, 0)
    assert rotation_x(math.pi / 4) * p == point(0, H, H)
    assert rotation_x(math.pi / 2) * p == point(0, 0, 1)
    assert rotation_x(math.pi / 4).inverse() * p == point(0, H, -H)


def test_rotation_y():
    p = point(0, 0, 1)
    assert rotation_y(math.pi / 4) * p == point(H, 0, H)
    assert rotation_y(math.pi / 2) * p == point(1, 0, 0)


def test_rotation_z_is_counter_clockwise():
    p = point(0, 1, 0)
    assert rotation_z(math.pi / 4) * p == point(-H, H, 0)
    assert rotation_z(math.pi / 2) * p == point(-1, 0, 0)


@pytest.mark.parametrize("coefficients, expected", [
    ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
    ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
    ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
    ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
    ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
    ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
])
def test_skewing(coefficients, expected):
    assert skewing(*coefficients) * point(2, 3, 4) == point(*expected)


def test_transforms_in_sequence():
    p = point(1, 0, 1)
    a = rotation_x(math.pi / 2)
    b = scaling(5, 5, 5)
    c = translation(10, 5, 7)

    p2 = a * p
    assert p2 == point(1, -1, 0)
    p3 = b * p2
    assert p3 == point(5, -5, 0)
    p4 = c * p3
    assert p4 == point(15, 0, 7)


def test_chained_transforms_apply_in_reverse_order():
    t = translation(10, 5, 7) * scaling(5, 5, 5) * rotation_x(math.pi / 2)
    assert t * point(1, 0, 1) == point(15, 0, 7)


def test_fluent_builders_apply_in_written_order():
    t = (Matrix.identity(4)
         .rotate_x(math.pi / 2)
         .scale(5, 5, 5)
         .translate(10, 5, 7))
    assert t * point(1, 0, 1) == point(15, 0, 7)


def test_fluent_builders_match_free_functions():
    assert Matrix.identity(4).rotate_y(0.3) == rotation_y(0.3)
    assert Matrix.identity(4).rotate_z(0.3) == rotation_z(0.3)
    assert Matrix.identity(4).skew(1, 2, 3, 4, 5, 6) == skewing(1, 2, 3, 4, 5, 6)
