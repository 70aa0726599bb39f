import math
import numpy as np
import pytest

from raykernel.math import Tuple, point, vector


def test_point_and_vector_w_component():
    """w == 1 marks a point, w == 0 a vector."""
    p = point(4.3, -4.2, 3.1)
    assert (p.x, p.y, p.z, p.w) == (4.3, -4.2, 3.1, 1.0)
    assert p.is_point() and not p.is_vector()

    v = vector(4.3, -4.2, 3.1)
    assert v.w == 0.0
    assert v.is_vector() and not v.is_point()


def test_equality_uses_tolerance():
    assert point(1, 2, 3) == point(1.000001, 2, 2.999999)
    assert point(1, 2, 3) != point(1.001, 2, 3)
    assert point(1, 2, 3) != vector(1, 2, 3)


def test_add_point_and_vector_gives_point():
    a = Tuple(3, -2, 5, 1)
    b = Tuple(-2, 3, 1, 0)
    assert a + b == Tuple(1, 1, 6, 1)


def test_subtraction_keeps_point_vector_distinction():
    assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)
    assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)
    assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)
    assert vector(0, 0, 0) - vector(1, -2, 3) == vector(-1, 2, -3)


def test_additive_round_trip():
    a = Tuple(0.1, -7.3, 2.25, 1)
    b = Tuple(1e3, 0.7, -4.4, 0)
    assert a + b - b == a


def test_negate_scale_divide():
    a = Tuple(1, -2, 3, -4)
    assert -a == Tuple(-1, 2, -3, 4)
    assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
    assert 0.5 * a == Tuple(0.5, -1, 1.5, -2)
    assert a / 2 == Tuple(0.5, -1, 1.5, -2)


def test_operations_do_not_mutate_operands():
    a = vector(1, 2, 3)
    _ = a * 2
    _ = a + vector(1, 1, 1)
    _ = a.normalize()
    assert a == vector(1, 2, 3)


def test_magnitude():
    assert vector(1, 0, 0).magnitude() == 1.0
    assert vector(0, 0, 1).magnitude() == 1.0
    assert vector(1, 2, 3).magnitude() == pytest.approx(math.sqrt(14))
    assert vector(-1, -2, -3).magnitude() == pytest.approx(math.sqrt(14))


def test_magnitude_includes_w():
    assert Tuple(0, 0, 0, 2).magnitude() == pytest.approx(2.0)


def test_normalize():
    assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
    s = math.sqrt(14)
    assert vector(1, 2, 3).normalize() == vector(1 / s, 2 / s, 3 / s)
    assert vector(1, 2, 3).normalize().magnitude() == pytest.approx(1.0)


def test_normalize_zero_vector_is_not_finite():
    n = vector(0, 0, 0).normalize()
    assert all(math.isnan(c) for c in n)


def test_dot_and_cross():
    a = vector(1, 2, 3)
    b = vector(2, 3, 4)
    assert a.dot(b) == 20.0
    assert a.cross(b) == vector(-1, 2, -1)
    assert b.cross(a) == vector(1, -2, 1)
    assert a.cross(b).is_vector()


def test_reflect():
    assert vector(1, -1, 0).reflect(vector(0, 1, 0)) == vector(1, 1, 0)
    h = math.sqrt(2) / 2
    assert vector(0, -1, 0).reflect(vector(h, h, 0)) == vector(1, 0, 0)


def test_indexing():
    t = Tuple(1, 2, 3, 4)
    assert [t[i] for i in range(4)] == [1, 2, 3, 4]
    with pytest.raises(IndexError):
        t[4]
    with pytest.raises(IndexError):
        t[-1]


def test_from_sequence():
    assert Tuple.from_sequence([1, 2, 3, 1]) == point(1, 2, 3)
    with pytest.raises(ValueError):
        Tuple.from_sequence([1, 2, 3])
    with pytest.raises(ValueError):
        Tuple.from_sequence([1, 2, 3, 4, 5])


def test_to_np():
    assert np.allclose(point(1, 2, 3).to_np(), np.array([1, 2, 3, 1]))
