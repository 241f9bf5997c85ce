import pytest

from rasterkit.vector import Vector


def test_add_and_subtract_round_trip():
    a = Vector(1.5, -2.0, 3.0)
    b = Vector(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a - a == Vector(0, 0, 0)


def test_multiply_by_scalar():
    a = Vector(1.0, -2.0, 3.0)
    assert a * 2 == Vector(2.0, -4.0, 6.0)
    assert 2 * a == a * 2
    assert a * -1 == -a


def test_dot_is_symmetric_and_orthogonal_zero():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 5.0, 0.5)
    assert a.dot(b) == b.dot(a)
    assert Vector(1, 0, 0).dot(Vector(0, 1, 0)) == 0


def test_cross_of_axes():
    x = Vector(1, 0, 0)
    y = Vector(0, 1, 0)
    assert x.cross(y) == Vector(0, 0, 1)
    assert y.cross(x) == Vector(0, 0, -1)


def test_cross_is_orthogonal_to_operands():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0)
    assert c.dot(b) == pytest.approx(0)


def test_length():
    assert Vector(3, 4, 0).length() == pytest.approx(5)


def test_normalized_has_unit_length_and_same_direction():
    a = Vector(2.0, -3.0, 6.0)
    unit = a.normalized()
    assert unit.length() == pytest.approx(1)
    assert unit.dot(a) == pytest.approx(a.length())


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector(0, 0, 0).normalized()