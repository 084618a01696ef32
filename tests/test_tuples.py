import math

import pytest

from igmesh.tuples import Vector


def test_construction_from_components_and_iterable_agree():
    assert Vector(1, 2, 3) == Vector([1, 2, 3])
    assert Vector(1, 2, 3) == (1, 2, 3)


def test_empty_vector_is_rejected():
    with pytest.raises(ValueError):
        Vector()


def test_non_numeric_component_is_rejected():
    with pytest.raises(TypeError):
        Vector(1, "a", 3)


def test_indexing_and_named_components():
    v = Vector(4, 5, 6)
    assert (v[0], v[1], v[2]) == (4, 5, 6)
    assert (v.x, v.y, v.z) == (4, 5, 6)
    assert len(v) == 3
    assert list(v) == [4, 5, 6]


def test_str_uses_parenthesised_comma_list():
    assert str(Vector(1, 2, 3)) == "(1,2,3)"
    assert str(Vector(0.5, 1.5)) == "(0.5,1.5)"


def test_add_then_subtract_round_trips():
    a = Vector(1, 2, 3)
    b = Vector(7, -4, 10)
    assert (a + b) - b == a


def test_negation_cancels():
    a = Vector(3, -2, 8, 1)
    assert a + (-a) == Vector(0, 0, 0, 0)
    assert -(-a) == a


def test_scalar_multiplication_is_commutative_and_invertible():
    a = Vector(2, 5, -7)
    assert a * 3 == 3 * a
    assert (a * 4) / 4 == a


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vector(1, 2) + Vector(1, 2, 3)
    with pytest.raises(ValueError):
        Vector(1, 2).dot(Vector(1, 2, 3))


def test_dot_is_symmetric_and_matches_bar_operator():
    a = Vector(1.5, 2.0, -3.0)
    b = Vector(4.0, -1.0, 0.5)
    assert a.dot(b) == b.dot(a)
    assert (a | b) == a.dot(b)


def test_length_sq_equals_self_dot():
    a = Vector(3, 4, 12)
    assert a.length_sq() == a.dot(a)


def test_normalized_has_unit_length_and_same_direction():
    a = Vector(3.0, -4.0, 12.0)
    n = a.normalized()
    assert n.length_sq() == pytest.approx(1.0)
    scale = math.sqrt(a.length_sq())
    for got, original in zip(n, a):
        assert got * scale == pytest.approx(original)


def test_normalizing_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector(0.0, 0.0, 0.0).normalized()


def test_cross_of_unit_axes():
    assert Vector(1, 0, 0).cross(Vector(0, 1, 0)) == Vector(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == -c


def test_cross_requires_three_components():
    with pytest.raises(ValueError):
        Vector(1, 2).cross(Vector(3, 4))


def test_vectors_are_hashable_by_value():
    assert len({Vector(1, 2, 3), Vector([1, 2, 3]), Vector(3, 2, 1)}) == 2