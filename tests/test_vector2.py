import pytest

from sowa.vector2 import Vector2


def test_default_is_zero():
    v = Vector2()
    assert (v.x, v.y) == (0.0, 0.0)


def test_single_value_fills_both():
    v = Vector2(2.5)
    assert v.x == 2.5 and v.y == 2.5


def test_length_of_three_four():
    assert Vector2(3, 4).length() == pytest.approx(5.0)


def test_length_squared_matches_length():
    v = Vector2(1.5, -2.25)
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_normalize_zero_stays_zero():
    v = Vector2()
    v.normalize()
    assert v == Vector2(0, 0)


def test_normalized_is_unit_and_leaves_original():
    v = Vector2(7, -3)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v == Vector2(7, -3)


def test_normalize_in_place():
    v = Vector2(0, -9)
    v.normalize()
    assert v == Vector2(0, -1)


def test_add_sub_round_trip():
    a = Vector2(1.5, 2.0)
    b = Vector2(-4.0, 0.25)
    assert (a + b) - b == a


def test_negation_cancels():
    v = Vector2(3, -8)
    assert -v + v == Vector2(0, 0)


def test_scalar_mul_div_round_trip():
    v = Vector2(3, -6)
    assert (v * 4) / 4 == v
    assert 2 * v == v * 2


def test_componentwise_mul_div():
    a = Vector2(3, 5)
    b = Vector2(2, 4)
    result = (a * b) / b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_distance_is_symmetric():
    a = Vector2(1, 2)
    b = Vector2(-3, 7)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to(b) == pytest.approx((a - b).length())


def test_unpacking():
    x, y = Vector2(4, 9)
    assert (x, y) == (4.0, 9.0)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1, 1) / 0