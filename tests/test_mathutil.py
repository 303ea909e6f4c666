import math

import pytest

from sowa.mathutil import atan2, clamp, lerp
from sowa.vector2 import Vector2


@pytest.mark.parametrize(
    "value, expected",
    [(5, 5), (-1, 0), (11, 10), (0, 0), (10, 10)],
)
def test_clamp(value, expected):
    assert clamp(value, 0, 10) == expected


def test_clamp_swapped_bounds():
    assert clamp(11, 10, 0) == 10
    assert clamp(-3, 10, 0) == 0


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_lerp_vector_midpoint():
    result = lerp(Vector2(0, 0), Vector2(2, 4), 0.5)
    assert result == Vector2(1, 2)


def test_lerp_vector_endpoints():
    a = Vector2(-1, 3)
    b = Vector2(5, 7)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


def test_atan2_diagonal():
    assert atan2(1.0, 1.0) == pytest.approx(math.pi / 4)


def test_atan2_quadrant_sign():
    assert atan2(-1.0, -1.0) < 0