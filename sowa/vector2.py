"""Two-dimensional float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Union

Number = Union[int, float]


@dataclass(init=False)
class Vector2:
    """A mutable 2D vector.

    ``Vector2()`` is the zero vector, ``Vector2(v)`` sets both components
    to ``v`` and ``Vector2(x, y)`` sets them separately.
    """

    x: float
    y: float

    def __init__(self, x: Number = 0.0, y: Optional[Number] = None) -> None:
        self.x = float(x)
        self.y = float(x if y is None else y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, point: Vector2) -> float:
        return (point - self).length()

    def normalize(self) -> None:
        """Scale this vector in place to unit length; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return
        self.x /= size
        self.y /= size

    def normalized(self) -> Vector2:
        vec = Vector2(self.x, self.y)
        vec.normalize()
        return vec

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented