"""Small numeric helpers."""

from __future__ import annotations

import math
from typing import Any, TypeVar

T = TypeVar("T")


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Clamp ``value`` into the range; the bounds may be given in either order."""
    if minimum > maximum:  # type: ignore[operator]
        minimum, maximum = maximum, minimum
    value = max(value, minimum)  # type: ignore[type-var]
    return min(value, maximum)  # type: ignore[type-var]


def lerp(start: Any, end: Any, t: float) -> Any:
    """Linear interpolation between ``start`` and ``end``; works for numbers and vectors."""
    return start + (end - start) * t


def atan2(y: float, x: float) -> float:
    return math.atan2(y, x)