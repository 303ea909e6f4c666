"""RGBA colour with float channels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


def _to_byte(value: float) -> int:
    return int(value * 255) & 0xFF


@dataclass(init=False)
class Color:
    """An RGBA colour with channels in the 0..1 range.

    ``Color()`` is opaque white, ``Color(v)`` an opaque grey, and
    ``Color(r, g, b[, a])`` sets the channels directly.
    """

    r: float
    g: float
    b: float
    a: float

    def __init__(
        self,
        r: float = 1.0,
        g: Optional[float] = None,
        b: Optional[float] = None,
        a: float = 1.0,
    ) -> None:
        if (g is None) != (b is None):
            raise TypeError("Color needs one value or all of r, g and b")
        self.r = float(r)
        self.g = float(r if g is None else g)
        self.b = float(r if b is None else b)
        self.a = float(a)

    @classmethod
    def rgba_float(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def rgb(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Build a colour from 0..255 channel values."""
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value out of range 0..255: {channel}")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def hsv(cls, h: float, s: float, v: float) -> Color:
        """Build an opaque colour from hue in degrees, saturation and value."""
        h = math.fmod(h, 360.0)
        s = min(max(s, 0.0), 1.0)
        v = min(max(v, 0.0), 1.0)

        hi = int(math.fmod(math.floor(h / 60.0), 6))
        f = h / 60.0 - hi

        p = v * (1.0 - s)
        q = v * (1.0 - s * f)
        t = v * (1.0 - s * (1.0 - f))

        sectors = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
        }
        channels = sectors.get(hi)
        if channels is None:
            return cls()
        return cls(*channels)

    def __str__(self) -> str:
        return "Color({}, {}, {}, {})".format(
            _to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a)
        )