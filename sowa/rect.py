"""Axis-aligned rectangle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """Rectangle with its origin at the bottom-left corner."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.w

    def bottom(self) -> float:
        return self.y

    def top(self) -> float:
        return self.y + self.h