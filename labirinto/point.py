"""Two-dimensional points used to address maze cells."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane, with ``x`` as the row and ``y`` as the column."""

    x: float
    y: float

    def distance(self) -> float:
        """Return the Euclidean distance from this point to the origin."""
        return math.hypot(self.x, self.y)

    def moved(self, dx: float, dy: float) -> Point:
        """Return a new point shifted by ``dx`` along x and ``dy`` along y."""
        return Point(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"