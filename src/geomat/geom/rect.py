"""Axis-aligned rectangle.

A :class:`Rectangle` spans ``min`` (inclusive) to ``max`` (exclusive). It is
well-formed when ``min <= max`` on both axes; rectangles produced by
transforms may be inverted until :meth:`Rectangle.canon` is applied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geomat.geom.point import Point2D

_ZERO = Point2D(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Rectangle from ``min`` to ``max`` corner."""

    min: Point2D
    max: Point2D

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> Rectangle:
        return cls(Point2D(x0, y0), Point2D(x1, y1))

    @classmethod
    def zero(cls) -> Rectangle:
        return cls(_ZERO, _ZERO)

    def dx(self) -> float:
        """Width."""
        return self.max.x - self.min.x

    def dy(self) -> float:
        """Height."""
        return self.max.y - self.min.y

    def size(self) -> Point2D:
        return Point2D(self.dx(), self.dy())

    def center(self) -> Point2D:
        return Point2D((self.min.x + self.max.x) / 2, (self.min.y + self.max.y) / 2)

    def __add__(self, p: Point2D) -> Rectangle:
        """Translate by ``p``."""
        return Rectangle(self.min + p, self.max + p)

    def __sub__(self, p: Point2D) -> Rectangle:
        """Translate by ``-p``."""
        return Rectangle(self.min - p, self.max - p)

    def __contains__(self, p: Point2D) -> bool:
        return p.in_rect(self)

    def inset(self, n: float) -> Rectangle:
        """Shrink by ``n`` on every side (grow if negative).

        An axis narrower than ``2 * n`` collapses to its midpoint.
        """
        if self.dx() < 2 * n:
            x0 = x1 = (self.min.x + self.max.x) / 2
        else:
            x0, x1 = self.min.x + n, self.max.x - n
        if self.dy() < 2 * n:
            y0 = y1 = (self.min.y + self.max.y) / 2
        else:
            y0, y1 = self.min.y + n, self.max.y - n
        return Rectangle.from_coords(x0, y0, x1, y1)

    def is_empty(self) -> bool:
        """Whether the rectangle contains no points."""
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def intersect(self, s: Rectangle) -> Rectangle:
        """Largest rectangle contained by both; the zero rectangle if they do not overlap."""
        r = Rectangle(self.min.pmax(s.min), self.max.pmin(s.max))
        if r.is_empty():
            return Rectangle.zero()
        return r

    def union(self, s: Rectangle) -> Rectangle:
        """Smallest rectangle containing both. Empty operands are ignored."""
        if self.is_empty():
            return s
        if s.is_empty():
            return self
        return Rectangle(self.min.pmin(s.min), self.max.pmax(s.max))

    def eq(self, s: Rectangle) -> bool:
        """Whether both contain the same set of points; all empty rectangles are equal."""
        return self == s or (self.is_empty() and s.is_empty())

    def overlaps(self, s: Rectangle) -> bool:
        """Whether the intersection is non-empty."""
        return (
            not self.is_empty()
            and not s.is_empty()
            and self.min.x < s.max.x
            and s.min.x < self.max.x
            and self.min.y < s.max.y
            and s.min.y < self.max.y
        )

    def within(self, s: Rectangle) -> bool:
        """Whether every point of this rectangle is in ``s``.

        ``max`` is exclusive, so ``max`` itself need not lie in ``s``.
        """
        if self.is_empty():
            return True
        return (
            s.min.x <= self.min.x
            and self.max.x <= s.max.x
            and s.min.y <= self.min.y
            and self.max.y <= s.max.y
        )

    def canon(self) -> Rectangle:
        """Well-formed copy with min and max swapped per axis where needed."""
        return Rectangle(self.min.pmin(self.max), self.min.pmax(self.max))

    def distance(self, at: Point2D) -> float:
        """Signed distance from ``at`` to the rectangle boundary.

        Negative inside, zero on the boundary, euclidean distance outside.
        """
        half = self.size().pabs() * 0.5
        q = (at - self.center()).pabs() - half
        outside = math.hypot(max(q.x, 0.0), max(q.y, 0.0))
        inside = min(max(q.x, q.y), 0.0)
        return outside + inside

    def degrade(self) -> tuple[int, int, int, int]:
        """Nearest integer ``(x0, y0, x1, y1)``."""
        return (*self.min.degrade(), *self.max.degrade())
