"""Point/vector value types.

:class:`Point2D` and :class:`Point3D` double as points and vectors. Both are
frozen, so every operation returns a new value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geomat.geom.rect import Rectangle


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True, slots=True)
class Point2D:
    """X, Y coordinate pair."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, q: Point2D) -> Point2D:
        return Point2D(self.x + q.x, self.y + q.y)

    def __sub__(self, q: Point2D) -> Point2D:
        return Point2D(self.x - q.x, self.y - q.y)

    def __mul__(self, k: float) -> Point2D:
        """Scale by ``k``; use ``1 / k`` for division."""
        return Point2D(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return self.length()

    def pmul(self, q: Point2D) -> Point2D:
        """Per-element product."""
        return Point2D(self.x * q.x, self.y * q.y)

    def pabs(self) -> Point2D:
        """Per-element absolute value."""
        return Point2D(abs(self.x), abs(self.y))

    def pmax(self, q: Point2D) -> Point2D:
        """Per-element maximum."""
        return Point2D(max(self.x, q.x), max(self.y, q.y))

    def pmin(self, q: Point2D) -> Point2D:
        """Per-element minimum."""
        return Point2D(min(self.x, q.x), min(self.y, q.y))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, q: Point2D) -> float:
        return self.x * q.x + self.y * q.y

    def cross(self, q: Point2D) -> Point3D:
        """Cross product of the homogeneous lifts ``(x, y, 1)``.

        The result is the line through both points in homogeneous form.
        """
        return self.to3().cross(q.to3())

    def triple(self, q: Point2D, d: Point2D) -> float:
        """Scalar triple product ``p . (q x d)`` of the homogeneous lifts.

        Zero when the three points are collinear.
        """
        return self.to3().dot(q.cross(d))

    def floor(self) -> Point2D:
        return Point2D(math.floor(self.x), math.floor(self.y))

    def ceil(self) -> Point2D:
        return Point2D(math.ceil(self.x), math.ceil(self.y))

    def mix(self, b: Point2D, t: Point2D) -> Point2D:
        """Linear interpolation towards ``b``, with a separate parameter per axis.

        :param b: End point (reached at t = 1)
        :param t: Interpolation parameter per axis
        """
        return Point2D((1 - t.x) * self.x + t.x * b.x, (1 - t.y) * self.y + t.y * b.y)

    def degrade(self) -> tuple[int, int]:
        """Nearest integer coordinates, rounding halves away from zero."""
        return (_round_half_away(self.x), _round_half_away(self.y))

    def to3(self) -> Point3D:
        """Homogeneous lift ``(x, y, 1)``."""
        return Point3D(self.x, self.y, 1.0)

    def in_rect(self, r: Rectangle) -> bool:
        """Whether the point lies in ``r`` (min inclusive, max exclusive)."""
        return r.min.x <= self.x < r.max.x and r.min.y <= self.y < r.max.y


@dataclass(frozen=True, slots=True)
class Point3D:
    """X, Y, Z coordinate triple."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, q: Point3D) -> Point3D:
        return Point3D(self.x + q.x, self.y + q.y, self.z + q.z)

    def __sub__(self, q: Point3D) -> Point3D:
        return Point3D(self.x - q.x, self.y - q.y, self.z - q.z)

    def __mul__(self, k: float) -> Point3D:
        return Point3D(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def dot(self, q: Point3D) -> float:
        return self.x * q.x + self.y * q.y + self.z * q.z

    def cross(self, q: Point3D) -> Point3D:
        return Point3D(
            self.y * q.z - self.z * q.y,
            self.z * q.x - self.x * q.z,
            self.x * q.y - self.y * q.x,
        )

    def in_rect(self, r: Rectangle) -> bool:
        """Whether the x/y projection lies in ``r``; z is ignored."""
        return r.min.x <= self.x < r.max.x and r.min.y <= self.y < r.max.y
