"""
Protocol definitions for the point and rectangle types the bridge consumes.

The bridge never depends on :mod:`geomat.geom` directly. Any type with the
right coordinate attributes and a constructor taking those coordinates in
order works, e.g. a caller's own frozen dataclass.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsXY(Protocol):
    """2D point: readable ``x``/``y``, constructible as ``type(p)(x, y)``."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@runtime_checkable
class SupportsXYZ(Protocol):
    """3D point: readable ``x``/``y``/``z``, constructible as ``type(p)(x, y, z)``."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...


@runtime_checkable
class SupportsCorners(Protocol):
    """Rectangle: ``min``/``max`` corners, constructible as ``type(r)(min, max)``."""

    @property
    def min(self) -> SupportsXY: ...

    @property
    def max(self) -> SupportsXY: ...
