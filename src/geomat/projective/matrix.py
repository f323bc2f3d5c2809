"""
4x4 homogeneous transforms.

A :class:`ProjectiveMatrix4D` stores a full 4x4 matrix with no elided
entries, so any projective transform (including the perspective divide of a
camera projection) is representable. Points are ROW vectors
``(x, y, z, w)`` multiplied from the left; row 3 carries the translation.

Convention: ``a @ b`` applies ``a`` FIRST, then ``b``, exactly as for
:class:`~geomat.affine.AffineMatrix2D`.

Example:
    >>> m = scale3d(2).translate(0, 0, -5)
    >>> m.apply_to_vector((1, 1, 1, 1))
    (2.0, 2.0, -3.0, 1.0)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeAlias

import numpy as np

from geomat.config.config import NUMERIC_CONFIG
from geomat.errors import SingularMatrixError
from geomat.shared.format import format_matrix
from geomat.shared.rotation import Axis, axis_rotation_matrix, euler_to_rotation_matrix

logger = logging.getLogger(__name__)

ArrayLike: TypeAlias = np.ndarray | Sequence[Sequence[float]]


class ProjectiveMatrix4D:
    """Immutable 4x4 homogeneous transform.

    :param rows: Array-like of shape (4, 4)
    :raises ValueError: If rows does not have shape (4, 4)
    """

    __slots__ = ("_m",)

    def __init__(self, rows: ArrayLike):
        m = np.array(rows, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"ProjectiveMatrix4D expects shape (4, 4), got {m.shape}")
        m.flags.writeable = False
        self._m = m

    @classmethod
    def identity(cls) -> ProjectiveMatrix4D:
        """Identity transform."""
        return identity3d()

    @property
    def rows(self) -> tuple[tuple[float, float, float, float], ...]:
        """Stored entries as nested tuples."""
        return tuple(tuple(row) for row in self._m.tolist())

    def to_array(self) -> np.ndarray:
        """Matrix as a new writable (4, 4) array."""
        return self._m.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._m, dtype=dtype)

    def __getitem__(self, key):
        return self._m[key]

    def multiply(self, other: ProjectiveMatrix4D) -> ProjectiveMatrix4D:
        """Compose two transforms: ``self`` applied FIRST, then ``other``.

        :param other: Transform applied after self
        :returns: Composed transform
        :raises TypeError: If other is not a ProjectiveMatrix4D
        """
        if not isinstance(other, ProjectiveMatrix4D):
            raise TypeError(f"Cannot compose ProjectiveMatrix4D with {type(other).__name__}")
        return ProjectiveMatrix4D(self._m @ other._m)

    def __matmul__(self, other: ProjectiveMatrix4D) -> ProjectiveMatrix4D:
        if not isinstance(other, ProjectiveMatrix4D):
            return NotImplemented
        return self.multiply(other)

    def transpose(self) -> ProjectiveMatrix4D:
        """Full 4x4 transpose (converts between row- and column-vector form)."""
        return ProjectiveMatrix4D(self._m.T)

    def determinant(self) -> float:
        """Determinant of the 4x4 matrix."""
        return float(np.linalg.det(self._m))

    def inverse(self) -> ProjectiveMatrix4D:
        """General 4x4 inverse.

        :returns: Inverse transform
        :raises SingularMatrixError: If the matrix has no finite inverse
        """
        try:
            inv = np.linalg.inv(self._m)
        except np.linalg.LinAlgError as err:
            logger.debug("Singular projective matrix:\n%s", self)
            raise SingularMatrixError(
                "ProjectiveMatrix4D is singular", determinant=self.determinant()
            ) from err
        if not np.all(np.isfinite(inv)):
            raise SingularMatrixError(
                "ProjectiveMatrix4D inverse is not finite", determinant=self.determinant()
            )
        return ProjectiveMatrix4D(inv)

    def apply_to_vector(self, vector: Sequence[float]) -> tuple[float, float, float, float]:
        """Multiply the row vector ``(x, y, z, w)`` by this matrix.

        No perspective divide is performed; see
        :func:`geomat.bridge.apply_to_point3d` for that.

        :param vector: Homogeneous 4-vector
        :returns: Transformed ``(x', y', z', w')``
        :raises ValueError: If vector does not have 4 components
        """
        v = np.asarray(vector, dtype=np.float64)
        if v.shape != (4,):
            raise ValueError(f"Expected a homogeneous 4-vector (x, y, z, w), got shape {v.shape}")
        x, y, z, w = (v @ self._m).tolist()
        return x, y, z, w

    def is_close(
        self, other: ProjectiveMatrix4D, rtol: float | None = None, atol: float | None = None
    ) -> bool:
        """Entry-wise comparison within tolerance.

        :param other: Matrix to compare against
        :param rtol: Relative tolerance (default: ``NUMERIC_CONFIG.rtol``)
        :param atol: Absolute tolerance (default: ``NUMERIC_CONFIG.atol``)
        """
        return bool(
            np.allclose(
                self._m,
                other._m,
                rtol=NUMERIC_CONFIG.rtol if rtol is None else rtol,
                atol=NUMERIC_CONFIG.atol if atol is None else atol,
            )
        )

    # Fluent builders (right-multiplication: applied after self)

    def scale(
        self, sx: float, sy: float | None = None, sz: float | None = None
    ) -> ProjectiveMatrix4D:
        return self.multiply(scale3d(sx, sy, sz))

    def translate(self, tx: float, ty: float, tz: float) -> ProjectiveMatrix4D:
        return self.multiply(translate3d(tx, ty, tz))

    def rotate(self, yaw: float, pitch: float, roll: float) -> ProjectiveMatrix4D:
        return self.multiply(rotate3d(yaw, pitch, roll))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectiveMatrix4D):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"ProjectiveMatrix4D({self._m.tolist()!r})"

    def __str__(self) -> str:
        return format_matrix(self._m.tolist())


# ============================================================================
# Builders
# ============================================================================


def _from_rotation_block(rotation_3x3: np.ndarray) -> ProjectiveMatrix4D:
    m = np.eye(4, dtype=np.float64)
    m[:3, :3] = rotation_3x3
    return ProjectiveMatrix4D(m)


def identity3d() -> ProjectiveMatrix4D:
    """Identity transform."""
    return ProjectiveMatrix4D(np.eye(4, dtype=np.float64))


def scale3d(sx: float, sy: float | None = None, sz: float | None = None) -> ProjectiveMatrix4D:
    """Scale about the origin; omitted factors default to ``sx``."""
    if sy is None:
        sy = sx
    if sz is None:
        sz = sx
    return ProjectiveMatrix4D(np.diag([sx, sy, sz, 1.0]))


def translate3d(tx: float, ty: float, tz: float) -> ProjectiveMatrix4D:
    """Translation by ``(tx, ty, tz)``."""
    m = np.eye(4, dtype=np.float64)
    m[3, :3] = (tx, ty, tz)
    return ProjectiveMatrix4D(m)


def rotate3d(yaw: float, pitch: float, roll: float) -> ProjectiveMatrix4D:
    """Euler rotation: yaw about x, then pitch about y, then roll about z.

    ``rotate3d(0, 0, 0)`` is the identity and ``rotate3d(0, 0, t)`` turns the
    xy plane exactly like ``rotate2d(t)``.

    :param yaw: Radians about x
    :param pitch: Radians about y
    :param roll: Radians about z
    """
    return _from_rotation_block(euler_to_rotation_matrix(yaw, pitch, roll))


def rotate_axis3d(axis: Axis, angle: float) -> ProjectiveMatrix4D:
    """Right-handed rotation about one coordinate axis.

    :param axis: ``"x"``, ``"y"`` or ``"z"``
    :param angle: Radians
    """
    return _from_rotation_block(axis_rotation_matrix(axis, angle))
