"""
2D affine transforms.

An :class:`AffineMatrix2D` stores the 3x2 block of the homogeneous matrix

    | a   b   0 |
    | c   d   0 |
    | tx  ty  1 |

with the constant last column elided. Points are ROW vectors ``(x, y, 1)``
multiplied from the left, so row 2 carries the translation.

Convention: ``a @ b`` applies ``a`` FIRST, then ``b``. The fluent builders
are sugar for right-multiplication, so ``m.scale(2, 2)`` scales after ``m``.

Example:
    >>> m = scale2d(2, 3).translate(5, -5)
    >>> m.apply_to_vector((1, 1, 1))
    (7.0, -2.0)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TypeAlias

import numpy as np

from geomat.config.config import NUMERIC_CONFIG
from geomat.errors import SingularMatrixError
from geomat.projective.matrix import ProjectiveMatrix4D
from geomat.shared.format import format_matrix
from geomat.shared.rotation import rotation_matrix_2d

logger = logging.getLogger(__name__)

ArrayLike: TypeAlias = np.ndarray | Sequence[Sequence[float]]

_ELIDED_COLUMN = (0, 0, 1)


class AffineMatrix2D:
    """Immutable 2D affine transform (3x2 block, elided ``(0, 0, 1)`` column).

    :param rows: Array-like of shape (3, 2): two linear rows, then the translation row
    :raises ValueError: If rows does not have shape (3, 2)
    """

    __slots__ = ("_m",)

    def __init__(self, rows: ArrayLike):
        m = np.array(rows, dtype=np.float64)
        if m.shape != (3, 2):
            raise ValueError(f"AffineMatrix2D expects shape (3, 2), got {m.shape}")
        m.flags.writeable = False
        self._m = m

    @classmethod
    def from_homogeneous(cls, matrix: ArrayLike) -> AffineMatrix2D:
        """Build from a full 3x3 homogeneous matrix.

        :param matrix: 3x3 array-like whose last column is (0, 0, 1)
        :returns: AffineMatrix2D holding the first two columns
        :raises ValueError: If the shape is wrong or the last column is not (0, 0, 1)
        """
        m = np.asarray(matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError(f"Homogeneous 2D matrix must have shape (3, 3), got {m.shape}")
        if not np.allclose(m[:, 2], _ELIDED_COLUMN, rtol=0.0, atol=NUMERIC_CONFIG.atol):
            raise ValueError(
                f"Last column must be (0, 0, 1) for an affine matrix, got {tuple(m[:, 2].tolist())}"
            )
        return cls(m[:, :2])

    @classmethod
    def identity(cls) -> AffineMatrix2D:
        """Identity transform."""
        return identity2d()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rows(self) -> tuple[tuple[float, float], ...]:
        """Stored entries as nested tuples."""
        return tuple(tuple(row) for row in self._m.tolist())

    @property
    def linear(self) -> np.ndarray:
        """2x2 linear part (copy)."""
        return self._m[:2].copy()

    @property
    def translation(self) -> tuple[float, float]:
        """Translation row ``(tx, ty)``."""
        tx, ty = self._m[2].tolist()
        return tx, ty

    def homogeneous(self) -> np.ndarray:
        """Full 3x3 matrix with the elided column restored.

        :returns: New (3, 3) float64 array
        """
        return np.column_stack([self._m, _ELIDED_COLUMN])

    def to_array(self) -> np.ndarray:
        """Stored 3x2 block as a new writable array."""
        return self._m.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._m, dtype=dtype)

    def __getitem__(self, key):
        return self._m[key]

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def multiply(self, other: AffineMatrix2D) -> AffineMatrix2D:
        """Compose two transforms: ``self`` applied FIRST, then ``other``.

        The product runs over the full 3x3 matrices, so the translation row of
        the result is ``t_self @ L_other + t_other``.

        :param other: Transform applied after self
        :returns: Composed transform
        :raises TypeError: If other is not an AffineMatrix2D
        """
        if not isinstance(other, AffineMatrix2D):
            raise TypeError(f"Cannot compose AffineMatrix2D with {type(other).__name__}")
        return AffineMatrix2D((self.homogeneous() @ other.homogeneous())[:, :2])

    def __matmul__(self, other: AffineMatrix2D) -> AffineMatrix2D:
        if not isinstance(other, AffineMatrix2D):
            return NotImplemented
        return self.multiply(other)

    def transpose(self) -> AffineMatrix2D:
        """Transpose the 2x2 linear block; the translation row is kept.

        A full 3x3 transpose would move the translation into the elided
        column and leave the affine family, so only the linear block swaps.
        """
        m = self._m.copy()
        m[:2] = m[:2].T
        return AffineMatrix2D(m)

    def determinant(self) -> float:
        """Determinant of the linear part (equals the 3x3 determinant)."""
        (a, b), (c, d), _ = self._m.tolist()
        return a * d - b * c

    def inverse(self, singular_eps: float | None = None) -> AffineMatrix2D:
        """Inverse within the affine family.

        Uses the closed-form cofactor expansion of the 3x3 matrix specialized
        to the fixed last column. The linear part counts as singular when
        ``|det| <= singular_eps * |row0| * |row1|``, a scale-invariant test on
        how parallel the two basis rows are.

        :param singular_eps: Override for ``NUMERIC_CONFIG.singular_eps``
        :returns: Inverse transform
        :raises SingularMatrixError: If the linear part is singular
        """
        if singular_eps is None:
            singular_eps = NUMERIC_CONFIG.singular_eps

        (a, b), (c, d), (tx, ty) = self._m.tolist()
        det = a * d - b * c
        if abs(det) <= singular_eps * math.hypot(a, b) * math.hypot(c, d):
            logger.debug("Singular affine matrix, det=%g:\n%s", det, self)
            raise SingularMatrixError(
                f"AffineMatrix2D is singular (det={det:g}); zero scale or collinear axes "
                "have no inverse",
                determinant=det,
            )

        cofactors = np.array(
            [
                [d, -b],
                [-c, a],
                [c * ty - d * tx, -(a * ty - b * tx)],
            ],
            dtype=np.float64,
        )
        return AffineMatrix2D(cofactors / det)

    def apply_to_vector(self, vector: Sequence[float]) -> tuple[float, float]:
        """Multiply the row vector ``(x, y, w)`` by this matrix.

        ``w = 1`` transforms a point, ``w = 0`` a direction (translation ignored).
        The third output component always equals ``w`` and is dropped.

        :param vector: Homogeneous 3-vector
        :returns: Transformed ``(x', y')``
        :raises ValueError: If vector does not have 3 components
        """
        v = np.asarray(vector, dtype=np.float64)
        if v.shape != (3,):
            raise ValueError(f"Expected a homogeneous 3-vector (x, y, w), got shape {v.shape}")
        x, y = (v[:2] @ self._m[:2] + v[2] * self._m[2]).tolist()
        return x, y

    def to_projective(self) -> ProjectiveMatrix4D:
        """Embed into a 4x4 homogeneous matrix.

        The linear part fills the top-left 2x2 block and the translation goes
        to row 3, so ``(x, y, z, 1)`` maps to ``(x', y', z, 1)``.
        """
        m = np.eye(4, dtype=np.float64)
        m[:2, :2] = self._m[:2]
        m[3, :2] = self._m[2]
        return ProjectiveMatrix4D(m)

    def is_close(
        self, other: AffineMatrix2D, rtol: float | None = None, atol: float | None = None
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

    # ------------------------------------------------------------------
    # Fluent builders (right-multiplication: applied after self)
    # ------------------------------------------------------------------

    def scale(self, sx: float, sy: float | None = None) -> AffineMatrix2D:
        return self.multiply(scale2d(sx, sy))

    def translate(self, tx: float, ty: float) -> AffineMatrix2D:
        return self.multiply(translate2d(tx, ty))

    def rotate(self, theta: float) -> AffineMatrix2D:
        return self.multiply(rotate2d(theta))

    def shear(self, sx: float, sy: float) -> AffineMatrix2D:
        return self.multiply(shear2d(sx, sy))

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineMatrix2D):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"AffineMatrix2D({self._m.tolist()!r})"

    def __str__(self) -> str:
        return format_matrix(self._m.tolist(), elided_column=_ELIDED_COLUMN)


# ============================================================================
# Builders
# ============================================================================


def identity2d() -> AffineMatrix2D:
    """Identity transform."""
    return AffineMatrix2D([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]])


def scale2d(sx: float, sy: float | None = None) -> AffineMatrix2D:
    """Scale about the origin.

    :param sx: X scale factor
    :param sy: Y scale factor (defaults to sx for uniform scale)
    """
    if sy is None:
        sy = sx
    return AffineMatrix2D([[sx, 0.0], [0.0, sy], [0.0, 0.0]])


def translate2d(tx: float, ty: float) -> AffineMatrix2D:
    """Translation by ``(tx, ty)``."""
    return AffineMatrix2D([[1.0, 0.0], [0.0, 1.0], [tx, ty]])


def rotate2d(theta: float) -> AffineMatrix2D:
    """Counter-clockwise rotation about the origin.

    :param theta: Angle in radians
    """
    m = np.zeros((3, 2), dtype=np.float64)
    m[:2] = rotation_matrix_2d(theta)
    return AffineMatrix2D(m)


def shear2d(sx: float, sy: float) -> AffineMatrix2D:
    """Shear: ``(x, y) -> (x + sx*y, y + sy*x)``.

    :param sx: Amount of y added to x
    :param sy: Amount of x added to y
    """
    return AffineMatrix2D([[1.0, sy], [sx, 1.0], [0.0, 0.0]])
