"""Exception types raised by geomat.

Only two numerical conditions are errors: inverting a singular matrix and
building a projection from degenerate parameters. Everything else (multiply,
transpose, apply, builders) is total over finite input and lets NaN/inf
propagate per IEEE arithmetic.
"""

from __future__ import annotations


class GeomatError(Exception):
    """Base class for all geomat errors."""


class SingularMatrixError(GeomatError, ArithmeticError):
    """Raised when inverting a matrix whose linear part has no inverse.

    :param message: Human-readable description
    :param determinant: Determinant that triggered the failure, if known
    """

    def __init__(self, message: str, determinant: float | None = None):
        super().__init__(message)
        self.determinant = determinant


class DegenerateProjectionError(GeomatError, ValueError):
    """Raised when projection parameters cannot produce a finite matrix."""
