"""Shared utilities for geomat.

This module contains helpers used by both the 2D affine and the 4x4
projective matrix types.
"""

from geomat.shared.format import format_matrix, format_number
from geomat.shared.rotation import (
    axis_rotation_matrix,
    euler_to_rotation_matrix,
    rotation_matrix_2d,
)

__all__ = [
    # Rotation utilities
    "rotation_matrix_2d",
    "axis_rotation_matrix",
    "euler_to_rotation_matrix",
    # Format utilities
    "format_number",
    "format_matrix",
]
