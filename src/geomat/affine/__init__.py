"""
2D affine transform module.

Example:
    >>> import math
    >>> from geomat.affine import rotate2d, scale2d
    >>> m = scale2d(2.0).rotate(math.pi / 2)  # scale, then rotate
    >>> m.apply_to_vector((1, 0, 1))
"""

from geomat.affine.matrix import (
    AffineMatrix2D,
    identity2d,
    rotate2d,
    scale2d,
    shear2d,
    translate2d,
)

__all__ = [
    "AffineMatrix2D",
    "identity2d",
    "scale2d",
    "translate2d",
    "rotate2d",
    "shear2d",
]
