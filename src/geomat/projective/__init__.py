"""
4x4 homogeneous transform module with camera projections.

Example:
    >>> import math
    >>> from geomat.projective import perspective, translate3d
    >>> view = translate3d(0, 0, -10)
    >>> clip = view @ perspective(math.radians(60), 16 / 9, 0.1, 100.0)
"""

from geomat.projective.matrix import (
    ProjectiveMatrix4D,
    identity3d,
    rotate3d,
    rotate_axis3d,
    scale3d,
    translate3d,
)
from geomat.projective.projection import frustum, orthographic, perspective

__all__ = [
    "ProjectiveMatrix4D",
    "identity3d",
    "scale3d",
    "translate3d",
    "rotate3d",
    "rotate_axis3d",
    # Projections
    "frustum",
    "perspective",
    "orthographic",
]
