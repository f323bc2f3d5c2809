"""
geomat - 2D/3D geometric transform algebra

Small immutable matrices for building composite coordinate transforms.

Features:
- AffineMatrix2D: 2D affine transforms stored as a 3x2 block (elided (0, 0, 1) column)
- ProjectiveMatrix4D: general 4x4 homogeneous transforms
- Builders: identity, scale, translate, rotate, shear (2D), Euler rotation (3D)
- Projections: frustum, perspective, orthographic
- Bridge: apply 2D/3D matrices to point and rectangle values, window-to-device mapping

Conventions:
- Points are ROW vectors: v' = v @ M, translation lives in the last row
- a @ b applies a FIRST, then b; m.scale(...) is m @ scale2d(...)

Example - 2D:
    >>> from geomat import Point2D, scale2d, apply_to_point2d
    >>> m = scale2d(2, 3).translate(5, -5)  # scale, then translate
    >>> apply_to_point2d(m, Point2D(1, 1))
    Point2D(x=7.0, y=-2.0)

Example - Camera:
    >>> import math
    >>> from geomat import perspective, translate3d, apply_to_point3d, Point3D
    >>> view = translate3d(0, 0, -10)
    >>> clip = view @ perspective(math.radians(60), 16 / 9, 0.1, 100.0)
    >>> ndc = apply_to_point3d(clip, Point3D(0, 0, 0))
"""

__version__ = "0.1.0"

from geomat.affine import (
    AffineMatrix2D,
    identity2d,
    rotate2d,
    scale2d,
    shear2d,
    translate2d,
)
from geomat.bridge import (
    apply_to_point2d,
    apply_to_point3d,
    apply_to_rectangle2d,
    window_transform,
)
from geomat.config import CONFIG, DepthRange, GeomatConfig
from geomat.config.presets import (
    DOUBLE_SIZE,
    FLIP_X,
    FLIP_Y,
    FLIP_Z,
    HALF_SIZE,
    IDENTITY_2D,
    IDENTITY_3D,
    get_affine_preset,
    get_projective_preset,
)
from geomat.errors import DegenerateProjectionError, GeomatError, SingularMatrixError
from geomat.geom import Point2D, Point3D, Rectangle
from geomat.projective import (
    ProjectiveMatrix4D,
    frustum,
    identity3d,
    orthographic,
    perspective,
    rotate3d,
    rotate_axis3d,
    scale3d,
    translate3d,
)
from geomat.protocols import SupportsCorners, SupportsXY, SupportsXYZ

__all__ = [
    # Version
    "__version__",
    # Matrix types
    "AffineMatrix2D",
    "ProjectiveMatrix4D",
    # 2D builders
    "identity2d",
    "scale2d",
    "translate2d",
    "rotate2d",
    "shear2d",
    # 3D builders
    "identity3d",
    "scale3d",
    "translate3d",
    "rotate3d",
    "rotate_axis3d",
    # Projections
    "frustum",
    "perspective",
    "orthographic",
    "DepthRange",
    # Bridge
    "apply_to_point2d",
    "apply_to_rectangle2d",
    "apply_to_point3d",
    "window_transform",
    # Value types
    "Point2D",
    "Point3D",
    "Rectangle",
    # Protocols
    "SupportsXY",
    "SupportsXYZ",
    "SupportsCorners",
    # Configuration
    "CONFIG",
    "GeomatConfig",
    # Presets
    "IDENTITY_2D",
    "FLIP_X",
    "FLIP_Y",
    "DOUBLE_SIZE",
    "HALF_SIZE",
    "IDENTITY_3D",
    "FLIP_Z",
    "get_affine_preset",
    "get_projective_preset",
    # Errors
    "GeomatError",
    "SingularMatrixError",
    "DegenerateProjectionError",
]
