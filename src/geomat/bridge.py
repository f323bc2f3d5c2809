"""
Boundary between the matrix types and point/rectangle values.

Every function reads coordinates from its input and builds a NEW value of
the same type from the transformed coordinates; inputs are never mutated.

Example:
    >>> from geomat.geom import Point2D
    >>> window = window_transform(640, 480)
    >>> apply_to_point2d(window, Point2D(0, 0))
    Point2D(x=-1.0, y=1.0)
"""

from __future__ import annotations

import logging
from typing import TypeVar

import numpy as np

from geomat.affine.matrix import AffineMatrix2D, scale2d, translate2d
from geomat.projective.matrix import ProjectiveMatrix4D
from geomat.protocols import SupportsCorners, SupportsXY, SupportsXYZ
from geomat.validators import validate_positive

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=SupportsXY)
P3 = TypeVar("P3", bound=SupportsXYZ)
R = TypeVar("R", bound=SupportsCorners)


def apply_to_point2d(matrix: AffineMatrix2D, point: P) -> P:
    """Transform a 2D point as the row vector ``(x, y, 1)``.

    :param matrix: Transform to apply
    :param point: Point with ``x``/``y`` coordinates
    :returns: New point of the same type
    """
    x, y = matrix.apply_to_vector((point.x, point.y, 1.0))
    return type(point)(x, y)


def apply_to_rectangle2d(matrix: AffineMatrix2D, rect: R) -> R:
    """Transform both corners of a rectangle independently.

    The result is NOT re-canonicalized: rotations and negative scales can
    produce a rectangle whose min exceeds its max. Use ``Rectangle.canon()``
    when a well-formed rectangle is needed.

    :param matrix: Transform to apply
    :param rect: Rectangle with ``min``/``max`` corners
    :returns: New rectangle of the same type
    """
    lo = apply_to_point2d(matrix, rect.min)
    hi = apply_to_point2d(matrix, rect.max)
    if lo.x > hi.x or lo.y > hi.y:
        logger.debug("Transformed rectangle is inverted: min=%s max=%s", lo, hi)
    return type(rect)(lo, hi)


def apply_to_point3d(matrix: ProjectiveMatrix4D, point: P3) -> P3:
    """Transform a 3D point as ``(x, y, z, 1)`` and apply the perspective divide.

    A resulting ``w`` of zero (a point on the camera plane) yields inf/NaN
    coordinates per IEEE arithmetic.

    :param matrix: Transform to apply
    :param point: Point with ``x``/``y``/``z`` coordinates
    :returns: New point of the same type
    """
    out = np.array(matrix.apply_to_vector((point.x, point.y, point.z, 1.0)))
    with np.errstate(divide="ignore", invalid="ignore"):
        x, y, z = (out[:3] / out[3]).tolist()
    return type(point)(x, y, z)


@validate_positive("width", param_index=0)
@validate_positive("height", param_index=1)
def window_transform(width: float, height: float) -> AffineMatrix2D:
    """Map pixel coordinates to device coordinates.

    Pixels have their origin at the top-left with y pointing down; device
    coordinates span ``[-1, 1]`` with the origin at the centre and y up.
    Scales by ``(2 / width, -2 / height)``, then translates by ``(-1, 1)``.

    :param width: Window width in pixels
    :param height: Window height in pixels
    :returns: Pixel-to-device transform
    :raises ValueError: If width or height is not positive
    """
    return scale2d(2.0 / width, -2.0 / height).multiply(translate2d(-1.0, 1.0))
