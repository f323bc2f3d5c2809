"""
Camera projection matrices.

All factories return a :class:`ProjectiveMatrix4D` in row-vector form for a
right-handed view space with the camera looking down ``-z``. After the
perspective divide x and y of the visible volume land in ``[-1, 1]`` and z
lands in the range selected by ``depth`` (see :class:`DepthRange`).

Defaults come from ``PROJECTION_CONFIG``: frustum and orthographic map depth
to ``[-1, 1]``, perspective maps depth to ``[0, 1]``.

Example:
    >>> import math
    >>> proj = perspective(math.radians(60), 16 / 9, 0.1, 100.0)
    >>> x, y, z, w = proj.apply_to_vector((0, 0, -0.1, 1))
    >>> abs(z / w) < 1e-12
    True
"""

from __future__ import annotations

import logging
import math

import numpy as np

from geomat.config.config import PROJECTION_CONFIG
from geomat.config.projection import DepthRange
from geomat.errors import DegenerateProjectionError
from geomat.projective.matrix import ProjectiveMatrix4D
from geomat.validators import check_finite, check_positive

logger = logging.getLogger(__name__)


def _check_depth_planes(near: float, far: float) -> tuple[float, float]:
    near = check_positive("near", near, DegenerateProjectionError)
    far = check_positive("far", far, DegenerateProjectionError)
    if near == far:
        raise DegenerateProjectionError(f"near and far planes coincide (near=far={near})")
    return near, far


def _check_extent(name_lo: str, lo: float, name_hi: str, hi: float) -> tuple[float, float]:
    lo = check_finite(name_lo, lo, DegenerateProjectionError)
    hi = check_finite(name_hi, hi, DegenerateProjectionError)
    if lo == hi:
        raise DegenerateProjectionError(
            f"{name_lo} and {name_hi} coincide ({name_lo}={name_hi}={lo})"
        )
    return lo, hi


def _perspective_depth(near: float, far: float, depth: DepthRange) -> tuple[float, float]:
    """Coefficients (z scale, w-row offset) mapping ``z=-near/-far`` to the clip extremes."""
    if depth is DepthRange.ZERO_TO_ONE:
        return -far / (far - near), -far * near / (far - near)
    return -(far + near) / (far - near), -2.0 * far * near / (far - near)


def _orthographic_depth(near: float, far: float, depth: DepthRange) -> tuple[float, float]:
    """Coefficients (z scale, z offset) mapping ``z=-near/-far`` to the clip extremes."""
    if depth is DepthRange.ZERO_TO_ONE:
        return -1.0 / (far - near), -near / (far - near)
    return -2.0 / (far - near), -(far + near) / (far - near)


def _finished(m: np.ndarray, kind: str) -> ProjectiveMatrix4D:
    if not np.all(np.isfinite(m)):
        raise DegenerateProjectionError(f"{kind} parameters produce a non-finite matrix")
    return ProjectiveMatrix4D(m)


def frustum(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    depth: DepthRange | None = None,
) -> ProjectiveMatrix4D:
    """Asymmetric perspective frustum from its six clip planes.

    ``left``/``right``/``bottom``/``top`` are the extents of the near plane;
    they map to ``[-1, 1]`` on x and y. ``z = -near`` maps to the near clip
    extreme and ``z = -far`` to the far one, with ``w' = -z``.

    :param left: Near-plane x of the left clip plane
    :param right: Near-plane x of the right clip plane
    :param bottom: Near-plane y of the bottom clip plane
    :param top: Near-plane y of the top clip plane
    :param near: Distance to the near plane (> 0)
    :param far: Distance to the far plane (> 0, != near)
    :param depth: Clip depth range (default: ``PROJECTION_CONFIG.frustum_depth``)
    :returns: Projection matrix
    :raises DegenerateProjectionError: If any pair of planes coincides or a distance is not positive
    """
    if depth is None:
        depth = PROJECTION_CONFIG.frustum_depth
    left, right = _check_extent("left", left, "right", right)
    bottom, top = _check_extent("bottom", bottom, "top", top)
    near, far = _check_depth_planes(near, far)
    logger.debug(
        "frustum: l=%g r=%g b=%g t=%g near=%g far=%g depth=%s",
        left, right, bottom, top, near, far, depth.value,
    )

    z_scale, z_offset = _perspective_depth(near, far, depth)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = 2.0 * near / (right - left)
    m[1, 1] = 2.0 * near / (top - bottom)
    m[2, 0] = (right + left) / (right - left)
    m[2, 1] = (top + bottom) / (top - bottom)
    m[2, 2] = z_scale
    m[2, 3] = -1.0
    m[3, 2] = z_offset
    return _finished(m, "frustum")


def perspective(
    fov: float,
    aspect: float,
    near: float,
    far: float,
    depth: DepthRange | None = None,
) -> ProjectiveMatrix4D:
    """Symmetric perspective projection.

    Equivalent to ``frustum(-r, r, -t, t, near, far)`` with
    ``t = near * tan(fov / 2)`` and ``r = t * aspect``.

    :param fov: Vertical field of view in radians, angle between top and bottom planes
    :param aspect: Width / height of the viewport
    :param near: Distance to the near plane (> 0)
    :param far: Distance to the far plane (> 0, != near)
    :param depth: Clip depth range (default: ``PROJECTION_CONFIG.perspective_depth``)
    :returns: Projection matrix
    :raises DegenerateProjectionError: If fov is outside (0, pi) or any other parameter is degenerate
    """
    if depth is None:
        depth = PROJECTION_CONFIG.perspective_depth
    fov = check_positive("fov", fov, DegenerateProjectionError)
    if fov >= math.pi:
        raise DegenerateProjectionError(f"fov={fov} must be below pi radians")
    aspect = check_positive("aspect", aspect, DegenerateProjectionError)
    near, far = _check_depth_planes(near, far)
    logger.debug(
        "perspective: fov=%g aspect=%g near=%g far=%g depth=%s",
        fov, aspect, near, far, depth.value,
    )

    half_tan = math.tan(fov / 2.0)
    z_scale, z_offset = _perspective_depth(near, far, depth)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = 1.0 / (aspect * half_tan)
    m[1, 1] = 1.0 / half_tan
    m[2, 2] = z_scale
    m[2, 3] = -1.0
    m[3, 2] = z_offset
    return _finished(m, "perspective")


def orthographic(
    zoom: float,
    width: float,
    height: float,
    near: float,
    far: float,
    depth: DepthRange | None = None,
) -> ProjectiveMatrix4D:
    """Parallel projection sized in output units.

    One world unit spans ``zoom`` output units; the visible volume is
    ``width / zoom`` by ``height / zoom`` world units centred on the view
    axis. When width and height are the window size in pixels, zoom is the
    size of one world unit in pixels. Doubling zoom halves the visible extent.

    :param zoom: Output units per world unit (> 0)
    :param width: Output width (> 0)
    :param height: Output height (> 0)
    :param near: Distance to the near plane (> 0)
    :param far: Distance to the far plane (> 0, != near)
    :param depth: Clip depth range (default: ``PROJECTION_CONFIG.orthographic_depth``)
    :returns: Projection matrix
    :raises DegenerateProjectionError: If any size is not positive or the planes coincide
    """
    if depth is None:
        depth = PROJECTION_CONFIG.orthographic_depth
    zoom = check_positive("zoom", zoom, DegenerateProjectionError)
    width = check_positive("width", width, DegenerateProjectionError)
    height = check_positive("height", height, DegenerateProjectionError)
    near, far = _check_depth_planes(near, far)
    logger.debug(
        "orthographic: zoom=%g size=%gx%g near=%g far=%g depth=%s",
        zoom, width, height, near, far, depth.value,
    )

    # Regular orthographic projection with right = width / (2 * zoom), top = height / (2 * zoom)
    z_scale, z_offset = _orthographic_depth(near, far, depth)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = 2.0 * zoom / width
    m[1, 1] = 2.0 * zoom / height
    m[2, 2] = z_scale
    m[3, 2] = z_offset
    m[3, 3] = 1.0
    return _finished(m, "orthographic")
