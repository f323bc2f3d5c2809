"""Preset library of common transforms.

Provides pre-built matrix values for frequent mirror and resize operations,
with lookup by name.
"""

from __future__ import annotations

import logging

from geomat.affine.matrix import AffineMatrix2D, identity2d, scale2d
from geomat.projective.matrix import ProjectiveMatrix4D, identity3d, scale3d

logger = logging.getLogger(__name__)

# ============================================================================
# 2D Affine Presets
# ============================================================================

IDENTITY_2D = identity2d()
FLIP_X = scale2d(-1.0, 1.0)  # Mirror across the y axis
FLIP_Y = scale2d(1.0, -1.0)  # Mirror across the x axis
DOUBLE_SIZE = scale2d(2.0)
HALF_SIZE = scale2d(0.5)

# ============================================================================
# 3D Projective Presets
# ============================================================================

IDENTITY_3D = identity3d()
FLIP_Z = scale3d(1.0, 1.0, -1.0)  # Switch between right- and left-handed view space

_AFFINE_PRESETS: dict[str, AffineMatrix2D] = {
    "identity": IDENTITY_2D,
    "flip_x": FLIP_X,
    "flip_y": FLIP_Y,
    "double_size": DOUBLE_SIZE,
    "half_size": HALF_SIZE,
}

_PROJECTIVE_PRESETS: dict[str, ProjectiveMatrix4D] = {
    "identity": IDENTITY_3D,
    "flip_z": FLIP_Z,
}


def get_affine_preset(name: str) -> AffineMatrix2D:
    """Get a 2D preset by name (case-insensitive).

    :param name: Preset name, e.g. "flip_y"
    :returns: Preset matrix
    :raises KeyError: If preset not found
    """
    key = name.lower()
    if key not in _AFFINE_PRESETS:
        available = ", ".join(sorted(_AFFINE_PRESETS))
        raise KeyError(f"Unknown affine preset '{name}'. Available: {available}")
    logger.debug("Using affine preset '%s'", key)
    return _AFFINE_PRESETS[key]


def get_projective_preset(name: str) -> ProjectiveMatrix4D:
    """Get a 3D preset by name (case-insensitive).

    :param name: Preset name, e.g. "flip_z"
    :returns: Preset matrix
    :raises KeyError: If preset not found
    """
    key = name.lower()
    if key not in _PROJECTIVE_PRESETS:
        available = ", ".join(sorted(_PROJECTIVE_PRESETS))
        raise KeyError(f"Unknown projective preset '{name}'. Available: {available}")
    logger.debug("Using projective preset '%s'", key)
    return _PROJECTIVE_PRESETS[key]
