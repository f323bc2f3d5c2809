"""Rotation coefficient blocks.

All blocks are written for ROW vectors (``v' = v @ R``), the convention used
by every matrix type in geomat. A row-form block is the transpose of the
familiar column-form rotation matrix, so ``(1, 0) @ rotation_matrix_2d(t)``
is ``(cos t, sin t)``: positive angles turn counter-clockwise.
"""

from __future__ import annotations

import math
from typing import Literal, TypeAlias

import numpy as np

Axis: TypeAlias = Literal["x", "y", "z"]


def rotation_matrix_2d(theta: float) -> np.ndarray:
    """Counter-clockwise plane rotation.

    :param theta: Angle in radians
    :returns: 2x2 row-form rotation block
    """
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, s], [-s, c]], dtype=np.float64)


def axis_rotation_matrix(axis: Axis, angle: float) -> np.ndarray:
    """Right-handed rotation about a single coordinate axis.

    :param axis: ``"x"``, ``"y"`` or ``"z"``
    :param angle: Angle in radians
    :returns: 3x3 row-form rotation block
    :raises ValueError: If axis is not one of x, y, z
    """
    c, s = math.cos(angle), math.sin(angle)
    if axis == "x":
        return np.array([[1, 0, 0], [0, c, s], [0, -s, c]], dtype=np.float64)
    if axis == "y":
        return np.array([[c, 0, -s], [0, 1, 0], [s, 0, c]], dtype=np.float64)
    if axis == "z":
        return np.array([[c, s, 0], [-s, c, 0], [0, 0, 1]], dtype=np.float64)
    raise ValueError(f'axis="{axis}" is not valid. Valid options: x, y, z')


def euler_to_rotation_matrix(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Yaw-pitch-roll rotation.

    Applies yaw about x first, then pitch about y, then roll about z. The
    result equals ``Rx(yaw) @ Ry(pitch) @ Rz(roll)`` with the row-form blocks
    of :func:`axis_rotation_matrix`.

    :param yaw: Rotation about x in radians
    :param pitch: Rotation about y in radians
    :param roll: Rotation about z in radians
    :returns: 3x3 row-form rotation block
    """
    sy, cy = math.sin(yaw), math.cos(yaw)
    sp, cp = math.sin(pitch), math.cos(pitch)
    sr, cr = math.sin(roll), math.cos(roll)

    R = np.empty((3, 3), dtype=np.float64)

    R[0, 0] = cp * cr
    R[0, 1] = cp * sr
    R[0, 2] = -sp

    R[1, 0] = sy * sp * cr - cy * sr
    R[1, 1] = sy * sp * sr + cy * cr
    R[1, 2] = sy * cp

    R[2, 0] = cy * sp * cr + sy * sr
    R[2, 1] = cy * sp * sr - sy * cr
    R[2, 2] = cy * cp

    return R
