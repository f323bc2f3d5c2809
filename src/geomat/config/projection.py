"""Projection configuration.

This module defines the clip-space depth conventions and the default
convention used by each projection family.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DepthRange(Enum):
    """Clip-space depth range produced after the perspective divide.

    - NEGATIVE_ONE_TO_ONE: near plane maps to -1, far plane to +1 (OpenGL)
    - ZERO_TO_ONE: near plane maps to 0, far plane to 1 (Direct3D, Vulkan, Metal)
    """

    NEGATIVE_ONE_TO_ONE = "[-1, 1]"
    ZERO_TO_ONE = "[0, 1]"


@dataclass(frozen=True)
class ProjectionConfig:
    """Default depth range for each projection factory.

    Attributes:
        frustum_depth: Default for ``frustum``
        perspective_depth: Default for ``perspective``
        orthographic_depth: Default for ``orthographic``
    """

    frustum_depth: DepthRange = DepthRange.NEGATIVE_ONE_TO_ONE
    perspective_depth: DepthRange = DepthRange.ZERO_TO_ONE
    orthographic_depth: DepthRange = DepthRange.NEGATIVE_ONE_TO_ONE
