"""Configuration for geomat.

Example:
    >>> from geomat.config import CONFIG, DepthRange
    >>> CONFIG.numeric.singular_eps
    1e-12
    >>> CONFIG.projection.perspective_depth is DepthRange.ZERO_TO_ONE
    True
"""

from geomat.config.config import (
    CONFIG,
    NUMERIC_CONFIG,
    PROJECTION_CONFIG,
    GeomatConfig,
)
from geomat.config.numeric import NumericConfig
from geomat.config.projection import DepthRange, ProjectionConfig

__all__ = [
    "CONFIG",
    "NUMERIC_CONFIG",
    "PROJECTION_CONFIG",
    "GeomatConfig",
    "NumericConfig",
    "ProjectionConfig",
    "DepthRange",
]
