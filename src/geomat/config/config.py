"""Unified geomat configuration.

This module provides a top-level configuration dataclass that contains
the numeric and projection configurations as sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass

from geomat.config.numeric import NumericConfig
from geomat.config.projection import ProjectionConfig


@dataclass(frozen=True)
class GeomatConfig:
    """Top-level configuration.

    Provides hierarchical access to all settings:
        CONFIG.numeric.singular_eps
        CONFIG.numeric.significant_digits
        CONFIG.projection.perspective_depth

    Attributes:
        numeric: Tolerances and formatting precision
        projection: Default clip-space conventions
    """

    numeric: NumericConfig = NumericConfig()
    projection: ProjectionConfig = ProjectionConfig()


# Main singleton instance
CONFIG = GeomatConfig()

# Shorthand singleton exports
NUMERIC_CONFIG = CONFIG.numeric
PROJECTION_CONFIG = CONFIG.projection
