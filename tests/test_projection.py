"""Tests for camera projection factories.

Tests cover:
- Near/far planes mapping to the clip depth extremes for both depth ranges
- x/y extents mapping to [-1, 1]
- Equivalence of perspective and symmetric frustum
- Orthographic zoom semantics
- Degenerate parameter rejection
"""

import math

import numpy as np
import pytest

from geomat.config import DepthRange
from geomat.errors import DegenerateProjectionError, GeomatError
from geomat.projective import frustum, orthographic, perspective


def ndc(m, x: float, y: float, z: float) -> tuple[float, float, float]:
    """Project a view-space point and apply the perspective divide."""
    cx, cy, cz, cw = m.apply_to_vector((x, y, z, 1.0))
    return cx / cw, cy / cw, cz / cw


class TestFrustum:
    """Test asymmetric frustum."""

    def test_near_plane_corners(self):
        """Test near-plane extent maps to [-1, 1] and near depth."""
        m = frustum(-2.0, 1.0, -1.0, 3.0, 1.0, 10.0)
        np.testing.assert_allclose(ndc(m, -2.0, -1.0, -1.0), (-1, -1, -1), atol=1e-12)
        np.testing.assert_allclose(ndc(m, 1.0, 3.0, -1.0), (1, 1, -1), atol=1e-12)

    def test_far_plane_corner(self):
        """Test the far-plane corner maps to the far depth extreme."""
        m = frustum(-2.0, 1.0, -1.0, 3.0, 1.0, 10.0)
        np.testing.assert_allclose(ndc(m, 10.0, 30.0, -10.0), (1, 1, 1), atol=1e-12)

    def test_w_is_negated_z(self):
        """Test w' = -z for perspective divide."""
        m = frustum(-1, 1, -1, 1, 1, 10)
        assert m.apply_to_vector((0, 0, -5, 1))[3] == 5.0

    def test_zero_to_one_depth(self):
        """Test frustum with [0, 1] depth."""
        m = frustum(-1, 1, -1, 1, 0.5, 50, depth=DepthRange.ZERO_TO_ONE)
        assert ndc(m, 0, 0, -0.5)[2] == pytest.approx(0.0, abs=1e-12)
        assert ndc(m, 0, 0, -50)[2] == pytest.approx(1.0)


class TestPerspective:
    """Test symmetric perspective."""

    def test_default_depth_near_far(self):
        """Test near maps to 0 and far to 1 by default."""
        near, far = 0.1, 100.0
        m = perspective(math.radians(60), 1.0, near, far)
        assert ndc(m, 0, 0, -near)[2] == pytest.approx(0.0, abs=1e-12)
        assert ndc(m, 0, 0, -far)[2] == pytest.approx(1.0)

    def test_negative_one_to_one_depth(self):
        """Test near maps to -1 and far to 1 with OpenGL depth."""
        near, far = 0.1, 100.0
        m = perspective(math.radians(60), 1.0, near, far, depth=DepthRange.NEGATIVE_ONE_TO_ONE)
        assert ndc(m, 0, 0, -near)[2] == pytest.approx(-1.0)
        assert ndc(m, 0, 0, -far)[2] == pytest.approx(1.0)

    def test_scales(self):
        """Test horizontal and vertical scale factors."""
        fov, aspect = math.radians(75), 16 / 9
        m = perspective(fov, aspect, 1, 10)
        assert m[0, 0] == pytest.approx(1 / (aspect * math.tan(fov / 2)))
        assert m[1, 1] == pytest.approx(1 / math.tan(fov / 2))

    def test_edge_of_view_maps_to_one(self):
        """Test a point on the top plane lands on y = 1."""
        fov = math.radians(90)
        m = perspective(fov, 2.0, 1, 10)
        x, y, _ = ndc(m, 2.0 * 5.0, 5.0, -5.0)
        assert x == pytest.approx(1.0)
        assert y == pytest.approx(1.0)

    @pytest.mark.parametrize("depth", list(DepthRange))
    def test_matches_symmetric_frustum(self, depth):
        """Test perspective equals the equivalent frustum."""
        fov, aspect, near, far = math.radians(50), 1.5, 0.5, 20.0
        top = near * math.tan(fov / 2)
        right = top * aspect
        expected = frustum(-right, right, -top, top, near, far, depth=depth)
        assert perspective(fov, aspect, near, far, depth=depth).is_close(expected)


class TestOrthographic:
    """Test orthographic projection."""

    def test_visible_extent(self):
        """Test the half-extent width / (2 * zoom) maps to 1."""
        m = orthographic(2.0, 800.0, 600.0, 1.0, 10.0)
        x, y, z = ndc(m, 200.0, 150.0, -1.0)
        assert (x, y) == pytest.approx((1.0, 1.0))
        assert z == pytest.approx(-1.0)
        assert ndc(m, 0, 0, -10.0)[2] == pytest.approx(1.0)

    def test_doubling_zoom_halves_extent(self):
        """Test doubling zoom doubles NDC coordinates of the same point."""
        one = orthographic(1.0, 800.0, 600.0, 1.0, 10.0)
        two = orthographic(2.0, 800.0, 600.0, 1.0, 10.0)
        x1, y1, _ = ndc(one, 100.0, 50.0, -2.0)
        x2, y2, _ = ndc(two, 100.0, 50.0, -2.0)
        assert x2 == pytest.approx(2 * x1)
        assert y2 == pytest.approx(2 * y1)

    def test_w_unchanged(self):
        """Test orthographic keeps w."""
        m = orthographic(1.0, 2.0, 2.0, 1.0, 10.0)
        assert m.apply_to_vector((3, 4, -5, 1))[3] == 1.0

    def test_zero_to_one_depth(self):
        """Test orthographic with [0, 1] depth."""
        m = orthographic(1.0, 2.0, 2.0, 1.0, 11.0, depth=DepthRange.ZERO_TO_ONE)
        assert ndc(m, 0, 0, -1.0)[2] == pytest.approx(0.0, abs=1e-12)
        assert ndc(m, 0, 0, -11.0)[2] == pytest.approx(1.0)


class TestDegenerateParameters:
    """Test invalid-input detection."""

    @pytest.mark.parametrize(
        "near, far",
        [(1.0, 1.0), (0.0, 10.0), (-1.0, 10.0), (1.0, 0.0), (1.0, -5.0), (math.nan, 10.0)],
    )
    def test_bad_depth_planes(self, near, far):
        """Test all factories reject bad near/far."""
        with pytest.raises(DegenerateProjectionError):
            frustum(-1, 1, -1, 1, near, far)
        with pytest.raises(DegenerateProjectionError):
            perspective(1.0, 1.0, near, far)
        with pytest.raises(DegenerateProjectionError):
            orthographic(1.0, 1.0, 1.0, near, far)

    def test_coinciding_planes_message(self):
        """Test message names the problem."""
        with pytest.raises(DegenerateProjectionError, match="coincide"):
            perspective(1.0, 1.0, 5.0, 5.0)

    def test_frustum_zero_extent(self):
        """Test left == right and bottom == top are rejected."""
        with pytest.raises(DegenerateProjectionError, match="left and right"):
            frustum(1, 1, -1, 1, 1, 10)
        with pytest.raises(DegenerateProjectionError, match="bottom and top"):
            frustum(-1, 1, 2, 2, 1, 10)

    @pytest.mark.parametrize("fov", [0.0, -0.5, math.pi, 4.0, math.inf])
    def test_perspective_bad_fov(self, fov):
        """Test fov must lie in (0, pi)."""
        with pytest.raises(DegenerateProjectionError):
            perspective(fov, 1.0, 1.0, 10.0)

    def test_perspective_bad_aspect(self):
        """Test aspect must be positive."""
        with pytest.raises(DegenerateProjectionError, match="aspect=0"):
            perspective(1.0, 0, 1.0, 10.0)

    @pytest.mark.parametrize(
        "zoom, width, height", [(0.0, 1.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, -2.0)]
    )
    def test_orthographic_bad_sizes(self, zoom, width, height):
        """Test zoom, width and height must be positive."""
        with pytest.raises(DegenerateProjectionError, match="must be positive"):
            orthographic(zoom, width, height, 1.0, 10.0)

    def test_non_finite_result(self):
        """Test overflow to inf is reported instead of returned."""
        with pytest.raises(DegenerateProjectionError, match="non-finite"):
            orthographic(1e308, 1.0, 1.0, 1.0, 10.0)

    def test_is_value_error(self):
        """Test the error is both a ValueError and a GeomatError."""
        with pytest.raises(ValueError):
            perspective(1.0, 1.0, 1.0, 1.0)
        with pytest.raises(GeomatError):
            perspective(1.0, 1.0, 1.0, 1.0)

    def test_non_numeric_raises_type_error(self):
        """Test non-numbers are a TypeError."""
        with pytest.raises(TypeError, match="must be a number"):
            perspective(1.0, "wide", 1.0, 10.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
