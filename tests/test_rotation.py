"""Tests for rotation coefficient blocks."""

import math

import numpy as np
import pytest

from geomat.shared.rotation import (
    axis_rotation_matrix,
    euler_to_rotation_matrix,
    rotation_matrix_2d,
)


class TestRotation2D:
    """Test plane rotation."""

    def test_counter_clockwise(self):
        """Test a quarter turn maps x onto y."""
        out = np.array([1.0, 0.0]) @ rotation_matrix_2d(math.pi / 2)
        np.testing.assert_allclose(out, [0.0, 1.0], atol=1e-12)

    def test_orthonormal(self):
        """Test R @ R.T == I."""
        r = rotation_matrix_2d(0.7)
        np.testing.assert_allclose(r @ r.T, np.eye(2), atol=1e-12)


class TestAxisRotation:
    """Test single-axis rotation."""

    @pytest.mark.parametrize("axis", ["x", "y", "z"])
    def test_orthonormal_with_unit_determinant(self, axis):
        """Test every axis block is a proper rotation."""
        r = axis_rotation_matrix(axis, 1.3)
        np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(r) == pytest.approx(1.0)

    @pytest.mark.parametrize("axis, index", [("x", 0), ("y", 1), ("z", 2)])
    def test_axis_is_fixed(self, axis, index):
        """Test the rotation axis is left unchanged."""
        v = np.zeros(3)
        v[index] = 1.0
        np.testing.assert_allclose(v @ axis_rotation_matrix(axis, 0.9), v, atol=1e-12)

    def test_invalid_axis(self):
        """Test unknown axis names are rejected."""
        with pytest.raises(ValueError, match="Valid options: x, y, z"):
            axis_rotation_matrix("q", 0.1)  # type: ignore[arg-type]


class TestEuler:
    """Test yaw-pitch-roll composition."""

    def test_matches_axis_product(self):
        """Test Euler block equals Rx(yaw) @ Ry(pitch) @ Rz(roll)."""
        yaw, pitch, roll = 0.2, -1.1, 2.5
        expected = (
            axis_rotation_matrix("x", yaw)
            @ axis_rotation_matrix("y", pitch)
            @ axis_rotation_matrix("z", roll)
        )
        np.testing.assert_allclose(euler_to_rotation_matrix(yaw, pitch, roll), expected, atol=1e-12)

    def test_zero_is_identity(self):
        """Test zero angles give the identity."""
        np.testing.assert_array_equal(euler_to_rotation_matrix(0, 0, 0), np.eye(3))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
