"""Tests for parameter validation.

Tests cover:
- check_finite / check_positive helpers
- validate_positive decorator
- Custom error classes
"""

import math

import pytest

from geomat.errors import DegenerateProjectionError
from geomat.validators import check_finite, check_positive, validate_positive


class TestCheckFinite:
    """Test check_finite helper."""

    def test_returns_float(self):
        """Test valid values come back as floats."""
        assert check_finite("x", 3) == 3.0
        assert isinstance(check_finite("x", 3), float)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, value):
        """Test inf and nan are rejected."""
        with pytest.raises(ValueError, match="must be finite"):
            check_finite("x", value)

    def test_bool_is_not_a_number(self):
        """Test bools are rejected even though they are ints."""
        with pytest.raises(TypeError, match="must be a number"):
            check_finite("x", True)

    def test_non_numeric_raises(self):
        """Test strings are rejected."""
        with pytest.raises(TypeError, match="x must be a number, got str"):
            check_finite("x", "1.0")


class TestCheckPositive:
    """Test check_positive helper."""

    def test_valid(self):
        """Test positive values pass."""
        assert check_positive("zoom", 0.5) == 0.5

    @pytest.mark.parametrize("value", [0, 0.0, -1.0])
    def test_non_positive_raises(self, value):
        """Test zero and negatives are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            check_positive("zoom", value)

    def test_suggestion_for_near(self):
        """Test error includes suggestion for near plane."""
        with pytest.raises(ValueError, match="small positive distance"):
            check_positive("near", 0.0)

    def test_suggestion_for_aspect(self):
        """Test error includes suggestion for aspect ratio."""
        with pytest.raises(ValueError, match="16 / 9"):
            check_positive("aspect", -1.0)

    def test_no_suggestion_for_unknown_name(self):
        """Test unknown names get the bare message."""
        with pytest.raises(ValueError) as exc_info:
            check_positive("foo", -2)
        assert str(exc_info.value) == "foo=-2 must be positive."

    def test_custom_error(self):
        """Test the error class can be swapped."""
        with pytest.raises(DegenerateProjectionError):
            check_positive("far", -1.0, DegenerateProjectionError)


class TestValidatePositive:
    """Test validate_positive decorator."""

    def test_valid_positive_value(self):
        """Test decorator passes positive values."""
        @validate_positive("zoom")
        def set_zoom(self, zoom: float) -> float:
            return zoom

        assert set_zoom(None, 2.0) == 2.0

    def test_zero_raises(self):
        """Test decorator raises for zero values."""
        @validate_positive("width")
        def func(self, width: float) -> float:
            return width

        with pytest.raises(ValueError, match="width=0.0 must be positive"):
            func(None, 0.0)

    def test_infinite_raises(self):
        """Test decorator raises for infinite values."""
        @validate_positive("width")
        def func(self, width: float) -> float:
            return width

        with pytest.raises(ValueError, match="must be finite"):
            func(None, math.inf)

    def test_non_numeric_raises(self):
        """Test decorator raises for non-numeric values."""
        @validate_positive("height")
        def func(self, height: float) -> float:
            return height

        with pytest.raises(TypeError, match="must be a number"):
            func(None, "tall")

    def test_kwarg_validation(self):
        """Test decorator validates keyword arguments."""
        @validate_positive("zoom")
        def func(self, zoom: float = 1.0) -> float:
            return zoom

        assert func(None, zoom=2.0) == 2.0
        with pytest.raises(ValueError):
            func(None, zoom=-1.0)

    def test_no_value_provided(self):
        """Test defaults are not validated."""
        @validate_positive("zoom")
        def func(self, zoom: float = -1.0) -> float:
            return zoom

        assert func(None) == -1.0

    def test_custom_error(self):
        """Test decorator raises the configured error class."""
        @validate_positive("near", error=DegenerateProjectionError)
        def func(self, near: float) -> float:
            return near

        with pytest.raises(DegenerateProjectionError):
            func(None, 0.0)

    def test_preserves_metadata(self):
        """Test functools.wraps keeps the name."""
        @validate_positive("zoom")
        def set_zoom(self, zoom: float) -> float:
            return zoom

        assert set_zoom.__name__ == "set_zoom"


class TestValidatorCombinations:
    """Test combinations of validators."""

    def test_plain_function_indices(self):
        """Test param_index=0 for functions without self."""
        @validate_positive("width", param_index=0)
        @validate_positive("height", param_index=1)
        def area(width: float, height: float) -> float:
            return width * height

        assert area(2.0, 3.0) == 6.0
        with pytest.raises(ValueError, match="height"):
            area(2.0, 0.0)
        with pytest.raises(ValueError, match="width"):
            area(-2.0, 3.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
