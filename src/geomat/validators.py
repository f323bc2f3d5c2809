"""Parameter validation helpers.

Provides plain check functions and decorator forms of the same checks.
Decorators address the checked argument either by keyword name or by
positional index (``param_index``), so they work on methods (index 1, after
``self``/``cls``) as well as on plain functions (index 0).

Example:
    >>> @validate_positive("width", param_index=0)
    ... @validate_positive("height", param_index=1)
    ... def window(width: float, height: float) -> float:
    ...     return width / height
"""

from __future__ import annotations

import functools
import math
from collections.abc import Callable
from numbers import Real
from typing import Any

# Hints appended to error messages for well-known parameter names
_SUGGESTIONS: dict[str, str] = {
    "near": "The near plane must lie in front of the camera; use a small positive distance like 0.1.",
    "far": "The far plane must lie in front of the camera and differ from near.",
    "aspect": "Aspect is width / height of the viewport, e.g. 16 / 9.",
    "zoom": "Zoom is the size of one world unit in output units; 1.0 is no zoom.",
    "width": "Use the viewport or window width in pixels.",
    "height": "Use the viewport or window height in pixels.",
}


def _describe(name: str, message: str) -> str:
    hint = _SUGGESTIONS.get(name)
    return f"{message} {hint}" if hint else message


def _require_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


def check_finite(name: str, value: Any, error: type[Exception] = ValueError) -> float:
    """Check that ``value`` is a finite real number.

    :param name: Parameter name used in the error message
    :param value: Value to check
    :param error: Exception class raised on failure
    :returns: ``value`` as a float
    :raises TypeError: If value is not a real number
    """
    number = _require_number(name, value)
    if not math.isfinite(number):
        raise error(_describe(name, f"{name}={value} must be finite."))
    return number


def check_positive(name: str, value: Any, error: type[Exception] = ValueError) -> float:
    """Check that ``value`` is a finite real number greater than zero.

    :param name: Parameter name used in the error message
    :param value: Value to check
    :param error: Exception class raised on failure
    :returns: ``value`` as a float
    :raises TypeError: If value is not a real number
    """
    number = check_finite(name, value, error)
    if number <= 0:
        raise error(_describe(name, f"{name}={value} must be positive."))
    return number


def _argument_validator(
    check: Callable[[str, Any, type[Exception]], float],
    name: str,
    param_index: int,
    error: type[Exception],
) -> Callable:
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if name in kwargs:
                check(name, kwargs[name], error)
            elif len(args) > param_index:
                check(name, args[param_index], error)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_positive(
    name: str, param_index: int = 1, error: type[Exception] = ValueError
) -> Callable:
    """Decorator rejecting zero, negative or non-finite values for one argument.

    :param name: Keyword name of the argument
    :param param_index: Positional index of the argument (1 skips ``self``)
    :param error: Exception class raised on failure
    """
    return _argument_validator(check_positive, name, param_index, error)
