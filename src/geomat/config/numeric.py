"""Numeric tolerances and formatting precision."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NumericConfig:
    """Tolerances shared by every matrix type.

    Attributes:
        singular_eps: Relative threshold below which a linear part counts as singular.
            For a 2D matrix the test is ``|det| <= singular_eps * |row0| * |row1|``,
            i.e. the sine of the angle between the two basis rows.
        rtol: Default relative tolerance for ``is_close`` comparisons
        atol: Default absolute tolerance for ``is_close`` comparisons
        significant_digits: Significant digits used when rendering matrices as text
    """

    singular_eps: float = 1e-12
    rtol: float = 1e-9
    atol: float = 1e-12
    significant_digits: int = 10
