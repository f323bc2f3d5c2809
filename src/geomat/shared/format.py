"""Human-readable matrix rendering.

Matrices render as a bracketed grid, one row per line, every stored entry
formatted with a fixed number of significant digits. Elided constant
entries (the ``(0, 0, 1)`` column of a 2D affine matrix) are printed as
bare integers so they read as structure rather than data.

Example:
    >>> print(format_matrix([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]], elided_column=(0, 0, 1)))
    ⎡ 1.000000000 0.000000000 0 ⎤
    ⎢ 0.000000000 1.000000000 0 ⎥
    ⎣ 0.000000000 0.000000000 1 ⎦
"""

from __future__ import annotations

from collections.abc import Sequence

from geomat.config.config import NUMERIC_CONFIG


def format_number(value: float, digits: int | None = None) -> str:
    """Format one entry with ``digits`` significant digits, keeping trailing zeros.

    :param value: Number to format
    :param digits: Significant digits (default: ``NUMERIC_CONFIG.significant_digits``)
    :returns: Formatted string
    """
    if digits is None:
        digits = NUMERIC_CONFIG.significant_digits
    return f"{float(value):#.{digits}g}"


def _brackets(index: int, count: int) -> tuple[str, str]:
    if count == 1:
        return "[", "]"
    if index == 0:
        return "⎡", "⎤"
    if index == count - 1:
        return "⎣", "⎦"
    return "⎢", "⎥"


def format_matrix(
    rows: Sequence[Sequence[float]],
    digits: int | None = None,
    elided_column: Sequence[int] | None = None,
) -> str:
    """Render a matrix as a bracketed grid.

    :param rows: Stored matrix entries, row by row
    :param digits: Significant digits per entry
    :param elided_column: Constant last column to append, one integer per row
    :returns: Multi-line string, rows separated by newlines
    """
    cells = [[format_number(v, digits) for v in row] for row in rows]
    if elided_column is not None:
        for row, extra in zip(cells, elided_column, strict=True):
            row.append(str(extra))

    widths = [max(len(row[j]) for row in cells) for j in range(len(cells[0]))]
    lines = []
    for i, row in enumerate(cells):
        left, right = _brackets(i, len(cells))
        body = " ".join(cell.rjust(width) for cell, width in zip(row, widths))
        lines.append(f"{left} {body} {right}")
    return "\n".join(lines)
