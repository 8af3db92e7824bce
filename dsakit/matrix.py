"""Helpers for rectangular grids held as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def make_matrix(rows: int, cols: int, fill: T = 1) -> list[list[T]]:
    """Return a ``rows`` x ``cols`` grid with every cell set to ``fill``."""
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
    return [[fill] * cols for _ in range(rows)]


def format_matrix(matrix: Sequence[Sequence[Any]]) -> str:
    """Render a grid as text: one line per row, cells separated by spaces."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in matrix)


def _width(matrix: Sequence[Sequence[Any]]) -> int:
    """Return the common row length, raising ValueError for ragged grids."""
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("all rows of a matrix must have the same length")
    return widths.pop() if widths else 0


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return a new grid whose rows are the columns of ``matrix``."""
    _width(matrix)
    return [list(column) for column in zip(*matrix)]


def transpose_in_place(matrix: list[list[Any]]) -> None:
    """Transpose a square grid by swapping cells across the main diagonal."""
    size = len(matrix)
    if _width(matrix) != size and size:
        raise ValueError("in-place transpose needs a square matrix")
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]


def wave(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Read the grid column by column, downwards on even columns and upwards on odd ones."""
    _width(matrix)
    result: list[T] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(column if index % 2 == 0 else reversed(column))
    return result