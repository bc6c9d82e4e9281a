"""Shape checks shared by every operation that changes the buffer length."""

from __future__ import annotations

from typing import Sequence

from .errors import DimensionMismatch, ShapeMismatch


def validate_rectangular(rows: int, cols: int, buffer_len: int) -> None:
    """Ensure ``buffer_len`` elements form a valid ``rows x cols`` matrix.

    Besides the element count this rejects negative dimensions and the
    degenerate shapes ``(0, n)`` and ``(n, 0)``: an empty matrix is ``(0, 0)``.

    >>> validate_rectangular(2, 3, 6)
    >>> validate_rectangular(0, 0, 0)
    """

    shape = (rows, cols)
    if rows < 0 or cols < 0:
        raise ShapeMismatch(shape, buffer_len, f"Dimensions must be non-negative, got {shape}.")
    if (rows == 0) != (cols == 0):
        raise ShapeMismatch(
            shape, buffer_len, f"Shape {shape} is degenerate; an empty matrix has shape (0, 0)."
        )
    if rows * cols != buffer_len:
        raise ShapeMismatch(shape, buffer_len)


def validate_row_len(candidate_row: Sequence[object], cols: int) -> int:
    """Return the column count the matrix will have after adding ``candidate_row``.

    A matrix with no columns is empty and adopts the row's length.
    """

    return _validate_len("row", len(candidate_row), cols)


def validate_col_len(candidate_col: Sequence[object], rows: int) -> int:
    """Return the row count the matrix will have after adding ``candidate_col``."""

    return _validate_len("column", len(candidate_col), rows)


def _validate_len(axis: str, actual: int, expected: int) -> int:
    if expected == 0:
        if actual == 0:
            raise DimensionMismatch(axis, 0, 0)
        return actual
    if actual != expected:
        raise DimensionMismatch(axis, expected, actual)
    return expected
