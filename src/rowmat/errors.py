"""Exceptions raised by :mod:`rowmat`.

Every error is local and recoverable. Operations validate their input before
touching the buffer, so a matrix that raised one of these is unchanged.
"""

from __future__ import annotations

Shape = tuple[int, int]


class MatrixError(Exception):
    """Base class for all matrix errors."""


class ShapeMismatch(MatrixError, ValueError):
    """Raised when a buffer cannot be arranged into the requested shape.

    Parameters
    ----------
    shape:
        The requested ``(rows, cols)`` pair.
    size:
        Number of elements the buffer actually holds.
    reason:
        Optional override for the default message.
    """

    def __init__(self, shape: Shape, size: int, reason: str | None = None) -> None:
        self.shape = shape
        self.size = size
        if reason is None:
            reason = (
                f"Cannot arrange {size} elements into shape {shape}; "
                f"the shape holds {shape[0] * shape[1]}."
            )
        super().__init__(reason)


class DimensionMismatch(MatrixError, ValueError):
    """Raised when a new row or column has the wrong length."""

    def __init__(self, axis: str, expected: int, actual: int) -> None:
        self.axis = axis
        self.expected = expected
        self.actual = actual
        if expected == 0:
            message = f"Cannot seed an empty matrix with an empty {axis}."
        else:
            message = (
                f"The operation performed expected a {axis} of length {expected} "
                f"but received {actual}."
            )
        super().__init__(message)


class IndexOutOfBounds(MatrixError, IndexError):
    """Raised when a row, column, coordinate or offset is out of range.

    ``index`` is whatever the caller asked for (an int or a ``(row, col)``
    tuple) and ``shape`` is the matrix shape at the time of the call.
    """

    def __init__(self, message: str, *, index: object, shape: Shape) -> None:
        self.index = index
        self.shape = shape
        super().__init__(message)

    @classmethod
    def for_row(cls, row: int, shape: Shape, *, allow_end: bool = False) -> "IndexOutOfBounds":
        return cls(_describe("row", row, shape[0], allow_end), index=row, shape=shape)

    @classmethod
    def for_col(cls, col: int, shape: Shape, *, allow_end: bool = False) -> "IndexOutOfBounds":
        return cls(_describe("column", col, shape[1], allow_end), index=col, shape=shape)

    @classmethod
    def for_coord(cls, row: int, col: int, shape: Shape) -> "IndexOutOfBounds":
        lines = []
        if not 0 <= row < shape[0]:
            lines.append(_describe("row", row, shape[0], False))
        if not 0 <= col < shape[1]:
            lines.append(_describe("column", col, shape[1], False))
        return cls("\n".join(lines), index=(row, col), shape=shape)

    @classmethod
    def for_offset(cls, offset: int, shape: Shape) -> "IndexOutOfBounds":
        size = shape[0] * shape[1]
        return cls(
            f"Attempted indexing offset {offset}. The offset should be in [0, {size})",
            index=offset,
            shape=shape,
        )


class EmptyMatrix(IndexOutOfBounds):
    """Raised when removing a row or column from a matrix with no elements."""

    def __init__(self, operation: str, *, shape: Shape = (0, 0)) -> None:
        super().__init__(f"Cannot {operation} on an empty matrix.", index=None, shape=shape)
        self.operation = operation


def _describe(axis: str, index: int, bound: int, allow_end: bool) -> str:
    closing = f"{bound}]" if allow_end else f"{bound})"
    return f"Attempted indexing {axis} {index}. The {axis} index should be in [0, {closing}"
