"""Row-major offset arithmetic."""

from __future__ import annotations

from .errors import IndexOutOfBounds, Shape


def check_index(index: object) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"matrix indices must be integers, not {type(index).__name__}")
    return index


def check_coord(row: int, col: int, shape: Shape) -> None:
    check_index(row)
    check_index(col)
    if not (0 <= row < shape[0] and 0 <= col < shape[1]):
        raise IndexOutOfBounds.for_coord(row, col, shape)


def to_offset(row: int, col: int, cols: int) -> int:
    """Map ``(row, col)`` to its position in the flat buffer.

    Bounds are the caller's responsibility (see :func:`check_coord`).

    >>> to_offset(1, 2, 3)
    5
    """

    return row * cols + col


def to_coord(index: int, cols: int) -> tuple[int, int]:
    """Inverse of :func:`to_offset`.

    >>> to_coord(5, 3)
    (1, 2)
    """

    if cols <= 0:
        raise IndexOutOfBounds.for_offset(index, (0, 0))
    if index < 0:
        raise IndexOutOfBounds(
            f"Attempted indexing offset {index}. Offsets must be non-negative",
            index=index,
            shape=(0, cols),
        )
    row, col = divmod(index, cols)
    return row, col
