"""Flat-buffer 2D matrix with row and column splicing.

Elements live in a single ``list`` in row-major order: ``(r, c)`` is stored at
``r * cols + c``. Every public operation keeps ``len(buffer) == rows * cols``
and never leaves a degenerate ``(0, n)`` or ``(n, 0)`` shape behind.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

from . import _splice
from ._offsets import check_coord, check_index, to_offset
from ._shape import validate_col_len, validate_rectangular, validate_row_len
from .errors import EmptyMatrix, IndexOutOfBounds, ShapeMismatch
from .formatting import matrix_str
from .views import BufferView, MutableBufferView

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
Shape = Tuple[int, int]


class Matrix(Generic[T]):
    """A dynamically resizable grid of arbitrary elements.

    Parameters
    ----------
    rows:
        Optional sequence of equally long rows. An empty sequence yields the
        empty ``(0, 0)`` matrix.

    Examples
    --------
    >>> m = Matrix([[1, 2], [4, 5]])
    >>> m.push_row([7, 8])
    >>> m.push_col([3, 6, 9])
    >>> m.shape
    (3, 3)
    >>> m[1, 2]
    6
    """

    __slots__ = ("_data", "_rows", "_cols")

    def __init__(self, rows: Iterable[Iterable[T]] = ()) -> None:
        materialised = [list(row) for row in rows]
        n_rows = len(materialised)
        n_cols = len(materialised[0]) if materialised else 0
        for row in materialised:
            if len(row) != n_cols:
                raise ShapeMismatch(
                    (n_rows, n_cols),
                    sum(len(r) for r in materialised),
                    f"All rows must have {n_cols} elements; found a row with {len(row)}.",
                )
        data = [item for row in materialised for item in row]
        validate_rectangular(n_rows, n_cols, len(data))
        self._data: List[T] = data
        self._rows = n_rows
        self._cols = n_cols

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_flat(cls, data: Iterable[T], shape: Shape) -> "Matrix[T]":
        """Build a matrix from a row-major sequence and an explicit shape."""

        buffer = list(data)
        rows, cols = _split_shape(shape)
        validate_rectangular(rows, cols, len(buffer))
        return cls._wrap(buffer, rows, cols)

    @classmethod
    def filled(cls, shape: Shape, fill: T) -> "Matrix[T]":
        """Return a matrix with every cell set to ``fill``.

        The same object is stored in every cell; use :meth:`from_fn` when each
        cell needs its own mutable value.
        """

        rows, cols = _split_shape(shape)
        validate_rectangular(rows, cols, rows * cols)
        return cls._wrap([fill] * (rows * cols), rows, cols)

    @classmethod
    def from_fn(cls, shape: Shape, fn: Callable[[int, int], T]) -> "Matrix[T]":
        """Return a matrix whose cell ``(r, c)`` is ``fn(r, c)``."""

        rows, cols = _split_shape(shape)
        validate_rectangular(rows, cols, rows * cols)
        return cls._wrap([fn(r, c) for r in range(rows) for c in range(cols)], rows, cols)

    @classmethod
    def _wrap(cls, buffer: List[T], rows: int, cols: int) -> "Matrix[T]":
        matrix = cls.__new__(cls)
        matrix._data = buffer
        matrix._rows = rows
        matrix._cols = cols
        return matrix

    def copy(self) -> "Matrix[T]":
        """Shallow copy: a new buffer holding the same element objects."""

        return self._wrap(list(self._data), self._rows, self._cols)

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Shape:
        return (self._rows, self._cols)

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self._rows == 0

    def _check_row(self, row: int) -> None:
        check_index(row)
        if not 0 <= row < self._rows:
            raise IndexOutOfBounds.for_row(row, self.shape)

    def _check_col(self, col: int) -> None:
        check_index(col)
        if not 0 <= col < self._cols:
            raise IndexOutOfBounds.for_col(col, self.shape)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def get(self, row: int, col: int) -> T:
        check_coord(row, col, self.shape)
        return self._data[to_offset(row, col, self._cols)]

    def set(self, row: int, col: int, value: T) -> None:
        check_coord(row, col, self.shape)
        self._data[to_offset(row, col, self._cols)] = value

    def __getitem__(self, key: Tuple[int, int]) -> T:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    def get_row(self, row: int) -> List[T]:
        self._check_row(row)
        start = row * self._cols
        return self._data[start : start + self._cols]

    def get_col(self, col: int) -> List[T]:
        self._check_col(col)
        return self._data[col :: self._cols]

    def iter_rows(self) -> Iterator[List[T]]:
        for row in range(self._rows):
            start = row * self._cols
            yield self._data[start : start + self._cols]

    def to_rows(self) -> List[List[T]]:
        return list(self.iter_rows())

    def to_list(self) -> List[T]:
        return list(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def as_slice(self) -> BufferView[T]:
        """Read-only live view of the row-major buffer."""

        return BufferView(self)

    def as_mut_slice(self) -> MutableBufferView[T]:
        """Writable live view; elements may be replaced but not added or removed."""

        return MutableBufferView(self)

    # ------------------------------------------------------------------
    # Row splices
    # ------------------------------------------------------------------
    def push_row(self, values: Iterable[T]) -> None:
        """Append a row at the bottom of the matrix."""

        self.insert_row(self._rows, values)

    def insert_row(self, at: int, values: Iterable[T]) -> None:
        """Insert a row so that it becomes row ``at``; ``at == rows`` appends."""

        check_index(at)
        if not 0 <= at <= self._rows:
            raise IndexOutOfBounds.for_row(at, self.shape, allow_end=True)
        row = list(values)
        cols = validate_row_len(row, self._cols)
        _splice.insert_row(self._data, at, row, cols)
        self._rows += 1
        self._cols = cols
        LOGGER.debug("Inserted row at %d; shape is now %s", at, self.shape)

    def remove_row(self, at: int) -> List[T]:
        """Remove row ``at`` and return its elements."""

        check_index(at)
        if self._rows == 0:
            raise EmptyMatrix("remove a row")
        if not 0 <= at < self._rows:
            raise IndexOutOfBounds.for_row(at, self.shape)
        removed = _splice.remove_row(self._data, at, self._cols)
        self._rows -= 1
        if self._rows == 0:
            self._cols = 0
        LOGGER.debug("Removed row %d; shape is now %s", at, self.shape)
        return removed

    def pop_row(self) -> List[T]:
        if self._rows == 0:
            raise EmptyMatrix("pop a row")
        return self.remove_row(self._rows - 1)

    # ------------------------------------------------------------------
    # Column splices
    # ------------------------------------------------------------------
    def push_col(self, values: Iterable[T]) -> None:
        """Append a column on the right of the matrix."""

        self.insert_col(self._cols, values)

    def insert_col(self, at: int, values: Iterable[T]) -> None:
        """Insert a column so that it becomes column ``at``; ``at == cols`` appends."""

        check_index(at)
        if not 0 <= at <= self._cols:
            raise IndexOutOfBounds.for_col(at, self.shape, allow_end=True)
        col = list(values)
        rows = validate_col_len(col, self._rows)
        _splice.insert_col(self._data, at, col, self._cols)
        self._rows = rows
        self._cols += 1
        LOGGER.debug("Inserted column at %d; shape is now %s", at, self.shape)

    def remove_col(self, at: int) -> List[T]:
        """Remove column ``at`` and return its elements, top to bottom."""

        check_index(at)
        if self._cols == 0:
            raise EmptyMatrix("remove a column")
        if not 0 <= at < self._cols:
            raise IndexOutOfBounds.for_col(at, self.shape)
        removed = _splice.remove_col(self._data, at, self._rows, self._cols)
        self._cols -= 1
        if self._cols == 0:
            self._rows = 0
        LOGGER.debug("Removed column %d; shape is now %s", at, self.shape)
        return removed

    def pop_col(self) -> List[T]:
        if self._cols == 0:
            raise EmptyMatrix("pop a column")
        return self.remove_col(self._cols - 1)

    # ------------------------------------------------------------------
    # Reshape
    # ------------------------------------------------------------------
    def reshape(self, new_rows: int, new_cols: int) -> None:
        """Reinterpret the buffer with a new shape holding the same number of elements."""

        check_index(new_rows)
        check_index(new_cols)
        validate_rectangular(new_rows, new_cols, len(self._data))
        self._rows = new_rows
        self._cols = new_cols

    # ------------------------------------------------------------------
    # Protocols
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} shape={self.shape}>"

    def __str__(self) -> str:
        return matrix_str(self)


def _split_shape(shape: Shape) -> Shape:
    rows, cols = shape
    return check_index(rows), check_index(cols)


def _split_key(key: Any) -> Tuple[int, int]:
    if not (isinstance(key, tuple) and len(key) == 2):
        raise TypeError("matrix indices must be provided as [row, col]")
    return key[0], key[1]
