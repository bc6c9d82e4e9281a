"""Live views onto a matrix's flat buffer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

from .errors import IndexOutOfBounds, ShapeMismatch

if TYPE_CHECKING:
    from .matrix import Matrix

T = TypeVar("T")


class BufferView(Sequence, Generic[T]):
    """Read-only, row-major view of a matrix buffer.

    The view never copies. It always reflects the matrix's current contents,
    including after structural changes. Integer indices do not wrap; slices
    follow ``list`` semantics and return a new list.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: "Matrix[T]") -> None:
        self._matrix = matrix

    @property
    def shape(self) -> tuple[int, int]:
        return self._matrix.shape

    def __len__(self) -> int:
        return len(self._matrix._data)

    def __getitem__(self, key: Any) -> Any:
        data = self._matrix._data
        if isinstance(key, slice):
            return data[key]
        return data[self._check_offset(key)]

    def __iter__(self) -> Iterator[T]:
        return iter(self._matrix._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BufferView):
            return self._matrix._data == other._matrix._data
        if isinstance(other, (list, tuple)):
            return self._matrix._data == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._matrix._data!r}, shape={self.shape})"

    def _check_offset(self, offset: object) -> int:
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"buffer indices must be integers or slices, not {type(offset).__name__}")
        if not 0 <= offset < len(self._matrix._data):
            raise IndexOutOfBounds.for_offset(offset, self.shape)
        return offset


class MutableBufferView(BufferView[T]):
    """Buffer view that allows elements to be replaced but never added or removed."""

    __slots__ = ()

    def __setitem__(self, key: Any, value: Any) -> None:
        data = self._matrix._data
        if not isinstance(key, slice):
            data[self._check_offset(key)] = value
            return
        targets = range(*key.indices(len(data)))
        values: list[T] = list(value)
        if len(values) != len(targets):
            raise ShapeMismatch(
                self.shape,
                len(data) - len(targets) + len(values),
                f"Slice assignment would replace {len(targets)} elements with {len(values)}; "
                "the buffer length is fixed by the matrix shape.",
            )
        for offset, item in zip(targets, values):
            data[offset] = item

    def __delitem__(self, key: Any) -> None:
        raise ShapeMismatch(
            self.shape,
            len(self._matrix._data),
            "Elements cannot be deleted through a buffer view; use remove_row or remove_col.",
        )
