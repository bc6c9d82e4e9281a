"""In-place splices of whole rows and columns on a row-major ``list``.

These helpers assume their arguments were validated; they never check
bounds or lengths themselves. ``cols`` is always the stride before the
operation.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def insert_row(buffer: List[T], at: int, values: Sequence[T], cols: int) -> None:
    start = at * cols
    buffer[start:start] = values


def remove_row(buffer: List[T], at: int, cols: int) -> List[T]:
    start = at * cols
    removed = buffer[start : start + cols]
    del buffer[start : start + cols]
    return removed


def insert_col(buffer: List[T], at: int, values: Sequence[T], cols: int) -> None:
    # Rows above ``r`` already hold ``cols + 1`` elements when row ``r`` is reached.
    stride = cols + 1
    for r, value in enumerate(values):
        buffer.insert(r * stride + at, value)


def remove_col(buffer: List[T], at: int, rows: int, cols: int) -> List[T]:
    removed: List[T] = []
    for r in range(rows):
        # ``r`` elements have already been removed ahead of this row.
        removed.append(buffer.pop(r * cols + at - r))
    return removed
