from __future__ import annotations

import logging

import pytest

from rowmat import DimensionMismatch, EmptyMatrix, IndexOutOfBounds, Matrix


def test_push_row_appends(wide: Matrix[int]) -> None:
    wide.push_row([7, 8, 9])

    assert wide.shape == (3, 3)
    assert wide.to_rows() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_push_row_accepts_generators(wide: Matrix[int]) -> None:
    wide.push_row(x * 10 for x in range(3))

    assert wide.get_row(2) == [0, 10, 20]


def test_push_row_into_empty_sets_columns(empty: Matrix[str]) -> None:
    empty.push_row(["a", "b", "c"])

    assert empty.shape == (1, 3)
    assert empty[0, 2] == "c"


def test_push_empty_row_into_empty_matrix_fails(empty: Matrix[int]) -> None:
    with pytest.raises(DimensionMismatch):
        empty.push_row([])
    assert empty.shape == (0, 0)


@pytest.mark.parametrize(
    "at, expected",
    [
        (0, [[0, 0, 0], [1, 2, 3], [4, 5, 6]]),
        (1, [[1, 2, 3], [0, 0, 0], [4, 5, 6]]),
        (2, [[1, 2, 3], [4, 5, 6], [0, 0, 0]]),
    ],
)
def test_insert_row(wide: Matrix[int], at: int, expected: list[list[int]]) -> None:
    wide.insert_row(at, [0, 0, 0])

    assert wide.to_rows() == expected


def test_insert_row_past_end_fails(wide: Matrix[int]) -> None:
    with pytest.raises(IndexOutOfBounds) as info:
        wide.insert_row(3, [0, 0, 0])
    assert "[0, 2]" in str(info.value)


def test_insert_row_checks_bounds_before_length(wide: Matrix[int]) -> None:
    with pytest.raises(IndexOutOfBounds):
        wide.insert_row(5, [0])
    with pytest.raises(IndexOutOfBounds):
        wide.insert_row(-1, [0, 0, 0])


def test_insert_row_wrong_length_leaves_matrix_unchanged(wide: Matrix[int]) -> None:
    with pytest.raises(DimensionMismatch):
        wide.insert_row(1, [0, 0])

    assert wide.shape == (2, 3)
    assert list(wide.as_slice()) == [1, 2, 3, 4, 5, 6]


def test_remove_row_returns_row(wide: Matrix[int]) -> None:
    assert wide.remove_row(0) == [1, 2, 3]
    assert wide.shape == (1, 3)
    assert wide.to_list() == [4, 5, 6]


def test_remove_row_out_of_bounds(wide: Matrix[int]) -> None:
    with pytest.raises(IndexOutOfBounds):
        wide.remove_row(2)
    assert wide.shape == (2, 3)


def test_remove_row_from_empty_is_index_error(empty: Matrix[int]) -> None:
    with pytest.raises(IndexOutOfBounds):
        empty.remove_row(0)
    with pytest.raises(EmptyMatrix):
        empty.remove_row(0)


def test_pop_row_until_empty(wide: Matrix[int]) -> None:
    assert wide.pop_row() == [4, 5, 6]
    assert wide.pop_row() == [1, 2, 3]
    assert wide.shape == (0, 0)

    with pytest.raises(EmptyMatrix):
        wide.pop_row()

    wide.push_row([1])
    assert wide.shape == (1, 1)


def test_push_then_remove_restores_original(wide: Matrix[int]) -> None:
    original = wide.copy()
    row = ["x", "y", "z"]

    wide.push_row(row)
    assert wide.remove_row(wide.rows - 1) == row
    assert wide == original


def test_row_splices_are_logged(wide: Matrix[int], caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="rowmat.matrix")

    wide.push_row([7, 8, 9])
    wide.remove_row(0)

    assert "Inserted row at 2; shape is now (3, 3)" in caplog.text
    assert "Removed row 0; shape is now (2, 3)" in caplog.text
