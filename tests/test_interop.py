from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest
from pandas.testing import assert_frame_equal

from rowmat import Matrix, ShapeMismatch
from rowmat.interop import from_array, from_frame, to_array, to_frame


def test_to_array_copies_shape_and_values(wide: Matrix[int]) -> None:
    arr = to_array(wide)

    np.testing.assert_array_equal(arr, np.array([[1, 2, 3], [4, 5, 6]]))
    arr[0, 0] = 100
    assert wide[0, 0] == 1


def test_to_array_dtype(square: Matrix[int]) -> None:
    assert to_array(square, dtype=float).dtype == np.float64


def test_from_array_returns_python_scalars() -> None:
    m = from_array(np.arange(6, dtype=np.int32).reshape(2, 3))

    assert m.shape == (2, 3)
    assert m.to_list() == [0, 1, 2, 3, 4, 5]
    assert type(m[0, 0]) is int


def test_from_array_rejects_non_2d() -> None:
    with pytest.raises(ShapeMismatch, match="2-D"):
        from_array(np.arange(4))
    with pytest.raises(ShapeMismatch):
        from_array(np.zeros((2, 2, 2)))


def test_from_array_rejects_degenerate_shape() -> None:
    with pytest.raises(ShapeMismatch):
        from_array(np.zeros((0, 3)))


def test_empty_matrix_through_numpy() -> None:
    arr = to_array(Matrix())

    assert arr.shape == (0, 0)
    assert from_array(arr).is_empty()


def test_to_frame_with_labels(wide: Matrix[int]) -> None:
    frame = to_frame(wide, columns=["a", "b", "c"])

    expected = pd.DataFrame({"a": [1, 4], "b": [2, 5], "c": [3, 6]})
    assert_frame_equal(frame, expected)


def test_to_frame_label_count_must_match(wide: Matrix[int]) -> None:
    with pytest.raises(ValueError):
        to_frame(wide, columns=["a", "b"])


def test_from_frame_discards_labels() -> None:
    frame = pd.DataFrame({"x": [1, 2], "y": ["p", "q"]}, index=["r0", "r1"])

    m = from_frame(frame)

    assert m.to_rows() == [[1, "p"], [2, "q"]]


def test_frame_round_trip_preserves_matrix(wide: Matrix[int]) -> None:
    assert from_frame(to_frame(wide)) == wide


def test_decoding_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="rowmat.interop")

    from_array(np.zeros((2, 3)))
    from_frame(pd.DataFrame({"a": [1]}))

    assert "Decoding array with shape (2, 3) and dtype float64" in caplog.text
    assert "Decoding frame with shape (1, 1)" in caplog.text
