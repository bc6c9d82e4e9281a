"""Conversions between :class:`~rowmat.matrix.Matrix` and numpy / pandas.

Encoding reads ``as_slice()`` and ``shape``; decoding always goes through
:meth:`Matrix.from_flat`, so malformed payloads are rejected by the same
shape checks as any other construction.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np
import pandas as pd

from .errors import ShapeMismatch
from .matrix import Matrix

LOGGER = logging.getLogger(__name__)


def to_array(matrix: Matrix[Any], dtype: Any | None = None) -> np.ndarray:
    """Return a new 2-D array holding a copy of ``matrix``."""

    flat = np.array(list(matrix.as_slice()), dtype=dtype)
    return flat.reshape(matrix.shape)


def from_array(array: Any) -> Matrix[Any]:
    """Build a matrix from a 2-D array-like, keeping numpy scalars as Python values."""

    arr = np.asarray(array)
    if arr.ndim != 2:
        raise ShapeMismatch(
            tuple(arr.shape[:2]) if arr.ndim > 2 else (int(arr.size), 1),
            int(arr.size),
            f"Expected a 2-D array, got {arr.ndim}-D with shape {arr.shape}.",
        )
    rows, cols = arr.shape
    LOGGER.debug("Decoding array with shape %s and dtype %s", arr.shape, arr.dtype)
    return Matrix.from_flat(arr.reshape(-1).tolist(), (rows, cols))


def to_frame(matrix: Matrix[Any], columns: Sequence[Any] | None = None) -> pd.DataFrame:
    """Return a :class:`pandas.DataFrame` with one frame row per matrix row."""

    if columns is not None and len(columns) != matrix.cols:
        raise ValueError(f"Expected {matrix.cols} column labels, got {len(columns)}")
    return pd.DataFrame(matrix.to_rows(), columns=list(columns) if columns is not None else None)


def from_frame(frame: pd.DataFrame) -> Matrix[Any]:
    """Build a matrix from the values of ``frame``; labels are discarded."""

    rows, cols = frame.shape
    LOGGER.debug("Decoding frame with shape %s", frame.shape)
    values = [item for record in frame.itertuples(index=False, name=None) for item in record]
    return Matrix.from_flat(values, (rows, cols))
