from __future__ import annotations

import pytest

from rowmat import Matrix


@pytest.fixture()
def square() -> Matrix[int]:
    """The (2, 2) matrix [[1, 2], [3, 4]]."""

    return Matrix.from_flat([1, 2, 3, 4], (2, 2))


@pytest.fixture()
def wide() -> Matrix[int]:
    """A (2, 3) matrix with distinct elements."""

    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture()
def empty() -> Matrix[int]:
    return Matrix()
