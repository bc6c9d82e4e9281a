"""Row-major, flat-buffer 2D matrices with shape-preserving splices."""

from importlib import metadata

from .config import DisplayOptions
from .errors import DimensionMismatch, EmptyMatrix, IndexOutOfBounds, MatrixError, ShapeMismatch
from .matrix import Matrix
from .views import BufferView, MutableBufferView

__all__ = [
    "BufferView",
    "DimensionMismatch",
    "DisplayOptions",
    "EmptyMatrix",
    "IndexOutOfBounds",
    "Matrix",
    "MatrixError",
    "MutableBufferView",
    "ShapeMismatch",
    "__version__",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("rowmat")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
