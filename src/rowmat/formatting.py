"""Text and ``rich`` rendering of matrices.

Rendering only needs ``shape`` and ``get_row``; large axes are elided in the
middle so printing stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

from .config import DEFAULT_EDGE_ITEMS, DisplayOptions

if TYPE_CHECKING:
    from .matrix import Matrix

ELLIPSIS = "..."


def _edge_indices(length: int, edge_items: int) -> tuple[list[int], list[int], bool]:
    if length <= edge_items * 2:
        return list(range(length)), [], False
    head = list(range(edge_items))
    tail = list(range(length - edge_items, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_cells(row: list[Any], col_head: list[int], col_tail: list[int], truncated: bool) -> list[str]:
    cells = [_format_value(row[c]) for c in col_head]
    if truncated:
        cells.append(ELLIPSIS)
    cells.extend(_format_value(row[c]) for c in col_tail)
    return cells


def matrix_str(matrix: "Matrix[Any]", edge_items: int = DEFAULT_EDGE_ITEMS) -> str:
    """Render ``matrix`` as a bracketed grid.

    >>> from rowmat import Matrix
    >>> print(matrix_str(Matrix([[1, 2], [3, 4]])))
    Matrix(shape=(2, 2))
    [
     [1 2]
     [3 4]
    ]
    """

    rows, cols = matrix.shape
    header = f"{type(matrix).__name__}(shape=({rows}, {cols}))"
    if rows == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows, edge_items)
    col_head, col_tail, cols_truncated = _edge_indices(cols, edge_items)

    lines = [header, "["]
    for r in row_head:
        lines.append(f" [{' '.join(_format_cells(matrix.get_row(r), col_head, col_tail, cols_truncated))}]")
    if rows_truncated:
        lines.append(f" {ELLIPSIS}")
    for r in row_tail:
        lines.append(f" [{' '.join(_format_cells(matrix.get_row(r), col_head, col_tail, cols_truncated))}]")
    lines.append("]")
    return "\n".join(lines)


def build_table(matrix: "Matrix[Any]", options: DisplayOptions | None = None) -> Table:
    """Return a :class:`rich.table.Table` showing ``matrix``."""

    options = options or DisplayOptions()
    rows, cols = matrix.shape
    # Keeps the title on one line when the matrix contributes no columns.
    min_width = len(options.title) + 4 if options.title else None
    table = Table(title=options.title, show_lines=options.show_lines, min_width=min_width)

    row_head, row_tail, rows_truncated = _edge_indices(rows, options.edge_items)
    col_head, col_tail, cols_truncated = _edge_indices(cols, options.edge_items)

    if options.show_index:
        table.add_column("", justify="right", style="dim")
    for c in col_head:
        table.add_column(str(c), justify="right")
    if cols_truncated:
        table.add_column(ELLIPSIS, justify="center")
    for c in col_tail:
        table.add_column(str(c), justify="right")

    def _add(label: str, cells: list[str]) -> None:
        if options.show_index:
            table.add_row(label, *cells)
        else:
            table.add_row(*cells)

    for r in row_head:
        _add(str(r), _format_cells(matrix.get_row(r), col_head, col_tail, cols_truncated))
    if rows_truncated:
        width = len(col_head) + len(col_tail) + (1 if cols_truncated else 0)
        _add(ELLIPSIS, [ELLIPSIS] * width)
    for r in row_tail:
        _add(str(r), _format_cells(matrix.get_row(r), col_head, col_tail, cols_truncated))
    return table


def print_matrix(
    matrix: "Matrix[Any]",
    console: Console | None = None,
    options: DisplayOptions | None = None,
) -> None:
    """Print ``matrix`` as a table on ``console`` (a fresh console by default)."""

    console = console or Console()
    console.print(build_table(matrix, options))
