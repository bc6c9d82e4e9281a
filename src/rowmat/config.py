"""Defaults shared by the display helpers and their tests.

The module centralises defaults to keep text and table rendering consistent.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EDGE_ITEMS = 4
DEFAULT_TABLE_TITLE = "Matrix"


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """How a matrix is rendered by :mod:`rowmat.formatting`.

    Parameters
    ----------
    edge_items:
        Number of leading and trailing rows/columns shown before the middle of
        an axis is elided with ``...``. An axis with at most ``2 * edge_items``
        entries is shown in full.
    title:
        Title of the rich table. ``None`` renders without a title.
    show_lines:
        Draw separators between table rows.
    show_index:
        Prefix every table row with its row index.
    """

    edge_items: int = DEFAULT_EDGE_ITEMS
    title: str | None = DEFAULT_TABLE_TITLE
    show_lines: bool = False
    show_index: bool = True

    def __post_init__(self) -> None:
        if self.edge_items < 0:
            raise ValueError("edge_items must be non-negative")

    def describe(self) -> str:
        """Return a human readable description.

        >>> DisplayOptions().describe()
        'edge_items=4 title=Matrix'
        >>> DisplayOptions(edge_items=2, title=None).describe()
        'edge_items=2 untitled'
        """

        if self.title is None:
            return f"edge_items={self.edge_items} untitled"
        return f"edge_items={self.edge_items} title={self.title}"
