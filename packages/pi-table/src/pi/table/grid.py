"""Grid layout: apply per-column sizings to a whole matrix of cells."""

from __future__ import annotations

from itertools import cycle
from typing import Callable, Sequence, TypeVar

from pi.table.sizing import ColumnSizing, column_formatter, derive_column_sizings
from pi.table.types import LayoutSpec, Position, Row

A = TypeVar("A")
B = TypeVar("B")


def apply_formatters(
    formatters: Sequence[Callable[[str], str]], rows: Sequence[Row]
) -> list[list[str]]:
    """Format each cell with the formatter of its column.

    Cells without a formatter (columns that were dropped) are left out.
    """
    return [[fmt(cell) for fmt, cell in zip(formatters, row)] for row in rows]


def row_formatters(
    positions: Sequence[Position],
    specs: Sequence[LayoutSpec],
    sizings: Sequence[ColumnSizing],
) -> list[Callable[[str], str]]:
    return [
        column_formatter(position, spec.cut_mark, sizing)
        for position, spec, sizing in zip(positions, specs, sizings)
    ]


def layout_cells(specs: Sequence[LayoutSpec], rows: Sequence[Row]) -> list[list[str]]:
    """Format every cell of *rows* according to the column *specs*."""
    sizings = derive_column_sizings(specs, rows)
    formatters = row_formatters([spec.position for spec in specs], specs, sizings)
    return apply_formatters(formatters, rows)


def layout_lines(specs: Sequence[LayoutSpec], rows: Sequence[Row]) -> list[str]:
    """Like :func:`layout_cells`, with the cells of a row joined by a space."""
    return [" ".join(cells) for cells in layout_cells(specs, rows)]


def layout_string(specs: Sequence[LayoutSpec], rows: Sequence[Row]) -> str:
    """Like :func:`layout_lines`, with the lines joined by newlines."""
    return "\n".join(layout_lines(specs, rows))


# ---------------------------------------------------------------------------
# Grid modifiers
# ---------------------------------------------------------------------------


def alt_lines(fns: Sequence[Callable[[A], B]], items: Sequence[A]) -> list[B]:
    """Apply *fns* cyclically to *items*, e.g. to colour every other line."""
    if not fns:
        return []
    return [fn(item) for fn, item in zip(cycle(fns), items)]


def checkered_cells(
    f: Callable[[A], B], g: Callable[[A], B], rows: Sequence[Sequence[A]]
) -> list[list[B]]:
    """Apply *f* and *g* to cells in a checkerboard pattern."""
    patterns = cycle([[f, g], [g, f]])
    return [alt_lines(pattern, row) for pattern, row in zip(patterns, rows)]
