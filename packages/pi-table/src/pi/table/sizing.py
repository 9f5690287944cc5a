"""Column sizing: derive one width decision per column from all of its cells.

Sizing is the measuring half of a two-phase layout.  A column's
:data:`ColumnSizing` is computed once from every cell in the column and is
then used unchanged to format each of those cells.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Sequence, Union

from pi.table.cell import align, align_fixed, measure_extents, pad, trim_or_pad
from pi.table.types import (
    AlignAt,
    AlignExtents,
    AlignPolicy,
    CutMark,
    Expand,
    Fixed,
    LayoutSpec,
    LengthPolicy,
    Position,
    Row,
    fold_extents,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sizing variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FillToWidth:
    """Unaligned, expanding column: every cell is padded to *width*."""

    width: int


@dataclass(frozen=True)
class AlignedFill:
    """Expanding column aligned at a character."""

    align_at: AlignAt
    extents: AlignExtents


@dataclass(frozen=True)
class FixedWidth:
    """Column limited to *width*, optionally aligned."""

    width: int
    alignment: tuple[AlignAt, AlignExtents] | None = None


ColumnSizing = Union[FillToWidth, AlignedFill, FixedWidth]


def sizing_width(sizing: ColumnSizing) -> int:
    """Exact width of every cell formatted with *sizing*."""
    match sizing:
        case FillToWidth(width=width) | FixedWidth(width=width):
            return width
        case AlignedFill(extents=extents):
            return extents.width
    raise TypeError(f"unknown column sizing: {sizing!r}")


def unaligned(sizing: ColumnSizing) -> ColumnSizing:
    """Drop the alignment from *sizing*, keeping its width."""
    match sizing:
        case AlignedFill(extents=extents):
            return FillToWidth(extents.width)
        case FixedWidth(alignment=alignment) if alignment is not None:
            return FixedWidth(sizing.width)
    return sizing


# ---------------------------------------------------------------------------
# Deriving sizings
# ---------------------------------------------------------------------------


def _column_extents(align_at: AlignAt, cells: Sequence[str]) -> AlignExtents:
    return fold_extents(measure_extents(align_at, cell) for cell in cells)


def derive_column_sizing(
    length: LengthPolicy, align_at: AlignPolicy, cells: Sequence[str]
) -> ColumnSizing:
    """Derive the sizing of one column from its policies and all its cells."""
    match (length, align_at):
        case (Expand(), None):
            return FillToWidth(max((len(cell) for cell in cells), default=0))
        case (Expand(), AlignAt()):
            return AlignedFill(align_at, _column_extents(align_at, cells))
        case (Fixed(width=width), None):
            return FixedWidth(width)
        case (Fixed(width=width), AlignAt()):
            return FixedWidth(width, (align_at, _column_extents(align_at, cells)))
    raise TypeError(f"unsupported column policy: {length!r}, {align_at!r}")


def transpose(rows: Sequence[Row], column_count: int) -> list[list[str]]:
    """Collect the first *column_count* columns of *rows*.

    Rows that are too short simply contribute nothing to the missing columns.
    """
    columns: list[list[str]] = [[] for _ in range(column_count)]
    for row in rows:
        for index, cell in enumerate(row[:column_count]):
            columns[index].append(cell)
    return columns


def column_count(specs: Sequence[LayoutSpec], rows: Sequence[Row]) -> int:
    """Number of columns that are laid out: extra columns or specs are dropped."""
    widest = max((len(row) for row in rows), default=0)
    if widest != len(specs):
        logger.debug(
            "Dropping columns: %d layout specs for %d data columns",
            len(specs),
            widest,
        )
    return min(widest, len(specs))


def derive_column_sizings(
    specs: Sequence[LayoutSpec], rows: Sequence[Row], count: int | None = None
) -> list[ColumnSizing]:
    """Derive one sizing per column of *rows*.

    *count* overrides the number of columns, which otherwise is the smaller
    of the widest row and the number of specs.
    """
    if count is None:
        count = column_count(specs, rows)
    columns = transpose(rows, min(count, len(specs)))
    return [
        derive_column_sizing(spec.length, spec.align, cells)
        for spec, cells in zip(specs, columns)
    ]


# ---------------------------------------------------------------------------
# Adjusting sizings
# ---------------------------------------------------------------------------


def ensure_minimum_width(
    sizing: ColumnSizing, min_width: int, position: Position
) -> ColumnSizing:
    """Widen *sizing* to at least *min_width*; never narrows.

    Aligned columns grow on the side(s) chosen by *position*.  Fixed widths
    are a hard limit and are returned unchanged.
    """
    match sizing:
        case FillToWidth(width=width):
            return FillToWidth(max(width, min_width))
        case AlignedFill(extents=extents):
            missing = min_width - extents.width
            if missing <= 0:
                return sizing
            if position == "left":
                grown = replace(extents, right=extents.right + missing)
            elif position == "right":
                grown = replace(extents, left=extents.left + missing)
            else:
                q, r = divmod(missing, 2)
                grown = AlignExtents(extents.left + q, extents.right + q + r)
            return AlignedFill(sizing.align_at, grown)
    return sizing


# ---------------------------------------------------------------------------
# Formatting with a sizing
# ---------------------------------------------------------------------------


def column_formatter(
    position: Position, cut_mark: CutMark, sizing: ColumnSizing
) -> Callable[[str], str]:
    """Build the function that formats every cell of a column."""
    match sizing:
        case FillToWidth(width=width):
            return lambda s: pad(position, width, s)
        case AlignedFill(align_at=align_at, extents=extents):
            return lambda s: align(align_at, extents, s)
        case FixedWidth(width=width, alignment=None):
            return lambda s: trim_or_pad(position, cut_mark, width, s)
        case FixedWidth(width=width, alignment=(align_at, extents)):
            return lambda s: align_fixed(
                position, cut_mark, width, align_at, extents, s
            )
    raise TypeError(f"unknown column sizing: {sizing!r}")
