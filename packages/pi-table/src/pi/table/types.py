"""Layout types: length/position/alignment policies, cut marks, row groups.

Everything here is plain immutable data plus the preset constructors that
callers use to describe how each column of a table is laid out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Literal, Sequence, Union

import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

# Horizontal placement of content within surplus space.
Position = Literal["left", "right", "center"]

# Vertical fill of a column of lines.  Note the naming: "start" keeps the
# content at the top (blank lines go at the end), "end" keeps it at the
# bottom (blank lines go at the start).
VerticalPosition = Literal["start", "center", "end"]


# ---------------------------------------------------------------------------
# Length policies
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Expand:
    """Column is as wide as its widest cell."""


@dataclass(frozen=True)
class Fixed:
    """Column is forced to exactly *width* characters."""

    width: int

    def __post_init__(self) -> None:
        if self.width < 0:
            object.__setattr__(self, "width", 0)


LengthPolicy = Union[Expand, Fixed]


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AlignAt:
    """Align a column at the *occurrence*-th (0-indexed) *char* of each cell."""

    char: str
    occurrence: int = 0


# ``None`` means the column is not aligned.
AlignPolicy = Union[AlignAt, None]


@dataclass(frozen=True)
class AlignExtents:
    """Widest part before and after the alignment point in a column."""

    left: int = 0
    right: int = 0

    @property
    def width(self) -> int:
        return self.left + self.right


EMPTY_EXTENTS = AlignExtents(0, 0)


def combine_extents(a: AlignExtents, b: AlignExtents) -> AlignExtents:
    """Combine two extents by taking the maximum on either side.

    Associative and commutative with :data:`EMPTY_EXTENTS` as identity, so a
    column's extents can be folded from its cells in any order.
    """
    return AlignExtents(max(a.left, b.left), max(a.right, b.right))


def fold_extents(extents: Iterable[AlignExtents]) -> AlignExtents:
    return reduce(combine_extents, extents, EMPTY_EXTENTS)


# ---------------------------------------------------------------------------
# Cut marks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CutMark:
    """Marker inserted where a cell's content has been cut away.

    *width* is the number of columns the marker occupies.  When omitted it is
    measured with wcwidth; unprintable markers fall back to their length.
    """

    marker: str
    width: int | None = None

    def __post_init__(self) -> None:
        if self.width is None:
            measured = _wcwidth.wcswidth(self.marker)
            object.__setattr__(
                self, "width", measured if measured >= 0 else len(self.marker)
            )

    def fit(self, width: int) -> str:
        """Return the marker as exactly *width* characters.

        Wider markers are clipped from the right, narrower ones are padded.
        """
        if width <= 0:
            return ""
        return self.marker[:width].ljust(width)

    def fit_right(self, width: int) -> str:
        """Like :meth:`fit`, but clips the marker from the left."""
        if width <= 0:
            return ""
        if len(self.marker) >= width:
            return self.marker[len(self.marker) - width :]
        return self.marker.rjust(width)


def default_cut_mark() -> CutMark:
    return CutMark("..", 2)


def no_cut_mark() -> CutMark:
    return CutMark("", 0)


def short_cut_mark() -> CutMark:
    """A single ellipsis glyph."""
    return CutMark("…", 1)


# ---------------------------------------------------------------------------
# Column and header layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LayoutSpec:
    """How one column is sized, positioned, aligned and cut."""

    length: LengthPolicy = field(default_factory=Expand)
    position: Position = "left"
    align: AlignPolicy = None
    cut_mark: CutMark = field(default_factory=default_cut_mark)


def layout_spec(
    length: LengthPolicy | None = None,
    position: Position = "left",
    align: AlignPolicy = None,
    cut_mark: CutMark | None = None,
) -> LayoutSpec:
    """Keyword constructor that fills in the defaults for omitted fields."""
    return LayoutSpec(
        length=length if length is not None else Expand(),
        position=position,
        align=align,
        cut_mark=cut_mark if cut_mark is not None else default_cut_mark(),
    )


def default_layout() -> LayoutSpec:
    """Expand to the widest cell, positioned on the left, no alignment."""
    return LayoutSpec()


def numeric_layout() -> LayoutSpec:
    """Numbers are positioned on the right and aligned at the first dot."""
    return LayoutSpec(position="right", align=AlignAt(".", 0))


def fixed_layout(width: int, position: Position) -> LayoutSpec:
    return LayoutSpec(length=Fixed(width), position=position)


def fixed_left_layout(width: int) -> LayoutSpec:
    return fixed_layout(width, "left")


@dataclass(frozen=True)
class HeaderSpec:
    """Header cell layout for one column.

    A ``None`` *cut_mark* means the column's own cut mark is used.
    """

    position: Position = "center"
    cut_mark: CutMark | None = None


def default_header_spec() -> HeaderSpec:
    """Headers are centered by default."""
    return HeaderSpec()


# ---------------------------------------------------------------------------
# Row groups
# ---------------------------------------------------------------------------

Row = Sequence[str]


@dataclass(frozen=True)
class RowGroup:
    """Rows rendered together without separators between them."""

    rows: tuple[tuple[str, ...], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "rows", tuple(tuple(row) for row in self.rows)
        )


def rows_group(rows: Iterable[Row]) -> RowGroup:
    """Group the given rows together."""
    return RowGroup(tuple(tuple(row) for row in rows))


def row_group(row: Row) -> RowGroup:
    """Make a group of a single row."""
    return RowGroup((tuple(row),))
