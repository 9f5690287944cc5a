"""Bordered tables assembled from row groups, an optional header and a style.

Layout happens in two phases: the sizing of every column is derived once
from the cells of all row groups, then every group (and the header) is
formatted with those sizings and framed with the style's border glyphs.
Every line of a table has the same width: ``sum(widths) + 3 * columns + 1``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pi.table.grid import apply_formatters, row_formatters
from pi.table.sizing import (
    ColumnSizing,
    column_count,
    column_formatter,
    derive_column_sizings,
    ensure_minimum_width,
    sizing_width,
    unaligned,
)
from pi.table.styles import TableStyle, default_style
from pi.table.types import HeaderSpec, LayoutSpec, Row, RowGroup, default_header_spec

logger = logging.getLogger(__name__)

# Header labels paired with one header layout per column.
Header = tuple[Sequence[str], Sequence[HeaderSpec]]


@dataclass
class TableLayout:
    """Formatted cells of a table, before borders are added."""

    widths: list[int]
    header: list[str] | None
    groups: list[list[list[str]]]


# ---------------------------------------------------------------------------
# Cell layout
# ---------------------------------------------------------------------------


def _fill_row(row: Row, count: int) -> list[str]:
    cells = list(row[:count])
    return cells + [""] * (count - len(cells))


def _header_specs(specs: Sequence[HeaderSpec], count: int) -> list[HeaderSpec]:
    if len(specs) != count:
        logger.debug("Got %d header specs for %d columns", len(specs), count)
    return list(specs[:count]) + [default_header_spec()] * (count - len(specs))


def _fit_header(
    sizings: list[ColumnSizing],
    specs: Sequence[LayoutSpec],
    labels: Sequence[str],
) -> list[ColumnSizing]:
    return [
        ensure_minimum_width(sizing, len(label), spec.position)
        for sizing, spec, label in zip(sizings, specs, labels)
    ]


def layout_table(
    groups: Sequence[RowGroup],
    specs: Sequence[LayoutSpec],
    header: Header | None = None,
) -> TableLayout:
    """Derive the column sizings and format the header and all row groups."""
    rows = [row for group in groups for row in group.rows]
    labels: list[str] | None = None
    if header is not None:
        labels = list(header[0])
        count = column_count(specs, [*rows, labels])
        if len(labels) > count:
            logger.debug("Dropping %d header labels", len(labels) - count)
        labels = _fill_row(labels, count)
    else:
        count = column_count(specs, rows)

    specs = list(specs[:count])
    sizings = derive_column_sizings(specs, rows, count)

    header_cells: list[str] | None = None
    if header is not None and labels is not None:
        sizings = _fit_header(sizings, specs, labels)
        header_formatters = [
            column_formatter(
                hspec.position,
                hspec.cut_mark if hspec.cut_mark is not None else spec.cut_mark,
                unaligned(sizing),
            )
            for hspec, spec, sizing in zip(_header_specs(header[1], count), specs, sizings)
        ]
        header_cells = apply_formatters(header_formatters, [labels])[0]

    formatters = row_formatters([spec.position for spec in specs], specs, sizings)
    formatted_groups = [
        apply_formatters(formatters, [_fill_row(row, count) for row in group.rows])
        for group in groups
    ]
    return TableLayout(
        widths=[sizing_width(sizing) for sizing in sizings],
        header=header_cells,
        groups=formatted_groups,
    )


def layout_table_as_cells(
    groups: Sequence[RowGroup],
    specs: Sequence[LayoutSpec],
    header: Header | None = None,
) -> list[list[str]]:
    """Formatted cells of the header (if any) followed by all body rows."""
    layout = layout_table(groups, specs, header)
    rows: list[list[str]] = [layout.header] if layout.header is not None else []
    for group in layout.groups:
        rows.extend(group)
    return rows


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def _border(left: str, h: str, cross: str, right: str, widths: Sequence[int]) -> str:
    spacers = [h * width for width in widths]
    return left + h + (h + cross + h).join(spacers) + h + right


def _content(v: str, cells: Sequence[str]) -> str:
    return v + " " + f" {v} ".join(cells) + " " + v


def layout_table_as_lines(
    groups: Sequence[RowGroup],
    specs: Sequence[LayoutSpec],
    header: Header | None = None,
    style: TableStyle | None = None,
) -> list[str]:
    """Render a bordered table.

    *header* is a pair of labels and per-column :class:`HeaderSpec`.  Header
    cells are never aligned at a character and only widen the columns they
    belong to when those are not fixed.
    """
    s = style if style is not None else default_style()
    layout = layout_table(groups, specs, header)
    widths = layout.widths

    lines: list[str] = []
    if layout.header is not None:
        lines.append(
            _border(s.header_top_l, s.header_top_h, s.header_top_c, s.header_top_r, widths)
        )
        lines.append(_content(s.header_v, layout.header))
        lines.append(
            _border(s.header_sep_lc, s.header_sep_h, s.header_sep_c, s.header_sep_rc, widths)
        )
    else:
        lines.append(
            _border(s.group_top_l, s.group_top_h, s.group_top_c, s.group_top_r, widths)
        )

    group_sep = _border(s.group_sep_lc, s.group_sep_h, s.group_sep_c, s.group_sep_rc, widths)
    for index, group in enumerate(layout.groups):
        if index > 0:
            lines.append(group_sep)
        lines.extend(_content(s.group_v, cells) for cells in group)

    lines.append(
        _border(s.group_bottom_l, s.group_bottom_h, s.group_bottom_c, s.group_bottom_r, widths)
    )
    return lines


def layout_table_as_string(
    groups: Sequence[RowGroup],
    specs: Sequence[LayoutSpec],
    header: Header | None = None,
    style: TableStyle | None = None,
) -> str:
    """Like :func:`layout_table_as_lines`, joined by newlines."""
    return "\n".join(layout_table_as_lines(groups, specs, header, style))
