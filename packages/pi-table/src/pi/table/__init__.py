"""pi-table: fixed-width text layout for tables and justified paragraphs."""

# Cell formatting
from pi.table.cell import (
    align,
    align_fixed,
    measure_extents,
    pad,
    spaces,
    split_at_occurrence,
    trim_or_pad,
)

# Grid layout
from pi.table.grid import (
    alt_lines,
    checkered_cells,
    layout_cells,
    layout_lines,
    layout_string,
)

# Justified text
from pi.table.justify import (
    columns_as_grid,
    dimorphic_spaces,
    dimorphic_summands,
    justify,
    justify_text,
    justify_texts_as_grid,
    justify_word_lists_as_grid,
    vpad_columns,
)

# Column sizing
from pi.table.sizing import (
    AlignedFill,
    ColumnSizing,
    FillToWidth,
    FixedWidth,
    column_formatter,
    derive_column_sizing,
    derive_column_sizings,
    ensure_minimum_width,
    sizing_width,
    unaligned,
)

# Styles
from pi.table.styles import (
    ASCII_ROUND,
    STYLES,
    UNICODE,
    UNICODE_BOLD,
    UNICODE_BOLD_HEADER,
    UNICODE_BOLD_STRIPED,
    UNICODE_ROUND,
    TableStyle,
    default_style,
    get_style,
    style_names,
)

# Tables
from pi.table.table import (
    TableLayout,
    layout_table,
    layout_table_as_cells,
    layout_table_as_lines,
    layout_table_as_string,
)

# Layout types
from pi.table.types import (
    EMPTY_EXTENTS,
    AlignAt,
    AlignExtents,
    CutMark,
    Expand,
    Fixed,
    HeaderSpec,
    LayoutSpec,
    Position,
    RowGroup,
    VerticalPosition,
    combine_extents,
    default_cut_mark,
    default_header_spec,
    default_layout,
    fixed_layout,
    fixed_left_layout,
    fold_extents,
    layout_spec,
    no_cut_mark,
    numeric_layout,
    row_group,
    rows_group,
    short_cut_mark,
)

__all__ = [
    # Cell formatting
    "align",
    "align_fixed",
    "measure_extents",
    "pad",
    "spaces",
    "split_at_occurrence",
    "trim_or_pad",
    # Grid layout
    "alt_lines",
    "checkered_cells",
    "layout_cells",
    "layout_lines",
    "layout_string",
    # Justified text
    "columns_as_grid",
    "dimorphic_spaces",
    "dimorphic_summands",
    "justify",
    "justify_text",
    "justify_texts_as_grid",
    "justify_word_lists_as_grid",
    "vpad_columns",
    # Column sizing
    "AlignedFill",
    "ColumnSizing",
    "FillToWidth",
    "FixedWidth",
    "column_formatter",
    "derive_column_sizing",
    "derive_column_sizings",
    "ensure_minimum_width",
    "sizing_width",
    "unaligned",
    # Styles
    "ASCII_ROUND",
    "STYLES",
    "UNICODE",
    "UNICODE_BOLD",
    "UNICODE_BOLD_HEADER",
    "UNICODE_BOLD_STRIPED",
    "UNICODE_ROUND",
    "TableStyle",
    "default_style",
    "get_style",
    "style_names",
    # Tables
    "TableLayout",
    "layout_table",
    "layout_table_as_cells",
    "layout_table_as_lines",
    "layout_table_as_string",
    # Layout types
    "EMPTY_EXTENTS",
    "AlignAt",
    "AlignExtents",
    "CutMark",
    "Expand",
    "Fixed",
    "HeaderSpec",
    "LayoutSpec",
    "Position",
    "RowGroup",
    "VerticalPosition",
    "combine_extents",
    "default_cut_mark",
    "default_header_spec",
    "default_layout",
    "fixed_layout",
    "fixed_left_layout",
    "fold_extents",
    "layout_spec",
    "no_cut_mark",
    "numeric_layout",
    "row_group",
    "rows_group",
    "short_cut_mark",
]
