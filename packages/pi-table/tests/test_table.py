"""Tests for pi.table.table -- bordered table assembly."""

from __future__ import annotations

import pytest

from pi.table.styles import (
    ASCII_ROUND,
    STYLE_ENV_VAR,
    STYLES,
    UNICODE,
    UNICODE_BOLD_STRIPED,
)
from pi.table.table import (
    layout_table,
    layout_table_as_cells,
    layout_table_as_lines,
    layout_table_as_string,
)
from pi.table.types import (
    HeaderSpec,
    default_header_spec,
    default_layout,
    fixed_left_layout,
    no_cut_mark,
    numeric_layout,
    row_group,
    rows_group,
)

NUMBERS = rows_group([["1.5", "x"], ["10.25", "yy"]])
NUMBER_SPECS = [numeric_layout(), default_layout()]
NUMBER_HEADER = (["num", "text"], [default_header_spec(), default_header_spec()])


# ---------------------------------------------------------------------------
# Line shape
# ---------------------------------------------------------------------------


class TestTableLines:
    """Borders and content lines."""

    def test_two_fixed_columns_without_header(self) -> None:
        lines = layout_table_as_lines(
            [row_group(["ab", "cd"])],
            [fixed_left_layout(5), fixed_left_layout(5)],
            style=ASCII_ROUND,
        )
        assert lines == [
            ".-------.-------.",
            "| ab    | cd    |",
            "'-------'-------'",
        ]
        assert {len(line) for line in lines} == {5 + 5 + 3 * 2 + 1}

    def test_header_with_aligned_column(self) -> None:
        lines = layout_table_as_lines([NUMBERS], NUMBER_SPECS, NUMBER_HEADER, UNICODE)
        assert lines == [
            "┌───────┬──────┐",
            "│  num  │ text │",
            "╞═══════╪══════╡",
            "│  1.5  │ x    │",
            "│ 10.25 │ yy   │",
            "└───────┴──────┘",
        ]

    def test_groups_are_separated(self) -> None:
        groups = [row_group(["a", "b"]), rows_group([["c", "d"], ["e", "f"]])]
        lines = layout_table_as_lines(groups, [default_layout()] * 2, style=ASCII_ROUND)
        assert lines == [
            ".---.---.",
            "| a | b |",
            ":---+---:",
            "| c | d |",
            "| e | f |",
            "'---'---'",
        ]

    def test_striped_group_separator(self) -> None:
        groups = [row_group(["a"]), row_group(["b"])]
        lines = layout_table_as_lines(groups, [default_layout()], style=UNICODE_BOLD_STRIPED)
        assert lines[2] == "┃---┃"

    def test_sizing_spans_all_groups(self) -> None:
        groups = [row_group(["a"]), row_group(["longest"])]
        lines = layout_table_as_lines(groups, [default_layout()], style=ASCII_ROUND)
        assert lines[1] == "| a       |"

    def test_string_joins_lines(self) -> None:
        text = layout_table_as_string([row_group(["a"])], [default_layout()], style=ASCII_ROUND)
        assert text == ".---.\n| a |\n'---'"

    def test_default_style_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(STYLE_ENV_VAR, "unicode")
        lines = layout_table_as_lines([row_group(["a"])], [default_layout()])
        assert lines[0] == "┌───┐"

    @pytest.mark.parametrize("name", list(STYLES))
    def test_every_line_has_same_width(self, name: str) -> None:
        groups = [
            NUMBERS,
            rows_group([["123.456", "a somewhat longer cell"], ["", ""]]),
            row_group(["7", "z"]),
        ]
        specs = [numeric_layout(), fixed_left_layout(10)]
        header = (["amount", "description"], [HeaderSpec("left"), default_header_spec()])
        for h in (None, header):
            lines = layout_table_as_lines(groups, specs, h, STYLES[name])
            assert len({len(line) for line in lines}) == 1


# ---------------------------------------------------------------------------
# Header handling
# ---------------------------------------------------------------------------


class TestHeader:
    """Header labels widen columns but are never aligned."""

    def test_header_widens_aligned_column(self) -> None:
        cells = layout_table_as_cells(
            [row_group(["1.5"])],
            [numeric_layout()],
            (["amount"], [default_header_spec()]),
        )
        assert cells == [["amount"], ["   1.5"]]

    def test_header_does_not_widen_fixed_column(self) -> None:
        cells = layout_table_as_cells(
            [row_group(["abc"])],
            [fixed_left_layout(3)],
            (["long header"], [HeaderSpec("left")]),
        )
        assert cells == [["l.."], ["abc"]]

    def test_header_cut_mark_override(self) -> None:
        cells = layout_table_as_cells(
            [row_group(["abc"])],
            [fixed_left_layout(3)],
            (["long header"], [HeaderSpec("left", no_cut_mark())]),
        )
        assert cells[0] == ["lon"]

    def test_header_uses_its_own_position(self) -> None:
        cells = layout_table_as_cells(
            [row_group(["abcdef"])],
            [default_layout()],
            (["ab"], [HeaderSpec("right")]),
        )
        assert cells == [["    ab"], ["abcdef"]]

    def test_header_labels_containing_dot_are_not_aligned(self) -> None:
        cells = layout_table_as_cells(
            [rows_group([["1.5"], ["10.25"]])],
            [numeric_layout()],
            (["v.1"], [HeaderSpec("left")]),
        )
        assert cells[0] == ["v.1  "]

    def test_missing_header_labels_are_blank(self) -> None:
        cells = layout_table_as_cells(
            [row_group(["a", "b"])],
            [default_layout(), default_layout()],
            (["x"], [default_header_spec()]),
        )
        assert cells[0] == ["x", " "]

    def test_missing_header_specs_use_default(self) -> None:
        cells = layout_table_as_cells(
            [row_group(["abc", "def"])],
            [default_layout(), default_layout()],
            (["a", "b"], [HeaderSpec("left")]),
        )
        assert cells[0] == ["a  ", " b "]

    def test_header_only_table(self) -> None:
        lines = layout_table_as_lines(
            [],
            [default_layout()],
            (["name"], [default_header_spec()]),
            ASCII_ROUND,
        )
        assert lines == [".------.", "| name |", ":======:", "'------'"]


# ---------------------------------------------------------------------------
# Column count mismatches
# ---------------------------------------------------------------------------


class TestColumnMismatch:
    """Extra columns or specs are dropped without error."""

    def test_extra_data_columns_are_dropped(self) -> None:
        lines = layout_table_as_lines(
            [row_group(["a", "b", "c"])], [default_layout()], style=ASCII_ROUND
        )
        assert lines[1] == "| a |"

    def test_extra_specs_are_dropped(self) -> None:
        layout = layout_table([row_group(["a"])], [default_layout()] * 3)
        assert layout.widths == [1]

    def test_short_rows_are_filled(self) -> None:
        groups = [rows_group([["a", "b"], ["c"]])]
        lines = layout_table_as_lines(groups, [default_layout()] * 2, style=ASCII_ROUND)
        assert lines[2] == "| c |   |"
