"""Border glyph sets for tables.

A :class:`TableStyle` only holds characters; the table assembler decides
where they go.  The style used when none is given can be chosen with the
``PI_TABLE_STYLE`` environment variable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

STYLE_ENV_VAR = "PI_TABLE_STYLE"


@dataclass(frozen=True)
class TableStyle:
    # Separator between the header and the first row group
    header_sep_h: str
    header_sep_lc: str
    header_sep_rc: str
    header_sep_c: str
    # Top border when a header is present
    header_top_l: str
    header_top_r: str
    header_top_c: str
    header_top_h: str
    # Vertical line between header cells
    header_v: str
    # Vertical line between body cells
    group_v: str
    # Separator between row groups
    group_sep_h: str
    group_sep_c: str
    group_sep_lc: str
    group_sep_rc: str
    # Top border without a header
    group_top_c: str
    group_top_l: str
    group_top_r: str
    group_top_h: str
    # Bottom border
    group_bottom_c: str
    group_bottom_l: str
    group_bottom_r: str
    group_bottom_h: str


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

ASCII_ROUND = TableStyle(
    header_sep_h="=",
    header_sep_lc=":",
    header_sep_rc=":",
    header_sep_c="|",
    header_top_l=".",
    header_top_r=".",
    header_top_c=".",
    header_top_h="-",
    header_v="|",
    group_v="|",
    group_sep_h="-",
    group_sep_c="+",
    group_sep_lc=":",
    group_sep_rc=":",
    group_top_c=".",
    group_top_l=".",
    group_top_r=".",
    group_top_h="-",
    group_bottom_c="'",
    group_bottom_l="'",
    group_bottom_r="'",
    group_bottom_h="-",
)

UNICODE = TableStyle(
    header_sep_h="═",
    header_sep_lc="╞",
    header_sep_rc="╡",
    header_sep_c="╪",
    header_top_l="┌",
    header_top_r="┐",
    header_top_c="┬",
    header_top_h="─",
    header_v="│",
    group_v="│",
    group_sep_h="─",
    group_sep_c="┼",
    group_sep_lc="├",
    group_sep_rc="┤",
    group_top_c="┬",
    group_top_l="┌",
    group_top_r="┐",
    group_top_h="─",
    group_bottom_c="┴",
    group_bottom_l="└",
    group_bottom_r="┘",
    group_bottom_h="─",
)

UNICODE_BOLD_HEADER = replace(
    UNICODE,
    header_sep_h="━",
    header_sep_lc="┡",
    header_sep_rc="┩",
    header_sep_c="╇",
    header_top_l="┏",
    header_top_r="┓",
    header_top_c="┳",
    header_top_h="━",
    header_v="┃",
)

UNICODE_ROUND = replace(
    UNICODE,
    group_top_l="╭",
    group_top_r="╮",
    group_bottom_l="╰",
    group_bottom_r="╯",
    header_top_l="╭",
    header_top_r="╮",
)

UNICODE_BOLD = TableStyle(
    header_sep_h="━",
    header_sep_lc="┣",
    header_sep_rc="┫",
    header_sep_c="╋",
    header_top_l="┏",
    header_top_r="┓",
    header_top_c="┳",
    header_top_h="━",
    header_v="┃",
    group_v="┃",
    group_sep_h="━",
    group_sep_c="╋",
    group_sep_lc="┣",
    group_sep_rc="┫",
    group_top_c="┳",
    group_top_l="┏",
    group_top_r="┓",
    group_top_h="━",
    group_bottom_c="┻",
    group_bottom_l="┗",
    group_bottom_r="┛",
    group_bottom_h="━",
)

UNICODE_BOLD_STRIPED = replace(
    UNICODE_BOLD,
    group_sep_h="-",
    group_sep_c="┃",
    group_sep_lc="┃",
    group_sep_rc="┃",
)

STYLES: dict[str, TableStyle] = {
    "ascii_round": ASCII_ROUND,
    "unicode": UNICODE,
    "unicode_bold_header": UNICODE_BOLD_HEADER,
    "unicode_round": UNICODE_ROUND,
    "unicode_bold": UNICODE_BOLD,
    "unicode_bold_striped": UNICODE_BOLD_STRIPED,
}

DEFAULT_STYLE_NAME = "ascii_round"


def style_names() -> list[str]:
    return list(STYLES)


def get_style(name: str) -> TableStyle:
    """Look up a style by name.

    Raises ``KeyError`` naming the known styles if *name* is unknown.
    """
    try:
        return STYLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown table style {name!r}, expected one of: {', '.join(STYLES)}"
        ) from None


def default_style() -> TableStyle:
    """Return the style named by ``PI_TABLE_STYLE``, or ASCII."""
    name = os.environ.get(STYLE_ENV_VAR, DEFAULT_STYLE_NAME)
    try:
        return get_style(name)
    except KeyError as e:
        logger.warning("%s; using %s", e.args[0], DEFAULT_STYLE_NAME)
        return STYLES[DEFAULT_STYLE_NAME]
