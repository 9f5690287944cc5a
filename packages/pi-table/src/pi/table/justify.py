"""Justified text: greedy word wrapping with evenly spread spaces.

Justified texts can be put side by side as columns of a grid, which is then
laid out like any other table.

>>> justify_text(10, "This text will not fit on one line.")
['This  text', 'will   not', 'fit on one', 'line.']
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from pi.table.cell import spaces
from pi.table.types import VerticalPosition

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Dimorphic split
# ---------------------------------------------------------------------------


def dimorphic_summands(total: int, parts: int) -> list[int]:
    """Split *total* into *parts* summands of two sizes differing by one.

    The larger summands come first:

    >>> dimorphic_summands(40, 9)
    [5, 5, 5, 5, 4, 4, 4, 4, 4]
    """
    if parts <= 0:
        return []
    q, r = divmod(total, parts)
    return [q + 1] * r + [q] * (parts - r)


def dimorphic_spaces(total: int, parts: int) -> list[str]:
    return [spaces(n) for n in dimorphic_summands(total, parts)]


# ---------------------------------------------------------------------------
# Justification
# ---------------------------------------------------------------------------


def _gather(width: int, words: Sequence[str]) -> list[tuple[int, list[str]]]:
    """Greedily pack *words* into lines of at most *width* columns.

    Returns ``(length, words)`` per line, where *length* counts single spaces
    between the words.  A word longer than *width* gets a line of its own.
    """
    lines: list[tuple[int, list[str]]] = []
    line: list[str] = []
    line_len = 0
    for word in words:
        if not line:
            line, line_len = [word], len(word)
        elif line_len + 1 + len(word) <= width:
            line.append(word)
            line_len += 1 + len(word)
        else:
            lines.append((line_len, line))
            line, line_len = [word], len(word)
    if line:
        lines.append((line_len, line))
    return lines


def _expand(width: int, line_len: int, words: list[str]) -> str:
    if line_len >= width or len(words) < 2:
        return " ".join(words)
    gaps = dimorphic_spaces(width - line_len, len(words) - 1) + [""]
    return " ".join(word + gap for word, gap in zip(words, gaps))


def justify(width: int, words: Sequence[str]) -> list[str]:
    """Fit as many words on each line as *width* allows.

    Every line but the last is filled to *width* by spreading extra spaces
    between its words; the last line stays ragged.
    """
    lines = _gather(width, words)
    result = [_expand(width, line_len, line) for line_len, line in lines[:-1]]
    if lines:
        result.append(" ".join(lines[-1][1]))
    return result


def justify_text(width: int, text: str) -> list[str]:
    """Split *text* at whitespace and :func:`justify` the words."""
    return justify(width, text.split())


# ---------------------------------------------------------------------------
# Columns of lines
# ---------------------------------------------------------------------------


def vpad_columns(
    position: VerticalPosition, filler: T, columns: Sequence[Sequence[T]]
) -> list[list[T]]:
    """Fill all *columns* to the same length with *filler*.

    ``"start"`` fills at the end, ``"end"`` fills at the start and
    ``"center"`` fills both, putting the odd filler at the end.
    """
    longest = max((len(column) for column in columns), default=0)
    result: list[list[T]] = []
    for column in columns:
        missing = longest - len(column)
        if position == "end":
            result.append([filler] * missing + list(column))
        elif position == "center":
            q, r = divmod(missing, 2)
            result.append([filler] * q + list(column) + [filler] * (q + r))
        else:
            result.append(list(column) + [filler] * missing)
    return result


def columns_as_grid(
    position: VerticalPosition, columns: Sequence[Sequence[str]]
) -> list[list[str]]:
    """Merge columns of lines into rows, filling holes with empty cells.

    >>> columns_as_grid("start", [justify_text(10, "This text will not fit on one line."), ["42", "23"]])
    [['This  text', '42'], ['will   not', '23'], ['fit on one', ''], ['line.', '']]
    """
    padded = vpad_columns(position, "", columns)
    return [list(row) for row in zip(*padded)]


def justify_word_lists_as_grid(
    columns: Sequence[tuple[int, Sequence[str]]],
) -> list[list[str]]:
    """Justify each ``(width, words)`` pair and place the results side by side."""
    return columns_as_grid("start", [justify(width, words) for width, words in columns])


def justify_texts_as_grid(columns: Sequence[tuple[int, str]]) -> list[list[str]]:
    """Like :func:`justify_word_lists_as_grid` for whole texts."""
    return justify_word_lists_as_grid(
        [(width, text.split()) for width, text in columns]
    )
