"""Single-cell formatting: padding, trimming with cut marks, alignment.

Every function here returns a string of exactly the requested width (the
one exception is :func:`pad`, whose caller guarantees the content fits).
One character is assumed to occupy one terminal column.
"""

from __future__ import annotations

from pi.table.types import AlignAt, AlignExtents, CutMark, Position

# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------


def spaces(n: int) -> str:
    return " " * max(n, 0)


def pad(position: Position, width: int, s: str) -> str:
    """Pad *s* with spaces to *width* according to *position*.

    *width* must be at least ``len(s)``; longer content is returned as-is.
    Centered content puts the odd space on the right.
    """
    fill = width - len(s)
    if fill <= 0:
        return s
    if position == "right":
        return spaces(fill) + s
    if position == "center":
        q, r = divmod(fill, 2)
        return spaces(q) + s + spaces(q + r)
    return s + spaces(fill)


# ---------------------------------------------------------------------------
# Trimming
# ---------------------------------------------------------------------------


def trim_or_pad(position: Position, cut_mark: CutMark, width: int, s: str) -> str:
    """Fit *s* into exactly *width* columns.

    Short content is padded like :func:`pad`.  Long content is cut and the
    cut mark placed where content went missing:

    * ``left``   -> head is kept, mark appended
    * ``right``  -> tail is kept, mark prepended
    * ``center`` -> both ends are cut, one mark on each side

    A mark wider than *width* is clipped.
    """
    width = max(width, 0)
    if len(s) <= width:
        return pad(position, width, s)

    mark_width = min(cut_mark.width, width)

    if position == "center" and width >= 2 * cut_mark.width:
        available = width - 2 * cut_mark.width
        cut = len(s) - available
        cut_left = cut // 2
        cut_right = cut - cut_left
        mark = cut_mark.fit(cut_mark.width)
        return mark + s[cut_left : len(s) - cut_right] + mark

    keep = width - mark_width
    if position == "right":
        return cut_mark.fit_right(mark_width) + s[len(s) - keep :]
    return s[:keep] + cut_mark.fit(mark_width)


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


def split_at_occurrence(char: str, n: int, s: str) -> tuple[str, str]:
    """Split *s* in front of the *n*-th (0-indexed) occurrence of *char*.

    Returns ``(s, "")`` when there is no such occurrence.
    """
    seen = 0
    for i, ch in enumerate(s):
        if ch == char:
            if seen == n:
                return (s[:i], s[i:])
            seen += 1
    return (s, "")


def measure_extents(align_at: AlignAt, s: str) -> AlignExtents:
    """Measure the parts of *s* before and after its alignment point."""
    before, after = split_at_occurrence(align_at.char, align_at.occurrence, s)
    return AlignExtents(len(before), len(after))


def align(align_at: AlignAt, extents: AlignExtents, s: str) -> str:
    """Place *s* so that its alignment point sits at ``extents.left``.

    Cells without the alignment character keep their whole content on the
    left and get a blank right side.
    """
    before, after = split_at_occurrence(align_at.char, align_at.occurrence, s)
    return before.rjust(extents.left) + after.ljust(extents.right)


def _distribute_shrink(
    position: Position, amount: int, left: int, right: int
) -> tuple[int, int]:
    """Split *amount* columns of shrink between the two sides of a cell.

    Whatever one side cannot give up is taken from the other.
    """
    if position == "left":
        cut_right = min(amount, right)
        return (amount - cut_right, cut_right)
    if position == "right":
        cut_left = min(amount, left)
        return (cut_left, amount - cut_left)

    q, r = divmod(amount, 2)
    cut_left, cut_right = q, q + r
    if cut_right > right:
        cut_left += cut_right - right
        cut_right = right
    if cut_left > left:
        cut_right += cut_left - left
        cut_left = left
    return (cut_left, cut_right)


def align_fixed(
    position: Position,
    cut_mark: CutMark,
    width: int,
    align_at: AlignAt,
    extents: AlignExtents,
    s: str,
) -> str:
    """Align *s* within a fixed *width* that may be narrower than *extents*.

    When the aligned content does not fit, columns are taken away from the
    side(s) chosen by *position* (``left`` cuts the right side first,
    ``right`` the left side, ``center`` both) so the alignment point moves as
    little as possible.  A side that loses content gets a cut mark.
    """
    width = max(width, 0)
    if width == 0:
        return ""
    if width == 1 and len(s) >= 2 and cut_mark.width > 0:
        return cut_mark.fit(1)

    before, after = split_at_occurrence(align_at.char, align_at.occurrence, s)
    left_width = max(extents.left, len(before))
    right_width = max(extents.right, len(after))

    overflow = left_width + right_width - width
    if overflow <= 0:
        aligned = align(align_at, AlignExtents(left_width, right_width), s)
        return pad(position, width, aligned)

    cut_left, cut_right = _distribute_shrink(
        position, overflow, left_width, right_width
    )
    keep_left = left_width - cut_left
    keep_right = right_width - cut_right

    left_part = before.rjust(left_width)[cut_left:]
    if cut_left > left_width - len(before):
        mark_width = min(cut_mark.width, keep_left)
        left_part = cut_mark.fit(mark_width) + left_part[mark_width:]

    right_part = after.ljust(right_width)[:keep_right]
    if cut_right > right_width - len(after):
        mark_width = min(cut_mark.width, keep_right)
        right_part = right_part[: keep_right - mark_width] + cut_mark.fit(mark_width)

    return left_part + right_part
