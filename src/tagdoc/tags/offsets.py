"""Character offset to line number mapping."""

from __future__ import annotations


def get_offset_row(contents: str, offset: int) -> int:
    """Return the 0-based row of ``offset`` in ``contents``.

    Counts the newlines strictly before ``offset`` by searching backward
    from it. Offset 0 is row 0.
    """
    row = 0
    index = contents.rfind("\n", 0, offset)
    while index >= 0:
        row += 1
        index = contents.rfind("\n", 0, index)
    return row
