"""Documentation comment extraction and formatting.

Two comment styles are recognized directly above a definition:
- Contiguous line comments (``# ...``), collected nearest line first
- A single block comment (``/* ... */``), found by scanning backward

Block comments are located by a small backward state machine
(BlockCommentScanner) so that the "no foreign code between the comment
and the definition" rule stays explicit.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from tagdoc.config.constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    LINE_COMMENT_MARKER,
)

_LINE_COMMENT_RE = re.compile(rf"^\s*{re.escape(LINE_COMMENT_MARKER)}\s*(.*)")

# Formatting rewrites, applied in order after escaping
_CONTINUATION_RE = re.compile(r"\n[ \t]*\*[ \t]*|\n[ \t]*")
_LEADING_NEWLINES_RE = re.compile(r"\A\n+")
_PARAGRAPH_RE = re.compile(r"\n\n(?!@)")
_FIRST_TAG_RE = re.compile(r"\n@(\w+)")
_PARAM_TAG_RE = re.compile(r"\n@param (\w+)")
_TAG_RE = re.compile(r"\n@(\w+)")

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def escape_html(text: str) -> str:
    # & first so the other entities are not escaped twice
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def filter_documentation(doc: str) -> str:
    """Turn raw comment text into a display-safe summary.

    Escapes HTML, strips ``*`` continuation markers and leading indentation,
    turns blank lines into paragraph breaks, separates the summary from the
    first ``@tag`` line, and bolds tags (``@param`` also italicizes the
    parameter name).
    """
    doc = escape_html(doc)
    doc = _CONTINUATION_RE.sub("\n", doc)
    # A bare "/**" opener leaves extra blank lines at the top
    doc = _LEADING_NEWLINES_RE.sub("\n", doc).rstrip()
    doc = _PARAGRAPH_RE.sub("<br/><br/>", doc)
    doc = _FIRST_TAG_RE.sub(r"<br/>\n@\1", doc, count=1)
    doc = _PARAM_TAG_RE.sub(r"<br/>\n<b>@param</b> <i>\1</i>", doc)
    return _TAG_RE.sub(r"<br/>\n<b>@\1</b>", doc)


class ScanState(Enum):
    """States of the backward block-comment scan."""

    SEEKING_CLOSE = auto()
    SEEKING_OPEN = auto()
    DONE = auto()
    ABORTED = auto()


@dataclass
class BlockCommentScanner:
    """Backward scanner for the block comment ending right above a row.

    Feed lines bottom-up with scan_line(); each step consumes one character
    moving left. Before the closing marker only whitespace and ``/`` may be
    crossed, anything else aborts. Positions are (row, col) of the first
    marker character.
    """

    state: ScanState = ScanState.SEEKING_CLOSE
    close_at: tuple[int, int] | None = None
    open_at: tuple[int, int] | None = None

    @property
    def finished(self) -> bool:
        return self.state in (ScanState.DONE, ScanState.ABORTED)

    def scan_line(self, row: int, line: str) -> ScanState:
        col = len(line) - 1
        while col >= 0 and not self.finished:
            col = self.step(row, line, col)
        return self.state

    def step(self, row: int, line: str, col: int) -> int:
        """Consume the character at ``col``; return the next column to scan."""
        if self.state is ScanState.SEEKING_CLOSE:
            if line.startswith(BLOCK_COMMENT_CLOSE, col):
                self.close_at = (row, col)
                self.state = ScanState.SEEKING_OPEN
                # Skip the whole marker so "/*/" cannot reuse its "*"
                return col - len(BLOCK_COMMENT_CLOSE)
            if not (line[col].isspace() or line[col] == "/"):
                self.state = ScanState.ABORTED
            return col - 1
        if self.state is ScanState.SEEKING_OPEN and line.startswith(BLOCK_COMMENT_OPEN, col):
            self.open_at = (row, col)
            self.state = ScanState.DONE
        return col - 1

    def interior(self, lines: Sequence[str]) -> str:
        """Text between the markers, led by an empty line for the formatter."""
        if self.open_at is None or self.close_at is None:
            raise ValueError("interior() requires a completed scan")
        open_row, open_col = self.open_at
        close_row, close_col = self.close_at
        start = open_col + len(BLOCK_COMMENT_OPEN)
        if open_row == close_row:
            rows = ["", lines[open_row][start:close_col]]
        else:
            rows = ["", lines[open_row][start:]]
            rows.extend(lines[open_row + 1 : close_row])
            rows.append(lines[close_row][:close_col])
        return "\n".join(rows)


def _extract_line_comments(lines: Sequence[str], row: int) -> str | None:
    match = _LINE_COMMENT_RE.match(lines[row])
    if match is None:
        return None
    results = [match.group(1)]
    for start in range(row - 1, -1, -1):
        match = _LINE_COMMENT_RE.match(lines[start])
        if match is None:
            break
        results.append(match.group(1))
    return "\n".join(results)


def _extract_block_comment(lines: Sequence[str], row: int) -> str | None:
    scanner = BlockCommentScanner()
    for current in range(row, -1, -1):
        scanner.scan_line(current, lines[current])
        if scanner.state is ScanState.ABORTED:
            return None
        if scanner.state is ScanState.DONE:
            return scanner.interior(lines)
    return None


def extract_documentation_at_row(lines: Sequence[str], row: int) -> str | None:
    """Return the formatted documentation comment ending at ``row``, if any.

    Line comments are tried first; the block comment search only runs when
    ``lines[row]`` is not a line comment.
    """
    if row < 0 or row >= len(lines):
        return None

    doc = _extract_line_comments(lines, row)
    if doc is None:
        doc = _extract_block_comment(lines, row)
    if doc is None:
        return None
    return filter_documentation(doc)
