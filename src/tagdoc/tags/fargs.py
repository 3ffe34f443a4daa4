"""Heuristic argument-list guessing for completion summaries."""

from __future__ import annotations

import re

from tagdoc.config.constants import ELLIPSIS

# Only whitespace may separate the name from the opening parenthesis
_FARGS_RE = re.compile(r"\s*(\([A-Za-z0-9$_,\s]*(\))?)")


def guess_fargs(line: str, name: str) -> str:
    """Guess the parameter list directly following ``name`` on ``line``.

    ``name`` is located as a whole identifier, so "f" is not found inside
    "def". Anything other than whitespace between the name and ``(`` means
    there is no argument list.

    Examples:
        guess_fargs("function foo(a, b) {", "foo") -> "(a, b)"
        guess_fargs("function foo(a, b", "foo") -> "(a, b..."
        guess_fargs("var foo = bar(x);", "foo") -> ""
    """
    if not name:
        return ""
    found = re.search(rf"(?<![\w$]){re.escape(name)}(?![\w$])", line)
    if found is None:
        return ""
    match = _FARGS_RE.match(line, found.end())
    if match is None:
        return ""
    fragment = match.group(1)
    return fragment if match.group(2) else fragment + ELLIPSIS
