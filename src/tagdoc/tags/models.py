"""Data models for tag matching.

- PatternRule: a symbol-finding regex plus its category, validated on creation
- MatchRecord: one located definition of a symbol
- ResultsMap: symbol name -> match records, shared across rule applications
- TagSummary: display-ready view of a MatchRecord
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from tagdoc.core.errors import TagPatternError


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A tag rule: regex with exactly one capture group naming the symbol.

    Attributes:
        pattern: Compiled regex; group 1 is the symbol name
        kind: Symbol category (e.g. "function", "class")
        doc_only: Rule only supplies documentation for an existing entry
        find_all: Rule reports every occurrence, not just the first
    """

    pattern: re.Pattern[str]
    kind: str
    doc_only: bool = False
    find_all: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the matching contract; raises TagPatternError."""
        if not self.find_all:
            raise TagPatternError.not_global(self.pattern.pattern)
        if self.pattern.groups != 1:
            raise TagPatternError.wrong_group_count(self.pattern.pattern, self.pattern.groups)

    @classmethod
    def compile(
        cls,
        source: str,
        kind: str,
        *,
        doc_only: bool = False,
        flags: int = re.MULTILINE,
    ) -> PatternRule:
        """Build a rule from a pattern string (multiline by default)."""
        try:
            pattern = re.compile(source, flags)
        except re.error as e:
            raise TagPatternError.invalid_pattern(source, str(e)) from e
        return cls(pattern=pattern, kind=kind, doc_only=doc_only)


@dataclass(slots=True)
class MatchRecord:
    """A located symbol definition.

    ``doc`` stays mutable so a doc-only rule can attach documentation
    to the first record of a symbol after the fact.
    """

    row: int
    doc_head: str | None
    guess_fargs: bool
    doc: str | None
    kind: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "docHead": self.doc_head,
            "guessFargs": self.guess_fargs,
            "doc": self.doc,
            "kind": self.kind,
        }


ResultsMap = dict[str, list[MatchRecord]]
"""Symbol name -> records in first-seen order. Only the matcher appends entries or sets doc."""


@dataclass(frozen=True, slots=True)
class TagSummary:
    """Flattened tag for display: one MatchRecord with its name and guessed arguments."""

    name: str
    kind: str
    row: int
    doc: str | None = None
    doc_head: str | None = None
    fargs: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "row": self.row,
            "doc": self.doc,
            "docHead": self.doc_head,
            "fargs": self.fargs,
        }
