"""Apply tag rules to source text and accumulate per-symbol match records."""

from __future__ import annotations

from collections.abc import Sequence

from tagdoc.config.constants import ELLIPSIS, MAX_DOCHEAD_LENGTH
from tagdoc.core.logging import get_logger
from tagdoc.tags.docs import extract_documentation_at_row
from tagdoc.tags.models import MatchRecord, PatternRule, ResultsMap
from tagdoc.tags.offsets import get_offset_row

log = get_logger(__name__)


def make_doc_head(line: str) -> str:
    """Doc head for a defining line; long lines keep the part past the cap."""
    if len(line) > MAX_DOCHEAD_LENGTH:
        return line[MAX_DOCHEAD_LENGTH:] + ELLIPSIS
    return line


def find_matching_tags(
    lines: Sequence[str],
    contents: str,
    tag: PatternRule,
    extract_documentation: bool,
    guess_fargs: bool,
    results: ResultsMap | None = None,
) -> ResultsMap:
    """Find all summary entries that match the given tag rule.

    Records are appended to ``results`` in place, so several rules can be
    applied to the same source while accumulating into one map.

    Args:
        lines: Source lines (``contents`` split on newlines)
        contents: Full source text
        tag: Rule whose single capture group is the symbol name
        extract_documentation: Attach doc head and preceding doc comment
        guess_fargs: Flag records for deferred argument guessing
        results: Map to accumulate into; a new one is created if omitted

    Returns:
        The same ``results`` map.

    Raises:
        TagPatternError: If the rule breaks the matching contract. Raised
            before any match is processed.
    """
    tag.validate()
    if results is None:
        results = {}

    matched = 0
    for match in tag.pattern.finditer(contents):
        name = match.group(1)
        if name is None:
            continue
        matched += 1

        added_offset = match.group(0).find(name)
        row = get_offset_row(contents, match.start() + max(added_offset, 0))
        line = lines[row]

        doc: str | None = None
        doc_head: str | None = None
        if extract_documentation:
            doc_head = make_doc_head(line)
            doc = extract_documentation_at_row(lines, row - 1)

        if tag.doc_only:
            if not doc:
                continue
            if entries := results.get(name):
                entries[0].doc = doc
            else:
                # Doc-only rules never originate an entry; the doc is dropped
                log.debug("doc_only_without_entry", name=name, row=row, kind=tag.kind)
            continue

        results.setdefault(name, []).append(
            MatchRecord(
                row=row,
                doc_head=doc_head,
                guess_fargs=guess_fargs,
                doc=doc,
                kind=tag.kind,
            )
        )

    log.debug("tag_rule_applied", kind=tag.kind, doc_only=tag.doc_only, matches=matched)
    return results
