"""Tag matching and documentation extraction.

Language-aware entry points (analyzer, open_files) live in their own
modules and are not re-exported here.
"""

from tagdoc.tags.docs import (
    BlockCommentScanner,
    ScanState,
    escape_html,
    extract_documentation_at_row,
    filter_documentation,
)
from tagdoc.tags.fargs import guess_fargs
from tagdoc.tags.matcher import find_matching_tags, make_doc_head
from tagdoc.tags.models import MatchRecord, PatternRule, ResultsMap, TagSummary
from tagdoc.tags.offsets import get_offset_row

__all__ = [
    # Models
    "MatchRecord",
    "PatternRule",
    "ResultsMap",
    "TagSummary",
    # Engine
    "BlockCommentScanner",
    "ScanState",
    "escape_html",
    "extract_documentation_at_row",
    "filter_documentation",
    "find_matching_tags",
    "get_offset_row",
    "guess_fargs",
    "make_doc_head",
]
