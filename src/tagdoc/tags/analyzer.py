"""Run a language's tag rules over a source file and summarize the results."""

from __future__ import annotations

from collections.abc import Sequence

from tagdoc.core.languages import TagLanguage, get_language_for_path
from tagdoc.core.logging import analysis_scope, get_logger
from tagdoc.tags.fargs import guess_fargs as guess_fargs_for
from tagdoc.tags.matcher import find_matching_tags
from tagdoc.tags.models import ResultsMap, TagSummary

log = get_logger(__name__)


def split_lines(contents: str) -> list[str]:
    """Split source text so that row numbers agree with get_offset_row()."""
    return contents.split("\n")


def analyze_source(
    path: str,
    contents: str,
    *,
    language: TagLanguage | None = None,
    extract_documentation: bool = True,
    guess_fargs: bool = True,
) -> ResultsMap:
    """Apply every tag rule of the file's language to ``contents``.

    All rules accumulate into one results map, in table order. Files of an
    unknown language produce an empty map. Log events of one call share a
    request id (see analysis_scope).
    """
    if language is None:
        language = get_language_for_path(path)

    with analysis_scope():
        if language is None:
            log.debug("analyze_unknown_language", path=path)
            return {}

        lines = split_lines(contents)
        results: ResultsMap = {}
        for rule in language.tags:
            find_matching_tags(lines, contents, rule, extract_documentation, guess_fargs, results)

        log.debug(
            "analyze_complete",
            path=path,
            language=language.name,
            symbols=len(results),
            records=sum(len(records) for records in results.values()),
        )
    return results


def summarize_results(lines: Sequence[str], results: ResultsMap) -> list[TagSummary]:
    """Flatten a results map into summaries, guessing argument lists where flagged."""
    summaries: list[TagSummary] = []
    for name, records in results.items():
        for record in records:
            fargs = guess_fargs_for(lines[record.row], name) if record.guess_fargs else ""
            summaries.append(
                TagSummary(
                    name=name,
                    kind=record.kind,
                    row=record.row,
                    doc=record.doc,
                    doc_head=record.doc_head,
                    fargs=fargs,
                )
            )
    return summaries
