"""Tests for tags/models.py module."""

from __future__ import annotations

import re

import pytest

from tagdoc.core.errors import ErrorCode, TagPatternError
from tagdoc.tags.models import MatchRecord, PatternRule, TagSummary


class TestPatternRule:
    """Tests for PatternRule construction and validation."""

    def test_compile_defaults(self) -> None:
        rule = PatternRule.compile(r"^def (\w+)", "function")
        assert rule.kind == "function"
        assert rule.doc_only is False
        assert rule.find_all is True
        assert rule.pattern.flags & re.MULTILINE

    def test_compile_doc_only(self) -> None:
        assert PatternRule.compile(r"exports\.(\w+)", "export", doc_only=True).doc_only

    def test_rule_is_frozen(self) -> None:
        rule = PatternRule.compile(r"(\w+)", "name")
        with pytest.raises(AttributeError):
            rule.kind = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("source", [r"def \w+", r"(def) (\w+)", r"(?P<a>x)(?P<b>y)"])
    def test_wrong_group_count(self, source: str) -> None:
        with pytest.raises(TagPatternError) as exc_info:
            PatternRule.compile(source, "function")

        err = exc_info.value
        assert err.code == ErrorCode.TAG_PATTERN_GROUP_COUNT
        assert err.details["pattern"] == source

    def test_non_capturing_groups_allowed(self) -> None:
        rule = PatternRule.compile(r"(?:async\s+)?def\s+(\w+)", "function")
        assert rule.pattern.groups == 1

    def test_not_global(self) -> None:
        with pytest.raises(TagPatternError) as exc_info:
            PatternRule(re.compile(r"(\w+)"), "name", find_all=False)

        assert exc_info.value.code == ErrorCode.TAG_PATTERN_NOT_GLOBAL

    def test_invalid_pattern(self) -> None:
        with pytest.raises(TagPatternError) as exc_info:
            PatternRule.compile(r"(unclosed", "function")

        err = exc_info.value
        assert err.code == ErrorCode.TAG_PATTERN_INVALID
        assert err.details["pattern"] == "(unclosed"
        assert isinstance(err.__cause__, re.error)


class TestMatchRecord:
    """Tests for MatchRecord."""

    def test_to_dict_keys(self) -> None:
        record = MatchRecord(row=4, doc_head="def f():", guess_fargs=True, doc="Doc.", kind="function")
        assert record.to_dict() == {
            "row": 4,
            "docHead": "def f():",
            "guessFargs": True,
            "doc": "Doc.",
            "kind": "function",
        }

    def test_doc_is_mutable(self) -> None:
        record = MatchRecord(row=0, doc_head=None, guess_fargs=False, doc=None, kind="class")
        record.doc = "later"
        assert record.doc == "later"


class TestTagSummary:
    """Tests for TagSummary."""

    def test_defaults(self) -> None:
        summary = TagSummary(name="f", kind="function", row=0)
        assert summary.doc is None
        assert summary.doc_head is None
        assert summary.fargs == ""

    def test_to_dict(self) -> None:
        summary = TagSummary(name="f", kind="function", row=2, doc="d", doc_head="h", fargs="(a)")
        assert summary.to_dict() == {
            "name": "f",
            "kind": "function",
            "row": 2,
            "doc": "d",
            "docHead": "h",
            "fargs": "(a)",
        }
