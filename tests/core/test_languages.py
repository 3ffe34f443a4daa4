"""Tests for core/languages.py module.

Covers:
- TagLanguage dataclass
- ALL_LANGUAGES registry and derived mappings
- Extension and language lookup
- Table validation helpers
- Representative tag rules per language
"""

from __future__ import annotations

import pytest

from tagdoc.core.languages import (
    ALL_LANGUAGES,
    EXTENSION_GROUPS,
    EXTENSION_TO_LANGUAGE,
    LANGUAGES_BY_NAME,
    TagLanguage,
    get_extension,
    get_language_for_path,
    get_tag_rules,
    validate_extension_groups,
    validate_rule_order,
)
from tagdoc.tags.models import PatternRule


def _names(language: str, source: str) -> list[str]:
    return [
        match.group(1)
        for rule in get_tag_rules(language)
        if not rule.doc_only
        for match in rule.pattern.finditer(source)
    ]


class TestTagLanguageDataclass:
    """Tests for TagLanguage dataclass."""

    def test_create_minimal_language(self) -> None:
        """Create language with minimal required fields."""
        lang = TagLanguage(name="test", extensions=("test",))
        assert lang.name == "test"
        assert lang.extensions == ("test",)
        assert lang.tags == ()

    def test_language_is_frozen(self) -> None:
        """TagLanguage is a frozen dataclass."""
        lang = TagLanguage(name="x", extensions=("x",))
        with pytest.raises(AttributeError):
            lang.name = "y"  # type: ignore[misc]


class TestRegistry:
    """Tests for ALL_LANGUAGES and derived mappings."""

    def test_names_unique(self) -> None:
        names = [lang.name for lang in ALL_LANGUAGES]
        assert len(names) == len(set(names))

    def test_every_language_has_rules(self) -> None:
        for lang in ALL_LANGUAGES:
            assert lang.tags, lang.name
            assert all(isinstance(rule, PatternRule) for rule in lang.tags)

    def test_one_group_per_language(self) -> None:
        assert len(EXTENSION_GROUPS) == len(ALL_LANGUAGES)
        assert EXTENSION_GROUPS[0] == LANGUAGES_BY_NAME["javascript"].extensions

    def test_markup_shares_group_with_script(self) -> None:
        """html files are grouped with javascript."""
        assert EXTENSION_TO_LANGUAGE["html"] == "javascript"
        assert EXTENSION_TO_LANGUAGE["js"] == "javascript"

    def test_extension_groups_valid(self) -> None:
        assert validate_extension_groups() == []

    def test_rule_order_valid(self) -> None:
        assert validate_rule_order() == []


class TestGetExtension:
    """Tests for get_extension."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("app.js", "js"),
            ("src/app.JS", "JS"),
            ("archive.tar.gz", "gz"),
            ("Makefile", "Makefile"),
            ("dir.d/Makefile", "Makefile"),
            ("C:\\code\\main.c", "c"),
            (".bashrc", "bashrc"),
        ],
    )
    def test_extension(self, path: str, expected: str) -> None:
        assert get_extension(path) == expected


class TestLanguageLookup:
    """Tests for get_language_for_path and get_tag_rules."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a.py", "python"),
            ("index.html", "javascript"),
            ("lib/x.ts", "typescript"),
            ("main.go", "go"),
            ("x.rs", "rust"),
            ("Foo.java", "java"),
            ("Rakefile.rake", "ruby"),
            ("src/App.PY", "python"),
        ],
    )
    def test_known(self, path: str, expected: str) -> None:
        lang = get_language_for_path(path)
        assert lang is not None
        assert lang.name == expected

    def test_unknown(self) -> None:
        assert get_language_for_path("notes.txt") is None

    def test_rules_for_unknown_name(self) -> None:
        assert get_tag_rules("cobol") == ()


class TestRules:
    """Representative sources for each language's rules."""

    def test_javascript(self) -> None:
        source = (
            "function foo(a, b) {}\n"
            "export async function bar() {}\n"
            "class Widget {}\n"
            "var baz = function(x) {};\n"
            "const qux = (y) => y;\n"
            "Widget.prototype.render = function() {};\n"
            "  handler: function(e) {},\n"
        )
        assert _names("javascript", source) == [
            "foo",
            "bar",
            "Widget",
            "baz",
            "qux",
            "render",
            "handler",
        ]

    def test_javascript_doc_only_exports(self) -> None:
        doc_only = [rule for rule in get_tag_rules("javascript") if rule.doc_only]
        assert len(doc_only) == 1
        assert doc_only[0].pattern.search("module.exports.foo = foo;").group(1) == "foo"

    def test_typescript(self) -> None:
        source = (
            "export function parse(s: string): Node {}\n"
            "export abstract class Base {}\n"
            "interface Options {}\n"
            "export type Id = string;\n"
            "const enum Color { Red }\n"
        )
        assert _names("typescript", source) == ["parse", "Base", "Options", "Id", "Color"]

    def test_python(self) -> None:
        source = "def foo(a):\n    pass\n\nclass Bar:\n    async def baz(self):\n        pass\n"
        assert _names("python", source) == ["foo", "baz", "Bar"]

    def test_ruby(self) -> None:
        source = "module Util\n  class Parser\n    def self.parse!(s)\n    end\n  end\nend\n"
        assert sorted(_names("ruby", source)) == ["Parser", "Util", "parse!"]

    def test_c(self) -> None:
        source = (
            "#define MAX 10\n"
            "static int add(int a, int b) {\n"
            "    if (a) {\n"
            "        return a;\n"
            "    }\n"
            "}\n"
            "struct point {\n"
        )
        assert sorted(_names("c_cpp", source)) == ["MAX", "add", "point"]

    def test_go(self) -> None:
        source = "func main() {}\nfunc (s *Server) Start(ctx context.Context) error {}\ntype Server struct {}\n"
        assert _names("go", source) == ["main", "Start", "Server"]

    def test_rust(self) -> None:
        source = "pub fn run() {}\npub(crate) async fn fetch() {}\nstruct Point;\ntrait Shape {}\n"
        assert _names("rust", source) == ["run", "fetch", "Point", "Shape"]

    def test_java(self) -> None:
        source = (
            "public class Main {\n"
            "    public static void main(String[] args) {\n"
            "    }\n"
            "    private List<String> names(int n) {\n"
            "    }\n"
            "}\n"
        )
        assert _names("java", source) == ["Main", "main", "names"]

    def test_shell(self) -> None:
        source = "function deploy {\n}\nbuild() {\n}\n"
        assert _names("shell", source) == ["deploy", "build"]
