"""Canonical language definitions for tag scanning.

This module defines the authoritative mapping of:
- Languages → file extensions (one extension group per language)
- Languages → tag rules (regexes whose single capture group is a symbol name)

Design decisions:
1. Extensions are stored WITHOUT the leading dot and in lowercase; import
   matching compares them case-sensitively, language detection does not
2. An extension belongs to exactly one language; companion extensions
   (html next to js, erb next to rb) share their script language's group
3. Tag rules are applied in declaration order, so rules that originate
   entries must come before doc-only rules that decorate them
4. Every rule is validated when this module is imported (PatternRule)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from tagdoc.tags.models import PatternRule

_r = PatternRule.compile


@dataclass(frozen=True, slots=True)
class TagLanguage:
    """Tag scanning definition for one language.

    Attributes:
        name: Unique identifier (lowercase, e.g., "python", "javascript")
        extensions: Extension group, dot-less and lowercase (e.g., "js", "html")
        tags: Tag rules, applied in order
    """

    name: str
    extensions: tuple[str, ...]
    tags: tuple[PatternRule, ...] = ()


# =============================================================================
# Language Definitions
# =============================================================================
# RULES:
# 1. Each pattern has exactly ONE capture group: the symbol name
# 2. Use (?:...) for every other grouping
# 3. Patterns are compiled with re.MULTILINE (^ anchors at each line)

_JS_IDENT = r"[A-Za-z_$][\w$]*"
_IDENT = r"[A-Za-z_]\w*"

ALL_LANGUAGES: tuple[TagLanguage, ...] = (
    TagLanguage(
        name="javascript",
        extensions=("js", "jsx", "mjs", "cjs", "html", "htm", "xhtml"),
        tags=(
            _r(rf"^\s*(?:export\s+(?:default\s+)?)?(?:async\s+)?function\s*\*?\s*({_JS_IDENT})\s*\(", "function"),
            _r(rf"^\s*(?:export\s+(?:default\s+)?)?class\s+({_JS_IDENT})", "class"),
            _r(rf"^\s*(?:var|let|const)\s+({_JS_IDENT})\s*=\s*(?:async\s+)?function\b", "function"),
            _r(rf"^\s*(?:var|let|const)\s+({_JS_IDENT})\s*=\s*(?:async\s+)?\([^)\n]*\)\s*=>", "function"),
            _r(rf"^\s*(?:{_JS_IDENT}\.)+({_JS_IDENT})\s*=\s*(?:async\s+)?function\b", "method"),
            _r(rf"^\s*({_JS_IDENT})\s*:\s*(?:async\s+)?function\b", "method"),
            _r(rf"^\s*(?:module\.)?exports\.({_JS_IDENT})\s*=", "export", doc_only=True),
        ),
    ),
    TagLanguage(
        name="typescript",
        extensions=("ts", "tsx", "mts", "cts"),
        tags=(
            _r(rf"^\s*(?:export\s+(?:default\s+)?)?(?:declare\s+)?(?:async\s+)?function\s*\*?\s*({_JS_IDENT})", "function"),
            _r(rf"^\s*(?:export\s+(?:default\s+)?)?(?:declare\s+)?(?:abstract\s+)?class\s+({_JS_IDENT})", "class"),
            _r(rf"^\s*(?:export\s+)?(?:declare\s+)?interface\s+({_JS_IDENT})", "interface"),
            _r(rf"^\s*(?:export\s+)?(?:declare\s+)?type\s+({_JS_IDENT})\s*(?:<[^>\n]*>)?\s*=", "type"),
            _r(rf"^\s*(?:export\s+)?(?:declare\s+)?(?:const\s+)?enum\s+({_JS_IDENT})", "enum"),
            _r(rf"^\s*(?:export\s+)?(?:const|let)\s+({_JS_IDENT})\s*(?::[^=\n]+)?=\s*(?:async\s+)?\([^)\n]*\)\s*(?::[^=\n]+)?=>", "function"),
        ),
    ),
    TagLanguage(
        name="python",
        extensions=("py", "pyw", "pyi"),
        tags=(
            _r(rf"^\s*(?:async\s+)?def\s+({_IDENT})\s*\(", "function"),
            _r(rf"^\s*class\s+({_IDENT})", "class"),
        ),
    ),
    TagLanguage(
        name="ruby",
        extensions=("rb", "rake", "gemspec", "ru", "erb"),
        tags=(
            _r(rf"^\s*def\s+(?:self\.)?({_IDENT}[!?=]?)", "method"),
            _r(rf"^\s*class\s+(?:{_IDENT}::)*({_IDENT})", "class"),
            _r(rf"^\s*module\s+(?:{_IDENT}::)*({_IDENT})", "module"),
        ),
    ),
    TagLanguage(
        name="php",
        extensions=("php", "phtml", "php5", "inc"),
        tags=(
            _r(
                rf"^\s*(?:(?:public|protected|private|static|abstract|final)\s+)*function\s+&?({_IDENT})\s*\(",
                "function",
            ),
            _r(rf"^\s*(?:(?:abstract|final)\s+)?class\s+({_IDENT})", "class"),
            _r(rf"^\s*interface\s+({_IDENT})", "interface"),
            _r(rf"^\s*trait\s+({_IDENT})", "trait"),
        ),
    ),
    TagLanguage(
        name="shell",
        extensions=("sh", "bash", "zsh", "ksh"),
        tags=(
            _r(r"^\s*function\s+([A-Za-z_][\w-]*)", "function"),
            _r(r"^\s*([A-Za-z_][\w-]*)\s*\(\s*\)", "function"),
        ),
    ),
    TagLanguage(
        name="c_cpp",
        extensions=("c", "h", "cc", "cpp", "cxx", "hpp", "hh", "hxx"),
        tags=(
            _r(
                r"^(?!\s*(?:if|for|while|switch|return|else|do)\b)"
                rf"[A-Za-z_][\w \t\*&:<>,]*?\b({_IDENT})\s*\([^;{{}}()]*\)\s*(?:const\s*)?\{{",
                "function",
            ),
            _r(rf"^\s*(?:typedef\s+)?(?:struct|class|union|enum)\s+({_IDENT})\s*(?::[^{{;\n]*)?\{{", "class"),
            _r(rf"^\s*#\s*define\s+({_IDENT})", "macro"),
        ),
    ),
    TagLanguage(
        name="java",
        extensions=("java",),
        tags=(
            _r(
                rf"^\s*(?:(?:public|protected|private|static|final|abstract)\s+)*"
                rf"(?:class|interface|enum|record)\s+({_IDENT})",
                "class",
            ),
            _r(
                r"^\s*(?:(?:public|protected|private|static|final|abstract|synchronized|native)\s+)+"
                rf"(?:<[^>\n]*>\s+)?[\w<>\[\], \t.]+?\s({_IDENT})\s*\(",
                "method",
            ),
        ),
    ),
    TagLanguage(
        name="go",
        extensions=("go",),
        tags=(
            _r(rf"^func\s+(?:\([^)\n]*\)\s*)?({_IDENT})\s*[\[(]", "function"),
            _r(rf"^type\s+({_IDENT})\s", "type"),
        ),
    ),
    TagLanguage(
        name="rust",
        extensions=("rs",),
        tags=(
            _r(
                rf"^\s*(?:pub(?:\([^)\n]*\))?\s+)?(?:const\s+)?(?:async\s+)?(?:unsafe\s+)?"
                rf"(?:extern\s+\"[^\"]*\"\s+)?fn\s+({_IDENT})",
                "function",
            ),
            _r(rf"^\s*(?:pub(?:\([^)\n]*\))?\s+)?(?:struct|enum|union)\s+({_IDENT})", "class"),
            _r(rf"^\s*(?:pub(?:\([^)\n]*\))?\s+)?(?:unsafe\s+)?trait\s+({_IDENT})", "trait"),
            _r(rf"^\s*macro_rules!\s*({_IDENT})", "macro"),
        ),
    ),
    TagLanguage(
        name="lua",
        extensions=("lua",),
        tags=(
            _r(rf"^\s*(?:local\s+)?function\s+(?:{_IDENT}[.:])*({_IDENT})\s*\(", "function"),
            _r(rf"^\s*(?:local\s+)?(?:{_IDENT}\.)*({_IDENT})\s*=\s*function\s*\(", "function"),
        ),
    ),
    TagLanguage(
        name="perl",
        extensions=("pl", "pm", "t"),
        tags=(
            _r(rf"^\s*sub\s+({_IDENT})", "function"),
            _r(rf"^\s*package\s+((?:{_IDENT}::)*{_IDENT})", "package"),
        ),
    ),
)

# =============================================================================
# Derived Mappings
# =============================================================================

LANGUAGES_BY_NAME: dict[str, TagLanguage] = {lang.name: lang for lang in ALL_LANGUAGES}

EXTENSION_GROUPS: tuple[tuple[str, ...], ...] = tuple(lang.extensions for lang in ALL_LANGUAGES)
"""One extension group per language, e.g. ("js", ..., "html", ...) for javascript."""

EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ext: lang.name for lang in ALL_LANGUAGES for ext in lang.extensions
}


def get_extension(path: str) -> str:
    """Extension of a path's last segment, without the dot, case kept.

    A segment with no dot is its own extension:
        src/app.js -> "js"
        archive.tar.gz -> "gz"
        Makefile -> "Makefile"
    """
    name = PurePosixPath(path.replace("\\", "/")).name
    return name.rsplit(".", 1)[-1]


def get_language_for_path(path: str) -> TagLanguage | None:
    """Language whose extension group contains the path's extension.

    Unlike import matching, language detection ignores case (App.PY is python).
    """
    if (name := EXTENSION_TO_LANGUAGE.get(get_extension(path).lower())) is None:
        return None
    return LANGUAGES_BY_NAME[name]


def get_tag_rules(name: str) -> tuple[PatternRule, ...]:
    """Tag rules for a language name (empty for unknown names)."""
    return LANGUAGES_BY_NAME[name].tags if name in LANGUAGES_BY_NAME else ()


# =============================================================================
# Validation (for tests only - NOT run at import time)
# =============================================================================


def validate_extension_groups() -> list[str]:
    """Validate that extensions are dot-less, lowercase and in one group only.

    Returns list of error messages (empty if valid).
    """
    errors: list[str] = []
    seen: dict[str, str] = {}
    for lang in ALL_LANGUAGES:
        for ext in lang.extensions:
            if ext.startswith(".") or ext != ext.lower():
                errors.append(f"{lang.name}: extension '{ext}' must be dot-less lowercase")
            if ext in seen:
                errors.append(f"{lang.name}: extension '{ext}' already belongs to {seen[ext]}")
            seen.setdefault(ext, lang.name)
    return errors


def validate_rule_order() -> list[str]:
    """Validate that doc-only rules come after a rule that can originate entries."""
    errors: list[str] = []
    for lang in ALL_LANGUAGES:
        originating = False
        for rule in lang.tags:
            if rule.doc_only and not originating:
                errors.append(f"{lang.name}: doc-only rule {rule.pattern.pattern!r} comes first")
            originating = originating or not rule.doc_only
    return errors
