"""Import suggestions: open files whose extension is compatible with a path.

The list of open files comes from the editor integration, so it is passed
in, either as a sequence of paths or as a zero-argument callable.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Union

from tagdoc.core.languages import EXTENSION_GROUPS, get_extension

if TYPE_CHECKING:
    from tagdoc.config.models import TagdocConfig

ExtensionGroups = Sequence[Sequence[str]]
OpenFilesSource = Union[Iterable[str], Callable[[], Iterable[str]]]

__all__ = [
    "ExtensionGroups",
    "OpenFileMatcher",
    "OpenFilesSource",
    "find_matching_open_files",
    "get_compatible_extensions",
    "get_extension",
]


def get_compatible_extensions(
    extension: str, groups: ExtensionGroups | None = None
) -> tuple[str, ...]:
    """Get the extensions compatible with ``extension``, e.g. ("js", ..., "html") for "js".

    An extension outside every group is only compatible with itself.
    """
    for group in EXTENSION_GROUPS if groups is None else groups:
        if extension in group:
            return tuple(group)
    return (extension,)


def find_matching_open_files(
    path: str,
    open_files: OpenFilesSource,
    groups: ExtensionGroups | None = None,
) -> list[str]:
    """Find all open files with an extension compatible with that of ``path``.

    Args:
        path: Path of the file being analyzed
        open_files: Open file paths, or a callable returning them
        groups: Extension groups to consult (default: the language table)

    Returns:
        Matching open files, in the order the source lists them.
    """
    candidates = open_files() if callable(open_files) else open_files
    supported = get_compatible_extensions(get_extension(path), groups)
    return [candidate for candidate in candidates if get_extension(candidate) in supported]


class OpenFileMatcher:
    """find_matching_open_files bound to an open-files provider and a group table."""

    def __init__(
        self,
        open_files: OpenFilesSource,
        groups: ExtensionGroups | None = None,
    ) -> None:
        self._open_files = open_files
        self._groups: ExtensionGroups = EXTENSION_GROUPS if groups is None else groups

    @classmethod
    def from_config(cls, config: TagdocConfig, open_files: OpenFilesSource) -> OpenFileMatcher:
        """Matcher whose configured extra groups take precedence over the built-in table."""
        groups = [*config.analysis.extra_extension_groups, *EXTENSION_GROUPS]
        return cls(open_files, groups)

    @property
    def groups(self) -> ExtensionGroups:
        return self._groups

    def compatible_extensions(self, path: str) -> tuple[str, ...]:
        return get_compatible_extensions(get_extension(path), self._groups)

    def find_matching_open_files(self, path: str) -> list[str]:
        return find_matching_open_files(path, self._open_files, self._groups)
