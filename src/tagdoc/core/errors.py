"""tagdoc error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Tag patterns
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Tag patterns (3xxx)
    TAG_PATTERN_NOT_GLOBAL = 3001
    TAG_PATTERN_GROUP_COUNT = 3002
    TAG_PATTERN_INVALID = 3003


@dataclass(frozen=True, slots=True)
class TagdocError(Exception):
    """Base error with structured context for editor/worker responses."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TAG_PATTERN_NOT_GLOBAL')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TagdocError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class TagPatternError(TagdocError):
    """A tag rule breaks the matching contract.

    Raised when a rule is built or applied, never per match. Callers should
    treat it as a programming error in the language table.
    """

    @classmethod
    def not_global(cls, pattern: str) -> "TagPatternError":
        return cls(
            code=ErrorCode.TAG_PATTERN_NOT_GLOBAL,
            message=f"Tag pattern must find all occurrences: {pattern}",
            details={"pattern": pattern},
        )

    @classmethod
    def wrong_group_count(cls, pattern: str, groups: int) -> "TagPatternError":
        return cls(
            code=ErrorCode.TAG_PATTERN_GROUP_COUNT,
            message=f"Tag pattern must have exactly one capture group, has {groups}: {pattern}",
            details={"pattern": pattern, "groups": groups},
        )

    @classmethod
    def invalid_pattern(cls, pattern: str, reason: str) -> "TagPatternError":
        return cls(
            code=ErrorCode.TAG_PATTERN_INVALID,
            message=f"Tag pattern does not compile: {reason}",
            details={"pattern": pattern, "reason": reason},
        )
