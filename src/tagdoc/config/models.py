"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TAGDOC__SECTION__KEY)
3. Repo YAML (.tagdoc/config.yaml)
4. Global YAML (~/.config/tagdoc/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TAGDOC__<SECTION>__<KEY>=<VALUE>

Examples:
    TAGDOC__LOGGING__LEVEL=DEBUG
    TAGDOC__ANALYSIS__GUESS_FARGS=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TAGDOC__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every rule application.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class AnalysisConfig(BaseModel):
    """Tag analysis configuration.

    Env vars:
        TAGDOC__ANALYSIS__EXTRACT_DOCUMENTATION: Attach doc comments and doc heads
        TAGDOC__ANALYSIS__GUESS_FARGS: Guess argument lists for summaries
    """

    extract_documentation: bool = Field(
        default=True,
        description="Attach the preceding doc comment and a doc head to each tag.",
    )
    guess_fargs: bool = Field(
        default=True,
        description="Guess a parenthesized argument list after each tag name.",
    )
    extra_extension_groups: list[list[str]] = Field(
        default_factory=list,
        description="Additional extension groups for import suggestions, e.g. [[vue, js]]. "
        "Consulted before the built-in language table.",
    )

    @field_validator("extra_extension_groups")
    @classmethod
    def validate_extension_groups(cls, v: list[list[str]]) -> list[list[str]]:
        groups: list[list[str]] = []
        for group in v:
            if not group:
                raise ValueError("Extension groups must not be empty")
            groups.append([ext.lstrip(".") for ext in group])
        return groups


class TagdocConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
