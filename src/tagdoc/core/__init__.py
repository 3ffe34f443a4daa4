"""Core module exports."""

from tagdoc.core.errors import (
    ConfigError,
    ErrorCode,
    TagdocError,
    TagPatternError,
)
from tagdoc.core.logging import (
    analysis_scope,
    configure_logging,
    get_logger,
    get_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "TagdocError",
    "TagPatternError",
    # Logging
    "analysis_scope",
    "configure_logging",
    "get_logger",
    "get_request_id",
]
