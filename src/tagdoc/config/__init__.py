"""Config module exports."""

from tagdoc.config.loader import load_config
from tagdoc.config.models import (
    AnalysisConfig,
    LoggingConfig,
    LogOutputConfig,
    TagdocConfig,
)

__all__ = [
    "load_config",
    "TagdocConfig",
    "AnalysisConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
