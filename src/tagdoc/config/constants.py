"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are display limits and the comment syntax the doc scanner understands.

For configurable values, see models.py (AnalysisConfig, LoggingConfig).
"""

# =============================================================================
# Display Limits
# =============================================================================

MAX_DOCHEAD_LENGTH = 80
"""Defining lines longer than this are cut down before being shown as a doc head."""

ELLIPSIS = "..."
"""Marker appended to truncated doc heads and unterminated argument lists."""

# =============================================================================
# Comment Syntax
# =============================================================================

LINE_COMMENT_MARKER = "#"
"""Prefix of line comments collected as documentation."""

BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
"""Delimiters of block comments collected as documentation."""
