"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local tagdoc package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of tagdoc modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("tagdoc"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def reset_tagdoc_logging() -> Generator[None, None, None]:
    """Put the "tagdoc" logger back to its unconfigured state after each test."""
    yield
    import structlog

    library_logger = logging.getLogger("tagdoc")
    for handler in library_logger.handlers:
        handler.close()
    library_logger.handlers[:] = [logging.NullHandler()]
    library_logger.propagate = True
    library_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
