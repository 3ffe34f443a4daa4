"""Logging for tagdoc: structlog events carried by stdlib loggers.

Every module logs through get_logger(__name__), which wraps the stdlib
logger of the same name. All of them sit below the "tagdoc" logger, which
holds only a NullHandler until configure_logging() runs, so an editor
embedding the engine sees nothing unless it opts in (or configures stdlib
logging itself).

configure_logging() is called by the CLI. It attaches one handler per
configured output to the "tagdoc" logger, rendering console or JSON lines.

Events logged inside analysis_scope() carry the scope's request id, so the
rule applications of one analyze_source() call can be grouped.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from tagdoc.config.models import LoggingConfig, LogOutputConfig

LIBRARY_LOGGER = "tagdoc"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

_request_id: ContextVar[str | None] = ContextVar("tagdoc_request_id", default=None)


def get_request_id() -> str | None:
    return _request_id.get()


@contextmanager
def analysis_scope(request_id: str | None = None) -> Iterator[str]:
    """Bind a request id for the duration of one analysis.

    Nested scopes keep the enclosing id unless one is passed explicitly.
    """
    rid = request_id or _request_id.get() or uuid4().hex[:12]
    token = _request_id.set(rid)
    try:
        yield rid
    finally:
        _request_id.reset(token)


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if (rid := _request_id.get()) is not None:
        event_dict.setdefault("request_id", rid)
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a tagdoc module, e.g. get_logger(__name__).

    Level filtering is done by the stdlib logger, so debug events are dropped
    before configure_logging() has been called.
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _formatter(
    output: LogOutputConfig,
    pre_chain: list[structlog.types.Processor],
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        colors = output.destination in ("stderr", "stdout") and stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def _handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Send tagdoc events to the outputs in ``config`` (default: console on stderr).

    Safe to call repeatedly; handlers from an earlier call are closed first.
    """
    from tagdoc.config.models import LoggingConfig

    config = config or LoggingConfig()
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _add_request_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            handler.close()
            library_logger.removeHandler(handler)
    library_logger.setLevel(config.level)
    library_logger.propagate = False

    for output in config.outputs:
        handler = _handler(output.destination)
        handler.setLevel(output.level or config.level)
        handler.setFormatter(_formatter(output, pre_chain))
        library_logger.addHandler(handler)
