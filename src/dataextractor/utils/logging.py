"""
Structured logging for dataextractor, built on structlog.

Loaders log through ``get_logger(__name__)``; applications decide
where the output goes by calling ``configure_logging`` once.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

import structlog


def _logger_factory(stream: TextIO | None) -> Callable[..., structlog.PrintLogger]:
    """Logger factory writing to ``stream``, or to whatever sys.stderr is at call time."""
    if stream is not None:
        return structlog.PrintLoggerFactory(file=stream)

    def factory(*args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)

    return factory


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog for the process.

    Log records go to stderr by default so that command output on
    stdout stays machine-readable.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: Render one JSON object per line instead of the
            coloured console format.
        stream: Alternative output stream.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        colors = (stream or sys.stderr).isatty()
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_logger_factory(stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Module logger; call as ``log = get_logger(__name__)``."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Context manager tagging the records of one table load.

    ``CsvBackend.load_data`` wraps its work in
    ``log_context(path=..., payload_group=...)`` so that every record,
    including the per-line debug ones, names the file and group.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
