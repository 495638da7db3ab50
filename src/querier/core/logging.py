"""Logging configuration using structlog.

Logs go to stderr to keep stdout clean for rendered output (piping).
querier is also used as a library, so a caller that never runs
setup_logging() gets a quiet default: warnings only, on stderr.
"""

import logging
import sys
from typing import Any

import structlog

DEFAULT_LEVEL = logging.WARNING


class _LazyStderrFactory:
    """Resolve sys.stderr at logger creation time, not at configure() time.

    PrintLoggerFactory(file=sys.stderr) captures the file handle once.
    Under CliRunner tests the captured handle becomes stale when stderr
    is closed between invocations.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)


def _configure(level: int) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_LazyStderrFactory(),
        cache_logger_on_first_use=False,
    )


def setup_logging(verbose: bool = False) -> None:
    """Configure structlog for the querier CLI.

    Args:
        verbose: If True, log render events at DEBUG. Otherwise only
            warnings, such as dropped spreadsheet columns, are shown.
    """
    _configure(logging.DEBUG if verbose else DEFAULT_LEVEL)


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, optionally bound with a name.

    If nothing has configured structlog yet, the quiet stderr default is
    installed first; an application's own structlog.configure() call,
    earlier or later, takes precedence.
    """
    if not structlog.is_configured():
        _configure(DEFAULT_LEVEL)
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger
