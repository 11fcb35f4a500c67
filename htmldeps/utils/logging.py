"""structlog helpers shared by every htmldeps module."""

import logging
import sys

import structlog


def get_logger(name: str):
    """Return a (lazy) structlog logger bound to *name*."""
    return structlog.get_logger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output to stderr, dropping events below *level*.

    Used by the command line entry point so rendered markup written to stdout
    is never interleaved with log lines.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
