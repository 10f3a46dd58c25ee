"""Structured logging setup.

structlog renders through the standard library logging module, which writes
to stderr. Nothing here ever touches stdout.
"""

import logging
import sys

import structlog

__all__ = ["configure_logging", "get_logger"]


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level=logging.WARNING):
    """Install a stderr handler on the root logger.

    Args:
        level: (int) Minimum level that gets written

    An existing root handler is left alone and only the level is changed,
    so an embedding application keeps its own setup.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(message)s", level=level, stream=sys.stderr)
    else:
        root.setLevel(level)


def get_logger(name=None):
    """Get a structlog logger bound to the given module name."""
    return structlog.get_logger(name)
