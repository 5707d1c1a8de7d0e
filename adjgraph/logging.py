"""Package-wide logging for adjgraph.

Every module obtains its logger through `get_logger(__name__)`, so all
records flow into the single ``adjgraph`` logger configured here. The
algorithms log step summaries at DEBUG (matrix sizes, pairing counts, bounds)
and cost warnings at WARNING (large odd-node sets in route inspection).

Example:
    from adjgraph.logging import enable_debug_logging

    enable_debug_logging()  # show per-step algorithm details
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "adjgraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the adjgraph logger has its handler; cleared by reset_logging()
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``adjgraph`` logger.

    Only the first call after import (or after `reset_logging`) has any
    effect; later calls leave the existing handler and level alone.

    Args:
        level: Threshold for the ``adjgraph`` logger.
        format_string: Record format; `DEFAULT_FORMAT` when omitted.
        handler: Destination for records; stdout when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # pytest's caplog listens on the global root logger
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for an adjgraph module.

    The logger has no level of its own and defers to ``adjgraph``.

    Args:
        name: Dotted module name, normally ``__name__``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the threshold of the ``adjgraph`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show DEBUG records from every adjgraph module."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the INFO threshold."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the handler and level so the next setup starts from scratch.

    Intended for tests that install their own handler.
    """
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
