"""Logging configuration for customer formatting with custom verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Between DEBUG (10) and INFO (20) - for verbosity level 1
DISPATCH_LEVEL = 15

logging.addLevelName(DISPATCH_LEVEL, "DISPATCH")

# Verbosity level constants for external use
VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_DISPATCH = 1  # Show which renderer handled each format code
VERBOSITY_DEBUG = 2  # Full debug output

LOGGER_NAME = "customer_format"


class CustomerFormatLogger(logging.Logger):
    """Custom logger with a semantic method for format dispatch decisions."""

    def dispatch(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log dispatch decisions (verbosity level 1)."""
        if self.isEnabledFor(DISPATCH_LEVEL):
            self._log(DISPATCH_LEVEL, msg, args, **kwargs)


def get_logger() -> CustomerFormatLogger:
    """Get the customer_format logger instance (singleton).

    Use setup_logger() to configure it before first use.
    """
    logging.setLoggerClass(CustomerFormatLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, CustomerFormatLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (errors only), 1=dispatch, 2=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.ERROR,
        VERBOSITY_DISPATCH: DISPATCH_LEVEL,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(verbosity, logging.ERROR))

    output_stream = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to clean state.

    Useful for testing to ensure clean state between tests.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def dispatch_enabled() -> bool:
    """Check if dispatch-level logging is enabled (verbosity >= 1)."""
    return get_logger().isEnabledFor(DISPATCH_LEVEL)
