"""
Logging configuration for solprice.

The CLI has no other output channel: progress lines, per-source results
and the final price are all log records on stdout.
"""

import logging
import sys

# Console format, e.g. "INFO     | SOL price: $142.37 (source: CoinCap)"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Root namespace for all solprice loggers
ROOT_LOGGER_NAME = "solprice"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def setup_logging(level: int = logging.INFO) -> None:
    """
    Send solprice log records to stdout.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        level: Logging level (default: INFO)
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the solprice namespace.

    Usage:
        logger = get_logger(__name__)
        logger.warning("  FAILED  %s: %s", source.name, error.message)
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]
