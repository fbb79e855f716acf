"""
Utility modules for solprice.
"""

from .formatting import format_price
from .logging import get_logger, setup_logging

__all__ = [
    "format_price",
    "get_logger",
    "setup_logging",
]
