"""
Price fetching orchestration.
"""

from .fetcher import (
    ExhaustionError,
    FetcherError,
    PriceFetcher,
    PriceQuote,
    default_sources,
)

__all__ = [
    "PriceFetcher",
    "PriceQuote",
    "FetcherError",
    "ExhaustionError",
    "default_sources",
]
