"""
Price source adapters for external APIs.

Fallback order:
- CoinGecko: primary, optional API key
- CoinCap: first fallback
- Binance: last fallback (SOL/USDT ticker)
"""

from .base import PriceSource
from .binance import BinanceSource
from .coincap import CoinCapSource
from .coingecko import CoinGeckoSource
from .errors import (
    ClientSetupError,
    HttpStatusError,
    NumericFormatError,
    ParseError,
    PriceSourceError,
    RequestError,
)
from .http import HttpClient

__all__ = [
    # Sources
    "PriceSource",
    "CoinGeckoSource",
    "CoinCapSource",
    "BinanceSource",
    # HTTP
    "HttpClient",
    # Errors
    "PriceSourceError",
    "HttpStatusError",
    "ParseError",
    "NumericFormatError",
    "RequestError",
    "ClientSetupError",
]
