"""
Configuration constants for the solprice project.

solprice - Current Solana (SOL) price in USD from public price APIs.
"""

import os

# =============================================================================
# Asset Configuration
# =============================================================================

# Display symbol of the asset
ASSET_SYMBOL = "SOL"

# Quote currency (CoinGecko vs_currencies code)
QUOTE_CURRENCY = "usd"

# Currency symbol used when printing prices
CURRENCY_SYMBOL = "$"

# =============================================================================
# HTTP Client Configuration
# =============================================================================

# Per-request timeout (seconds); a timed out source counts as failed
HTTP_TIMEOUT_SECONDS = 10

# Browser-like User-Agent, some public endpoints block default library agents
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# =============================================================================
# CoinGecko API Configuration
# =============================================================================

# Primary source. Free public endpoint, optional demo API key for higher limits.
COINGECKO_PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"
COINGECKO_ASSET_ID = "solana"

# Environment variable holding the optional API key
COINGECKO_API_KEY_ENV = "COINGECKO_API_KEY"

# Query parameter the key is sent as
COINGECKO_API_KEY_PARAM = "x_cg_demo_api_key"

# =============================================================================
# CoinCap API Configuration
# =============================================================================

COINCAP_ASSET_URL = "https://api.coincap.io/v2/assets/solana"

# =============================================================================
# Binance API Configuration
# =============================================================================

BINANCE_TICKER_URL = "https://api.binance.com/api/v3/ticker/price"

# SOL quoted against USDT (stablecoin stand-in for USD)
BINANCE_SYMBOL = "SOLUSDT"


def get_coingecko_api_key() -> str | None:
    """
    Read the optional CoinGecko API key from the environment.

    Returns:
        The key, or None when the variable is unset or empty
    """
    return os.environ.get(COINGECKO_API_KEY_ENV) or None
