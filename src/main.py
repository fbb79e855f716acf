"""
solprice - Current Solana (SOL) price in USD

Command-line entry point.

Usage:
    python -m main

The price is taken from the first source that answers, in order:
CoinGecko, CoinCap, Binance. Set COINGECKO_API_KEY to send a CoinGecko
API key with the request.

Exit codes:
    0    Price fetched
    1    All sources failed, or the HTTP client could not be set up
    130  Interrupted by user
"""

import argparse
import sys

from api.errors import ClientSetupError
from config import ASSET_SYMBOL, COINGECKO_API_KEY_ENV, get_coingecko_api_key
from data.fetcher import ExhaustionError, PriceFetcher
from utils.formatting import format_price
from utils.logging import get_logger, setup_logging

# Module logger
logger = get_logger(__name__)


def run() -> int:
    """Fetch and report the price."""
    logger.info("Fetching current %s price...", ASSET_SYMBOL)

    try:
        with PriceFetcher(api_key=get_coingecko_api_key()) as fetcher:
            quote = fetcher.fetch_price()
    except ClientSetupError as e:
        logger.error("Could not set up HTTP client: %s", e)
        return 1
    except ExhaustionError as e:
        logger.error("%s", e)
        logger.info(
            "Hint: set %s to use a CoinGecko API key (higher rate limits)",
            COINGECKO_API_KEY_ENV,
        )
        return 1

    logger.info(
        "%s price: %s (source: %s)",
        ASSET_SYMBOL,
        format_price(quote.price),
        quote.source,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="solprice",
        description=(
            "Print the current SOL price in USD "
            "(CoinGecko, falling back to CoinCap then Binance)"
        ),
    )
    parser.parse_args(argv)

    setup_logging()

    try:
        return run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
