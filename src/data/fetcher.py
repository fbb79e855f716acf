"""
Price fetching orchestration for solprice.

Tries each price source in a fixed priority order and returns the first
price obtained:

1. CoinGecko (primary, optional API key)
2. CoinCap
3. Binance

A failing source is reported and skipped. Sources are never retried and
never queried in parallel, so at most one request is in flight.
"""

from dataclasses import dataclass, field

from api.base import PriceSource
from api.binance import BinanceSource
from api.coincap import CoinCapSource
from api.coingecko import CoinGeckoSource
from api.errors import PriceSourceError
from api.http import HttpClient
from utils.formatting import format_price
from utils.logging import get_logger

# Module logger
logger = get_logger(__name__)


class FetcherError(Exception):
    """Base exception for price fetcher errors."""
    pass


class ExhaustionError(FetcherError):
    """Raised when every price source has failed."""

    def __init__(self, failures: list[PriceSourceError]):
        self.failures = list(failures)
        if self.failures:
            details = "; ".join(str(failure) for failure in self.failures)
            message = f"All price sources failed ({details})"
        else:
            message = "All price sources failed (no sources configured)"
        super().__init__(message)


@dataclass
class PriceQuote:
    """Result of a successful fetch."""

    price: float
    source: str
    failures: list[PriceSourceError] = field(default_factory=list)


def default_sources(api_key: str | None = None) -> list[PriceSource]:
    """
    Build the source list in fallback order.

    Args:
        api_key: Optional CoinGecko API key

    Returns:
        [CoinGecko, CoinCap, Binance]
    """
    return [
        CoinGeckoSource(api_key=api_key),
        CoinCapSource(),
        BinanceSource(),
    ]


class PriceFetcher:
    """
    Orchestrates the ordered fallback across price sources.

    Usage:
        with PriceFetcher(api_key=get_coingecko_api_key()) as fetcher:
            quote = fetcher.fetch_price()
    """

    def __init__(
        self,
        sources: list[PriceSource] | None = None,
        client: HttpClient | None = None,
        api_key: str | None = None,
    ):
        """
        Initialize the price fetcher.

        Args:
            sources: Sources in priority order (default: CoinGecko, CoinCap, Binance)
            client: Shared HTTP client (default: new instance)
            api_key: CoinGecko API key, only used for the default sources

        Raises:
            ClientSetupError: If the default HTTP client cannot be built
        """
        self.client = client or HttpClient()
        self.sources = list(sources) if sources is not None else default_sources(api_key)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Release the HTTP session."""
        self.client.close()

    def fetch_price(self) -> PriceQuote:
        """
        Fetch the price from the first source that succeeds.

        Returns:
            PriceQuote with the price, its source and earlier failures

        Raises:
            ExhaustionError: If every source failed
        """
        failures: list[PriceSourceError] = []
        total = len(self.sources)

        for position, source in enumerate(self.sources, start=1):
            logger.info("[%d/%d] Trying %s...", position, total, source.name)

            try:
                price = source.fetch(self.client)
            except PriceSourceError as e:
                logger.warning("  FAILED  %s: %s", source.name, e.message)
                failures.append(e)
                continue

            logger.info("  OK      %s: %s", source.name, format_price(price))
            return PriceQuote(price=price, source=source.name, failures=failures)

        raise ExhaustionError(failures)
