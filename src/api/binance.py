"""
Binance price source for solprice.

Last fallback. Public ticker endpoint, SOL quoted in USDT:

    GET /api/v3/ticker/price?symbol=SOLUSDT
    -> {"symbol": "SOLUSDT", "price": "142.37000000"}
"""

from api.base import PriceSource, parse_price_string
from api.errors import ParseError
from api.http import HttpClient
from config import BINANCE_SYMBOL, BINANCE_TICKER_URL


class BinanceSource(PriceSource):
    """Binance /ticker/price adapter."""

    name = "Binance"

    def __init__(
        self,
        url: str = BINANCE_TICKER_URL,
        symbol: str = BINANCE_SYMBOL,
    ):
        """
        Initialize the Binance source.

        Args:
            url: Ticker endpoint URL
            symbol: Trading pair (e.g., "SOLUSDT")
        """
        self.url = url
        self.symbol = symbol

    def fetch(self, client: HttpClient) -> float:
        data = client.get_json(
            self.url,
            params={"symbol": self.symbol},
            source=self.name,
        )

        try:
            value = data["price"]
        except (KeyError, TypeError) as e:
            raise ParseError(self.name, "price not found") from e

        return parse_price_string(self.name, value)
