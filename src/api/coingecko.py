"""
CoinGecko price source for solprice.

Primary source. Uses the /simple/price endpoint:

    GET /api/v3/simple/price?ids=solana&vs_currencies=usd
    -> {"solana": {"usd": 142.37}}

An optional demo API key raises the free tier rate limit.
"""

from api.base import PriceSource, parse_price_number
from api.errors import ParseError
from api.http import HttpClient
from config import (
    COINGECKO_API_KEY_PARAM,
    COINGECKO_ASSET_ID,
    COINGECKO_PRICE_URL,
    QUOTE_CURRENCY,
)


class CoinGeckoSource(PriceSource):
    """
    CoinGecko /simple/price adapter.

    Usage:
        source = CoinGeckoSource(api_key=get_coingecko_api_key())
        price = source.fetch(client)
    """

    name = "CoinGecko"

    def __init__(
        self,
        api_key: str | None = None,
        url: str = COINGECKO_PRICE_URL,
        asset_id: str = COINGECKO_ASSET_ID,
        vs_currency: str = QUOTE_CURRENCY,
    ):
        """
        Initialize the CoinGecko source.

        Args:
            api_key: Optional API key, sent verbatim as a query parameter
            url: Price endpoint URL
            asset_id: CoinGecko coin ID (e.g., "solana")
            vs_currency: Quote currency code (e.g., "usd")
        """
        self.api_key = api_key
        self.url = url
        self.asset_id = asset_id
        self.vs_currency = vs_currency

    def build_params(self) -> dict[str, str]:
        """Query parameters for the price request."""
        params = {
            "ids": self.asset_id,
            "vs_currencies": self.vs_currency,
        }
        if self.api_key:
            params[COINGECKO_API_KEY_PARAM] = self.api_key
        return params

    def fetch(self, client: HttpClient) -> float:
        data = client.get_json(self.url, params=self.build_params(), source=self.name)

        try:
            value = data[self.asset_id][self.vs_currency]
        except (KeyError, TypeError) as e:
            raise ParseError(self.name, "price not found") from e

        return parse_price_number(self.name, value)

    def __repr__(self) -> str:
        # Never expose the key
        key_state = "set" if self.api_key else "unset"
        return f"CoinGeckoSource(api_key={key_state})"
