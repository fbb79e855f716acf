"""
CoinCap price source for solprice.

First fallback. No API key needed:

    GET /v2/assets/solana
    -> {"data": {"id": "solana", "priceUsd": "142.3700000000000000"}, ...}

Prices are sent as decimal strings.
"""

from api.base import PriceSource, parse_price_string
from api.errors import ParseError
from api.http import HttpClient
from config import COINCAP_ASSET_URL


class CoinCapSource(PriceSource):
    """CoinCap /assets/{id} adapter."""

    name = "CoinCap"

    def __init__(self, url: str = COINCAP_ASSET_URL):
        self.url = url

    def fetch(self, client: HttpClient) -> float:
        data = client.get_json(self.url, source=self.name)

        try:
            value = data["data"]["priceUsd"]
        except (KeyError, TypeError) as e:
            raise ParseError(self.name, "price not found") from e

        return parse_price_string(self.name, value)
