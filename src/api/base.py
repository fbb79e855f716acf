"""
Base class for price source adapters.

Each adapter knows one API: its URL, its optional credential and the shape
of its response. All of them reduce that response to a single USD price.
"""

import math
from abc import ABC, abstractmethod

from api.errors import NumericFormatError, ParseError
from api.http import HttpClient


class PriceSource(ABC):
    """
    A stateless price adapter for one third-party API.

    Subclasses set `name` and implement `fetch`.
    """

    name: str = ""

    @abstractmethod
    def fetch(self, client: HttpClient) -> float:
        """
        Fetch the current price.

        Args:
            client: Shared HTTP client

        Returns:
            Price in USD

        Raises:
            PriceSourceError: On any failure of this source
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def validate_price(source: str, price: float, raw: object) -> float:
    """Reject negative, NaN and infinite prices, reporting the raw value."""
    if not math.isfinite(price) or price < 0:
        raise NumericFormatError(source, raw)
    return price


def parse_price_number(source: str, value: object) -> float:
    """
    Convert a JSON number into a price.

    Raises:
        ParseError: If the value is not a JSON number
        NumericFormatError: If the number is not a valid price
    """
    # bool is an int subclass, but true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(source, f"unexpected price value: {value!r}")
    try:
        price = float(value)
    except OverflowError as e:
        # JSON integers are unbounded
        raise NumericFormatError(source, value) from e
    return validate_price(source, price, value)


def parse_price_string(source: str, value: object) -> float:
    """
    Convert a decimal string (e.g. "142.37") into a price.

    Raises:
        ParseError: If the value is not a string
        NumericFormatError: If the string is not a valid price
    """
    if not isinstance(value, str):
        raise ParseError(source, f"unexpected price value: {value!r}")
    try:
        price = float(value)
    except ValueError as e:
        raise NumericFormatError(source, value) from e
    return validate_price(source, price, value)
