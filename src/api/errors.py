"""
Exceptions raised by the price source adapters and the HTTP client.
"""


class PriceSourceError(Exception):
    """
    Base exception for a single price source failure.

    The fetcher treats these as non-fatal and moves on to the next source.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class HttpStatusError(PriceSourceError):
    """Raised when a source responds with a non-2xx status."""

    def __init__(self, source: str, status_code: int):
        self.status_code = status_code
        super().__init__(source, f"HTTP {status_code}")


class ParseError(PriceSourceError):
    """Raised when a response body is not JSON or does not match the schema."""
    pass


class NumericFormatError(PriceSourceError):
    """Raised when a price value cannot be turned into a valid price."""

    def __init__(self, source: str, value: object):
        self.value = value
        super().__init__(source, f"invalid numeric format: {value!r}")


class RequestError(PriceSourceError):
    """Raised for transport failures (timeout, connection refused, TLS)."""
    pass


class ClientSetupError(Exception):
    """Raised when the shared HTTP client cannot be constructed."""
    pass
