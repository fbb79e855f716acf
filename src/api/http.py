"""
Shared HTTP client for the price sources.

One client is built per run and reused for every source request.
Requests are sequential, so the session needs no locking.
"""

import math
from typing import Any

import requests

from api.errors import ClientSetupError, HttpStatusError, ParseError, RequestError
from config import HTTP_TIMEOUT_SECONDS, USER_AGENT
from utils.logging import get_logger

# Module logger
logger = get_logger(__name__)


class HttpClient:
    """
    Thin wrapper around a requests session with a fixed timeout.

    Usage:
        with HttpClient(timeout=10) as client:
            data = client.get_json(url, params={"ids": "solana"}, source="CoinGecko")
    """

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
    ):
        """
        Initialize the HTTP client.

        Args:
            timeout: Per-request timeout in seconds (must be positive)
            user_agent: User-Agent header sent with every request

        Raises:
            ClientSetupError: If the timeout is invalid
        """
        if (
            isinstance(timeout, bool)
            or not isinstance(timeout, (int, float))
            or not math.isfinite(timeout)
            or timeout <= 0
        ):
            raise ClientSetupError(f"Invalid HTTP timeout: {timeout!r}")

        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": user_agent,
        })

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        source: str = "",
    ) -> Any:
        """
        Issue a single GET request and decode the JSON body.

        No retries: a failure here is final for the calling source.

        Args:
            url: Endpoint URL
            params: Query parameters
            source: Source name used in raised errors

        Returns:
            Decoded JSON body

        Raises:
            RequestError: Transport failure or timeout
            HttpStatusError: Non-2xx response
            ParseError: Body is not valid JSON
        """
        # Query string may carry an API key, only the bare URL is logged
        logger.debug("GET %s", url)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise RequestError(source, f"request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise HttpStatusError(source, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(source, f"invalid JSON body: {e}") from e
