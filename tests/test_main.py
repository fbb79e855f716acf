"""
Tests for the command-line entry point, configuration and formatting.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

import main
from api.errors import ClientSetupError, HttpStatusError
from config import COINGECKO_API_KEY_ENV, get_coingecko_api_key
from data.fetcher import ExhaustionError, PriceQuote
from utils.formatting import format_price
from utils.logging import get_logger, setup_logging


class TestFormatPrice:
    """Tests for price formatting."""

    @pytest.mark.parametrize(
        "price, expected",
        [
            (123.456789, "$123.46"),
            (142.37, "$142.37"),
            (0.0, "$0.00"),
            (1234.5, "$1234.50"),
            (0.004, "$0.00"),
        ],
    )
    def test_two_decimals_with_symbol(self, price, expected):
        assert format_price(price) == expected

    def test_custom_symbol(self):
        assert format_price(10, symbol="€") == "€10.00"


class TestApiKeyLookup:
    """Tests for reading COINGECKO_API_KEY."""

    def test_missing_key_is_none(self, monkeypatch):
        """Test that an absent variable is not an error."""
        monkeypatch.delenv(COINGECKO_API_KEY_ENV, raising=False)

        assert get_coingecko_api_key() is None

    def test_empty_key_is_none(self, monkeypatch):
        monkeypatch.setenv(COINGECKO_API_KEY_ENV, "")

        assert get_coingecko_api_key() is None

    def test_key_is_returned_verbatim(self, monkeypatch):
        monkeypatch.setenv(COINGECKO_API_KEY_ENV, " CG-key ")

        assert get_coingecko_api_key() == " CG-key "


class TestLogging:
    """Tests for logging setup."""

    def test_get_logger_namespace(self):
        """Test that loggers live under the solprice namespace."""
        assert get_logger("data.fetcher").name == "solprice.data.fetcher"
        assert get_logger("solprice.x").name == "solprice.x"
        assert get_logger("main") is get_logger("main")

    def test_setup_logging_level(self):
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger("solprice").level == logging.DEBUG

        setup_logging()
        assert logging.getLogger("solprice").level == logging.INFO

    def test_setup_logging_replaces_handlers(self):
        """Test that repeated setup leaves a single stdout handler."""
        setup_logging()
        setup_logging()

        handlers = logging.getLogger("solprice").handlers
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == "%(levelname)-8s | %(message)s"

    def test_console_output_format(self, capsys):
        """Test that records reach stdout in the console format."""
        setup_logging()
        get_logger("test").info("SOL price: %s", "$142.37")

        assert "INFO     | SOL price: $142.37" in capsys.readouterr().out


class TestMain:
    """Tests for main()."""

    @pytest.fixture
    def mock_fetcher(self):
        """Patch PriceFetcher in main and yield (class mock, instance mock)."""
        with patch("main.PriceFetcher") as fetcher_cls:
            instance = MagicMock()
            fetcher_cls.return_value.__enter__.return_value = instance
            yield fetcher_cls, instance

    def test_success_exit_code_and_output(self, mock_fetcher, caplog):
        """Test a successful run prints the formatted price."""
        _, instance = mock_fetcher
        instance.fetch_price.return_value = PriceQuote(price=142.3712, source="CoinCap")

        with caplog.at_level(logging.INFO, logger="solprice"):
            assert main.main([]) == 0

        assert "SOL price: $142.37 (source: CoinCap)" in caplog.text

    def test_api_key_passed_from_environment(self, mock_fetcher, monkeypatch):
        fetcher_cls, instance = mock_fetcher
        instance.fetch_price.return_value = PriceQuote(price=1.0, source="CoinGecko")
        monkeypatch.setenv(COINGECKO_API_KEY_ENV, "env-key")

        main.main([])

        fetcher_cls.assert_called_once_with(api_key="env-key")

    def test_missing_api_key_passes_none(self, mock_fetcher, monkeypatch):
        fetcher_cls, instance = mock_fetcher
        instance.fetch_price.return_value = PriceQuote(price=1.0, source="CoinGecko")
        monkeypatch.delenv(COINGECKO_API_KEY_ENV, raising=False)

        assert main.main([]) == 0
        fetcher_cls.assert_called_once_with(api_key=None)

    def test_exhaustion_exit_code_and_hint(self, mock_fetcher, caplog):
        """Test total failure returns non-zero with an API key hint."""
        _, instance = mock_fetcher
        instance.fetch_price.side_effect = ExhaustionError([HttpStatusError("CoinGecko", 429)])

        with caplog.at_level(logging.INFO, logger="solprice"):
            assert main.main([]) == 1

        assert "All price sources failed" in caplog.text
        assert COINGECKO_API_KEY_ENV in caplog.text

    def test_client_setup_error_exit_code(self, mock_fetcher):
        fetcher_cls, _ = mock_fetcher
        fetcher_cls.side_effect = ClientSetupError("Invalid HTTP timeout: 0")

        assert main.main([]) == 1

    def test_unexpected_error_exit_code(self, mock_fetcher):
        _, instance = mock_fetcher
        instance.fetch_price.side_effect = RuntimeError("boom")

        assert main.main([]) == 1

    def test_keyboard_interrupt_exit_code(self, mock_fetcher):
        _, instance = mock_fetcher
        instance.fetch_price.side_effect = KeyboardInterrupt

        assert main.main([]) == 130

    def test_rejects_arguments(self):
        """Test that the CLI takes no arguments."""
        with pytest.raises(SystemExit) as exc_info:
            main.main(["--top", "5"])

        assert exc_info.value.code == 2
