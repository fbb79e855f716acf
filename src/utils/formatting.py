"""
Console formatting helpers.
"""

from config import CURRENCY_SYMBOL


def format_price(price: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format a price for display, e.g. 123.456789 -> "$123.46".

    Args:
        price: Price value
        symbol: Leading currency symbol

    Returns:
        Price rounded to two decimals with the currency symbol
    """
    return f"{symbol}{price:.2f}"
