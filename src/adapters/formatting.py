"""Formatting helpers shared by the command-line adapters."""

from decimal import Decimal

from src.utils.decimal_utils import CENT, quantize_money

_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "C$",
    "AUD": "A$",
    "JPY": "¥",
    "INR": "₹",
}

# Currencies without a minor unit.
_ZERO_DECIMAL = {"JPY"}


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format an amount in the given currency."""
    code = currency_code.upper()
    symbol = _SYMBOLS.get(code)
    if code in _ZERO_DECIMAL:
        rounded = quantize_money(value, Decimal("1"))
        amount = f"{abs(rounded):,.0f}"
    else:
        rounded = quantize_money(value, CENT)
        amount = f"{abs(rounded):,.2f}"
    sign = "-" if rounded < 0 else ""
    if symbol:
        return f"{sign}{symbol}{amount}"
    return f"{sign}{amount} {code}"


def format_signed(value: Decimal, currency_code: str) -> str:
    """Format a net balance with an explicit sign."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}{format_currency(abs(value), currency_code)}"


__all__ = ["format_currency", "format_signed"]
