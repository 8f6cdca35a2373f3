"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing, non-numeric and non-finite values are treated as zero so that
    callers can always aggregate the result.

    Args:
        value: Raw numeric value from SQL, JSON or form input.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def optional_decimal(value) -> Decimal | None:
    """Return a Decimal, or None when the value is absent or blank."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return coerce_decimal(value)


def quantize_money(value: Decimal, step: Decimal = CENT) -> Decimal:
    """Round an amount to the currency's minor unit (cents by default)."""
    return value.quantize(step)


__all__ = ["CENT", "coerce_decimal", "optional_decimal", "quantize_money"]
