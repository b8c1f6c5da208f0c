"""
Money Utilities - Safe Decimal operations for monetary values.

All cart arithmetic runs on Decimal at full precision; rounding to cents
happens once per displayed figure via round_money().
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Display precision for money (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for whole-number figures (percentages)
INTEGER_PRECISION = Decimal("1")


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Floats go through str() to avoid binary representation noise
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number, to_int: bool = False) -> Decimal:
    """
    Round a monetary value half-up to cents (or to a whole number).

    Args:
        value: Value to round
        to_int: If True, round to an integer

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def subtract(a: Number, b: Number) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value as "<symbol><amount> <code>".

    Args:
        value: Value to format
        currency: Currency code (USD, MXN, EUR)

    Returns:
        Formatted string, e.g. "$10.00 USD" or "€9.20 EUR"
    """
    # Symbols live with the display rates
    from solaris.services.currency import CURRENCY_SYMBOLS

    symbol = CURRENCY_SYMBOLS.get(currency, "")
    return f"{symbol}{round_money(value):.2f} {currency}"
