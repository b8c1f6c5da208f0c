"""
Display Currency Conversion

Presentation-only conversion of USD prices into auxiliary currencies using
fixed multipliers. Results never feed back into cart state or totals.
"""
from decimal import Decimal
from typing import Dict

from solaris.services.money import to_decimal, round_money, multiply, format_money

BASE_CURRENCY = "USD"

# Fixed multipliers per 1 USD
DISPLAY_RATES: Dict[str, Decimal] = {
    "MXN": Decimal("18.00"),
    "EUR": Decimal("0.92"),
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "MXN": "$",
    "EUR": "€",
}

PRICE_LINE_SEPARATOR = " • "


def convert_for_display(amount_usd) -> Dict[str, Decimal]:
    """
    Convert a USD amount into every display currency.

    Returns:
        Mapping of currency code to amount rounded to cents, USD first.
    """
    usd = to_decimal(amount_usd)
    converted = {BASE_CURRENCY: round_money(usd)}
    for currency, rate in DISPLAY_RATES.items():
        converted[currency] = round_money(multiply(usd, rate))
    return converted


def format_price_line(amount_usd) -> str:
    """Render "$10.00 USD • $180.00 MXN • €9.20 EUR" for a USD amount."""
    usd = to_decimal(amount_usd)
    parts = [format_money(usd, BASE_CURRENCY)]
    parts.extend(
        format_money(multiply(usd, rate), currency)
        for currency, rate in DISPLAY_RATES.items()
    )
    return PRICE_LINE_SEPARATOR.join(parts)
