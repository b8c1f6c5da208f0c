"""
Order totals for a cart.

Totals are derived on every read and accumulated at full Decimal precision.
Rounding to cents happens only in Totals.rounded() / to_dict().
"""
from dataclasses import dataclass
from decimal import Decimal

from solaris.services.money import to_decimal, round_money, multiply, subtract, to_float
from .models import Cart

FREE_SHIP_THRESHOLD = Decimal("100.00")
FLAT_SHIPPING_FEE = Decimal("14.95")
TAX_RATE = Decimal("0.0825")

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Totals:
    """Subtotal, shipping, tax and grand total in USD."""
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    def rounded(self) -> "Totals":
        """Copy with each figure rounded to cents independently."""
        return Totals(
            subtotal=round_money(self.subtotal),
            shipping=round_money(self.shipping),
            tax=round_money(self.tax),
            total=round_money(self.total),
        )

    def to_dict(self) -> dict:
        shown = self.rounded()
        return {
            "subtotal": to_float(shown.subtotal),
            "shipping": to_float(shown.shipping),
            "tax": to_float(shown.tax),
            "total": to_float(shown.total),
        }


def shipping_for(subtotal: Decimal, is_empty: bool) -> Decimal:
    """Flat fee below the free shipping threshold, free otherwise or when empty."""
    if is_empty or subtotal >= FREE_SHIP_THRESHOLD:
        return _ZERO
    return FLAT_SHIPPING_FEE


def calculate_totals(cart: Cart) -> Totals:
    """Compute totals; shipping is not taxed."""
    subtotal = cart.subtotal
    shipping = shipping_for(subtotal, cart.is_empty)
    tax = multiply(subtotal, TAX_RATE)
    return Totals(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
    )


def qualifies_for_free_shipping(subtotal) -> bool:
    return to_decimal(subtotal) >= FREE_SHIP_THRESHOLD


def remaining_for_free_shipping(subtotal) -> Decimal:
    """How much more must be spent to unlock free shipping (never negative)."""
    return max(_ZERO, subtract(FREE_SHIP_THRESHOLD, subtotal))


def free_shipping_progress(subtotal) -> int:
    """Percentage of the free shipping threshold reached, capped at 100."""
    ratio = to_decimal(subtotal) / FREE_SHIP_THRESHOLD * 100
    return min(100, int(round_money(ratio, to_int=True)))


def summarize(cart: Cart) -> dict:
    """
    Build the consumer-facing snapshot of a cart.

    Includes normalized lines, rounded totals, free shipping progress and
    the auto-bundle flag.
    """
    totals = calculate_totals(cart)
    return {
        "items": [item.to_dict() for item in cart.items],
        "totals": totals.to_dict(),
        "auto_bundled": cart.auto_bundled,
        "item_count": cart.item_count,
        "is_empty": cart.is_empty,
        "free_shipping": {
            "threshold": to_float(FREE_SHIP_THRESHOLD),
            "qualifies": qualifies_for_free_shipping(totals.subtotal),
            "remaining": to_float(round_money(remaining_for_free_shipping(totals.subtotal))),
            "progress_percent": free_shipping_progress(totals.subtotal),
        },
    }
