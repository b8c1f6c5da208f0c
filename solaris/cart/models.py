"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from solaris.services.money import to_decimal, multiply, to_float


@dataclass(frozen=True)
class LineItem:
    """Single product line in the cart. Quantity is always positive."""
    product_id: str
    name: str
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        """Unrounded price for all units on this line."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.product_id,
            "name": self.name,
            "unit_price": to_float(self.unit_price),
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class Cart:
    """
    Normalized cart state.

    Lines are unique per product id and kept in catalog order.
    auto_bundled tells the consumer that a component pair was silently
    converted into a bundle; only clear_auto_bundled() resets it.
    bundled_last is set only when the mutation that produced this cart
    converted a pair.
    """
    items: List[LineItem] = field(default_factory=list)
    auto_bundled: bool = False
    bundled_last: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    def quantities(self) -> Dict[str, int]:
        """Product id to quantity view of the cart."""
        return {item.product_id: item.quantity for item in self.items}

    @property
    def subtotal(self) -> Decimal:
        """Sum of line totals at full precision."""
        return sum((item.line_total for item in self.items), to_decimal(0))
