"""
Cart normalization engine.

Every operation takes the current Cart and returns the next one; the input
cart is never modified. After each mutation the raw quantities are
normalized: matched sunglasses/lenses pairs become bundle units and empty
lines are dropped.
"""
from typing import Dict, Tuple

from solaris.logging import get_logger
from .catalog import CATALOG, PRODUCTS, SUNGLASSES_ID, LENSES_ID, BUNDLE_ID
from .models import Cart, LineItem

logger = get_logger(__name__)


def normalize(quantities: Dict[str, int]) -> Tuple[Dict[str, int], bool]:
    """
    Convert component pairs into bundles and drop empty lines.

    Args:
        quantities: Raw product id to quantity mapping after a mutation

    Returns:
        (normalized quantities in catalog order, True if a pair was converted)
    """
    counts = {product.id: max(0, quantities.get(product.id, 0)) for product in PRODUCTS}
    bundles_before = counts[BUNDLE_ID]

    pairs = min(counts[SUNGLASSES_ID], counts[LENSES_ID])
    if pairs > 0:
        counts[SUNGLASSES_ID] -= pairs
        counts[LENSES_ID] -= pairs
        counts[BUNDLE_ID] += pairs

    unknown = set(quantities) - set(counts)
    if unknown:
        logger.warning(f"Dropping products outside the catalog: {sorted(unknown)}")

    normalized = {product_id: qty for product_id, qty in counts.items() if qty > 0}
    return normalized, counts[BUNDLE_ID] > bundles_before


def _build_cart(quantities: Dict[str, int], auto_bundled: bool, bundled: bool) -> Cart:
    items = [
        LineItem(
            product_id=product_id,
            name=CATALOG[product_id].name,
            unit_price=CATALOG[product_id].price,
            quantity=qty,
        )
        for product_id, qty in quantities.items()
    ]
    return Cart(items=items, auto_bundled=auto_bundled, bundled_last=bundled)


def _apply(cart: Cart, raw: Dict[str, int]) -> Cart:
    normalized, bundled = normalize(raw)
    if bundled:
        logger.debug(f"Auto-bundled pairs: {raw} -> {normalized}")
    return _build_cart(normalized, cart.auto_bundled or bundled, bundled)


def add_item(cart: Cart, product_id: str) -> Cart:
    """Add one unit, creating the line at quantity 1 if absent."""
    raw = cart.quantities()
    raw[product_id] = raw.get(product_id, 0) + 1
    return _apply(cart, raw)


def remove_item(cart: Cart, product_id: str) -> Cart:
    """Drop the whole line regardless of its quantity."""
    raw = cart.quantities()
    raw.pop(product_id, None)
    return _apply(cart, raw)


def increment_item(cart: Cart, product_id: str) -> Cart:
    """Add one unit to an existing line; absent lines are left alone."""
    raw = cart.quantities()
    if product_id in raw:
        raw[product_id] += 1
    return _apply(cart, raw)


def decrement_item(cart: Cart, product_id: str) -> Cart:
    """Take one unit off a line; a line reaching zero is removed."""
    raw = cart.quantities()
    if product_id in raw:
        raw[product_id] = max(0, raw[product_id] - 1)
    return _apply(cart, raw)


def clear_auto_bundled(cart: Cart) -> Cart:
    """Dismiss the auto-bundle notice."""
    return Cart(items=list(cart.items), auto_bundled=False)
