"""Cart package: catalog, models, normalization engine, pricing and manager."""
from .catalog import CatalogItem, CATALOG, get_catalog_item, list_catalog
from .models import LineItem, Cart
from .engine import (
    normalize,
    add_item,
    remove_item,
    increment_item,
    decrement_item,
    clear_auto_bundled,
)
from .pricing import Totals, calculate_totals, summarize
from .service import CartManager, get_cart_manager

__all__ = [
    "CatalogItem",
    "CATALOG",
    "get_catalog_item",
    "list_catalog",
    "LineItem",
    "Cart",
    "normalize",
    "add_item",
    "remove_item",
    "increment_item",
    "decrement_item",
    "clear_auto_bundled",
    "Totals",
    "calculate_totals",
    "summarize",
    "CartManager",
    "get_cart_manager",
]
