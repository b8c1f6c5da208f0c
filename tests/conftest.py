"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SOLARIS_ENV", "test")

from solaris.cart import Cart, CartManager, add_item


@pytest.fixture
def empty_cart():
    """Fresh empty cart"""
    return Cart()


@pytest.fixture
def cart_with_sunglasses():
    """Cart holding a single pair of sunglasses"""
    return add_item(Cart(), "sg1")


@pytest.fixture
def manager():
    """Isolated CartManager (not the process singleton)"""
    return CartManager()


@pytest.fixture
def build_cart():
    """Apply a sequence of add() calls to an empty cart."""
    def _build(*product_ids):
        cart = Cart()
        for product_id in product_ids:
            cart = add_item(cart, product_id)
        return cart
    return _build
