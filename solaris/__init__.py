"""Solaris storefront: cart engine, pricing and HTTP surface."""

__version__ = "1.0.0"
