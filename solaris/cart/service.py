"""Cart manager holding one in-memory cart per session."""
import os
import time
from typing import Callable, Dict, Optional, Tuple

from solaris.logging import get_logger, sanitize_id_for_logging
from . import engine
from .models import Cart

logger = get_logger(__name__)

# Idle carts are dropped after this many seconds (24 hours by default)
CART_TTL = int(os.environ.get("CART_TTL_SECONDS", "86400"))


class CartManager:
    """
    Session-scoped carts kept in process memory.

    Features:
    - One independent Cart per session id, created empty on first access
    - Every mutation returns the normalized cart
    - Carts idle longer than the TTL are discarded; nothing is persisted
    """

    def __init__(self, ttl: int = CART_TTL, clock: Callable[[], float] = time.monotonic):
        self._carts: Dict[str, Tuple[Cart, float]] = {}
        self._ttl = ttl
        self._clock = clock

    def _expire(self) -> None:
        cutoff = self._clock() - self._ttl
        expired = [sid for sid, (_, touched) in self._carts.items() if touched < cutoff]
        for session_id in expired:
            del self._carts[session_id]
        if expired:
            logger.debug(f"Expired {len(expired)} idle cart(s)")

    def get_cart(self, session_id: str) -> Cart:
        """Get the session's cart, empty if the session is new or expired."""
        self._expire()
        entry = self._carts.get(session_id)
        return entry[0] if entry else Cart()

    def _mutate(self, session_id: str, operation: Callable[[Cart], Cart], action: str) -> Cart:
        before = self.get_cart(session_id)
        after = operation(before)
        self._carts[session_id] = (after, self._clock())

        safe_session = sanitize_id_for_logging(session_id)
        logger.debug(f"Cart {action} for session {safe_session}: {after.quantities()}")
        if after.bundled_last:
            logger.info(f"Bundle applied for session {safe_session}")
        return after

    def add_item(self, session_id: str, product_id: str) -> Cart:
        return self._mutate(session_id, lambda cart: engine.add_item(cart, product_id), "add")

    def remove_item(self, session_id: str, product_id: str) -> Cart:
        return self._mutate(session_id, lambda cart: engine.remove_item(cart, product_id), "remove")

    def increment_item(self, session_id: str, product_id: str) -> Cart:
        return self._mutate(session_id, lambda cart: engine.increment_item(cart, product_id), "increment")

    def decrement_item(self, session_id: str, product_id: str) -> Cart:
        return self._mutate(session_id, lambda cart: engine.decrement_item(cart, product_id), "decrement")

    def clear_auto_bundled(self, session_id: str) -> Cart:
        """Dismiss the bundle notice; always wins over earlier mutations."""
        return self._mutate(session_id, engine.clear_auto_bundled, "dismiss")

    def reset_cart(self, session_id: str) -> None:
        """End the session: forget its cart entirely."""
        self._carts.pop(session_id, None)
        logger.debug(f"Cart discarded for session {sanitize_id_for_logging(session_id)}")

    @property
    def session_count(self) -> int:
        """Number of live carts."""
        self._expire()
        return len(self._carts)


# Singleton instance
_cart_manager: Optional[CartManager] = None


def get_cart_manager() -> CartManager:
    """Get CartManager singleton."""
    global _cart_manager
    if _cart_manager is None:
        _cart_manager = CartManager()
    return _cart_manager
