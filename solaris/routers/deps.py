"""Shared router dependencies."""
from typing import Optional

from fastapi import Header, HTTPException

from solaris.cart import CartManager, get_cart_manager
from solaris.errors import ERROR_INVALID_SESSION

DEFAULT_SESSION_ID = "anonymous"
MAX_SESSION_ID_LENGTH = 128


def get_session_id(x_session_id: Optional[str] = Header(default=None)) -> str:
    """Resolve the cart session from the X-Session-Id header."""
    if x_session_id is None:
        return DEFAULT_SESSION_ID
    session_id = x_session_id.strip()
    if not session_id or len(session_id) > MAX_SESSION_ID_LENGTH:
        raise HTTPException(status_code=400, detail=ERROR_INVALID_SESSION)
    return session_id


def get_manager() -> CartManager:
    """CartManager dependency, overridable in tests."""
    return get_cart_manager()
