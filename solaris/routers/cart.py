"""
Cart Router

Cart mutations for the storefront. Every endpoint returns the normalized
cart together with its totals snapshot and the auto-bundle flag.
"""
from fastapi import APIRouter, Depends, HTTPException

from solaris.cart import CartManager, get_catalog_item, summarize
from solaris.errors import ERROR_PRODUCT_NOT_FOUND
from solaris.logging import get_logger, sanitize_id_for_logging
from .deps import get_manager, get_session_id
from .models import CartItemRequest, CartResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart(
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """Get the session's cart with totals."""
    return summarize(manager.get_cart(session_id))


@router.post("/add", response_model=CartResponse)
async def add_to_cart(
    request: CartItemRequest,
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """Add one unit of a catalog product."""
    if get_catalog_item(request.product_id) is None:
        logger.warning(f"Add rejected for unknown product {sanitize_id_for_logging(request.product_id)}")
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return summarize(manager.add_item(session_id, request.product_id))


@router.post("/remove", response_model=CartResponse)
async def remove_from_cart(
    request: CartItemRequest,
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """Remove a whole line. Absent lines are a no-op."""
    return summarize(manager.remove_item(session_id, request.product_id))


@router.post("/increment", response_model=CartResponse)
async def increment_cart_item(
    request: CartItemRequest,
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """Add one unit to an existing line. Absent lines are a no-op."""
    return summarize(manager.increment_item(session_id, request.product_id))


@router.post("/decrement", response_model=CartResponse)
async def decrement_cart_item(
    request: CartItemRequest,
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """Take one unit off a line, dropping it at zero. Absent lines are a no-op."""
    return summarize(manager.decrement_item(session_id, request.product_id))


@router.delete("/auto-bundle", response_model=CartResponse)
async def dismiss_auto_bundle(
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """Dismiss the "bundle applied" notice."""
    return summarize(manager.clear_auto_bundled(session_id))


@router.delete("", response_model=CartResponse)
async def end_cart_session(
    session_id: str = Depends(get_session_id),
    manager: CartManager = Depends(get_manager),
):
    """End the session and discard its cart."""
    manager.reset_cart(session_id)
    return summarize(manager.get_cart(session_id))
