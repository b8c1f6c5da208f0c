"""
Storefront API Pydantic Models

Shared request/response models for the cart and product endpoints.
"""
from typing import Dict, List
from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class CartItemRequest(BaseModel):
    product_id: str = Field(min_length=1, max_length=64)


class CartLineResponse(BaseModel):
    id: str
    name: str
    unit_price: float
    quantity: int


class TotalsResponse(BaseModel):
    subtotal: float
    shipping: float
    tax: float
    total: float


class FreeShippingResponse(BaseModel):
    threshold: float
    qualifies: bool
    remaining: float
    progress_percent: int


class CartResponse(BaseModel):
    items: List[CartLineResponse]
    totals: TotalsResponse
    auto_bundled: bool
    item_count: int
    is_empty: bool
    free_shipping: FreeShippingResponse


# ==================== PRODUCT MODELS ====================

class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    tagline: str
    description: str
    image_urls: List[str]
    price_line: str
    display_prices: Dict[str, float]
